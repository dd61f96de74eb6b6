# main.py
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from farmlog.application import configure_logging, create_app
from farmlog.config import settings
from farmlog.services.db_init import bootstrap_store

configure_logging()

store = bootstrap_store()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    store.dispose()


app = create_app(store, lifespan=lifespan)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=True)
