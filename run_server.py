# run_server.py
import os
import sys

from farmlog.config import settings


def _prepare_workdir_for_pyinstaller():
    """
    When started as a PyInstaller bundle the data is unpacked under _MEIPASS.
    Switch there so the relative default database path resolves next to it.
    """
    base = getattr(sys, "_MEIPASS", None)
    if base and os.path.isdir(base):
        os.chdir(base)


def main():
    _prepare_workdir_for_pyinstaller()

    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
