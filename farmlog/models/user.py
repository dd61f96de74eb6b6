# farmlog/models/user.py
from sqlalchemy import Column, Integer, String, UniqueConstraint

from farmlog.models.base import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("username", name="uq_users_username"),)
    label = "User"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), nullable=False, index=True)
    password = Column(String(255), nullable=False)  # "<hash hex>.<salt hex>"
