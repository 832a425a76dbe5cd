"""Admin model definitions."""

from sqlalchemy import Column, Integer, String
from coursemart.database import Base


class Admin(Base):
    """Represents an administrator account."""
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
