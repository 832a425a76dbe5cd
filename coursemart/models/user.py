"""User model definitions."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from coursemart.database import Base


class User(Base):
    """Represents a marketplace customer."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)

    purchases = relationship("Purchase", back_populates="user", order_by="Purchase.id")

    @property
    def purchased_courses(self) -> list[int]:
        return [purchase.course_id for purchase in self.purchases]
