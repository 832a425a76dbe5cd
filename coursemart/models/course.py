"""Course and purchase ledger model definitions."""

from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from coursemart.database import Base


class Course(Base):
    """Represents a course listed in the catalog."""
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String)
    description = Column(String)
    price = Column(Float)
    image_link = Column(String)
    published = Column(Boolean, default=False)


class Purchase(Base):
    """Records that a user bought a course."""
    __tablename__ = "purchases"
    __table_args__ = (UniqueConstraint("user_id", "course_id", name="uq_purchases_user_course"),)

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False)

    user = relationship("User", back_populates="purchases")
