"""
Purchase ledger.

A user owns at most one ``Purchase`` row per course. The check below handles
the common case; the ``(user_id, course_id)`` unique constraint catches two
requests racing past it.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from coursemart.core.errors import CourseNotFound, UserNotFound
from coursemart.models.course import Purchase
from coursemart.models.user import User
from coursemart.services.catalog import get_course

logger = logging.getLogger(__name__)


def get_user(db: Session, username: str) -> User:
    user = db.query(User).filter(User.username == username).first()
    if user is None:
        raise UserNotFound()
    return user


def purchase_course(db: Session, username: str, course_id: int | str) -> bool:
    """Record a purchase. Returns False when the user already owns the course."""
    course = get_course(db, course_id)
    if course is None:
        raise CourseNotFound()

    user = get_user(db, username)

    already_purchased = (
        db.query(Purchase)
        .filter(Purchase.user_id == user.id, Purchase.course_id == course.id)
        .first()
    )
    if already_purchased is not None:
        return False

    db.add(Purchase(user_id=user.id, course_id=course.id))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Concurrent duplicate purchase of course %s by %r", course.id, username)
        return False

    logger.info("User %r purchased course %s", username, course.id)
    return True


def list_purchased_course_ids(db: Session, username: str) -> list[int]:
    return get_user(db, username).purchased_courses
