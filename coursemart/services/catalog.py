import logging
from typing import Any

from sqlalchemy.orm import Session

from coursemart.core.errors import CourseNotFound
from coursemart.models.course import Course

logger = logging.getLogger(__name__)

# Range of the Integer primary key column on every supported backend.
MIN_COURSE_ID = -(2 ** 31)
MAX_COURSE_ID = 2 ** 31 - 1


def parse_course_id(course_id: int | str) -> int | None:
    try:
        parsed_id = int(course_id)
    except (TypeError, ValueError):
        return None
    if not MIN_COURSE_ID <= parsed_id <= MAX_COURSE_ID:
        return None
    return parsed_id


def get_course(db: Session, course_id: int | str) -> Course | None:
    parsed_id = parse_course_id(course_id)
    if parsed_id is None:
        return None
    return db.get(Course, parsed_id)


def list_courses(db: Session) -> list[Course]:
    return db.query(Course).order_by(Course.id).all()


def create_course(db: Session, fields: dict[str, Any]) -> Course:
    course = Course(**fields)
    db.add(course)
    db.commit()
    db.refresh(course)
    logger.info("Created course %s", course.id)
    return course


def update_course(db: Session, course_id: int | str, fields: dict[str, Any]) -> Course:
    course = get_course(db, course_id)
    if course is None:
        raise CourseNotFound()

    for name, value in fields.items():
        setattr(course, name, value)
    db.commit()
    db.refresh(course)
    logger.info("Updated course %s", course.id)
    return course
