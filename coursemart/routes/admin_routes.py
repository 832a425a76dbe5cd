from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from coursemart.auth import service
from coursemart.auth.dependencies import login_credentials, require_admin
from coursemart.auth.tokens import Role
from coursemart.core.config import Settings, get_settings
from coursemart.database import get_db
from coursemart.routes.schemas import CourseRequest, SignupRequest, serialize_course
from coursemart.services import catalog

router = APIRouter(tags=['admin'])


@router.post('/signup')
def admin_signup(
    payload: SignupRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    token = service.signup(db, Role.ADMIN, payload.username, payload.password, settings)
    return {'message': 'Admin created successfully', 'token': token}


@router.post('/login')
def admin_login(
    credentials: tuple[str, str] = Depends(login_credentials),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    username, password = credentials
    token = service.login(db, Role.ADMIN, username, password, settings)
    return {'message': 'Logged in successfully', 'token': token}


@router.post('/courses', dependencies=[Depends(require_admin)])
def create_course(payload: CourseRequest, db: Session = Depends(get_db)):
    course = catalog.create_course(db, payload.to_fields())
    return {'message': 'Course created successfully', 'courseId': course.id}


@router.put('/courses/{course_id}', dependencies=[Depends(require_admin)])
def update_course(course_id: str, payload: CourseRequest, db: Session = Depends(get_db)):
    course = catalog.update_course(db, course_id, payload.to_fields())
    return {'message': 'Course updated successfully', 'course': serialize_course(course)}


@router.get('/courses', dependencies=[Depends(require_admin)])
def list_courses(db: Session = Depends(get_db)):
    return {'courses': [serialize_course(course) for course in catalog.list_courses(db)]}
