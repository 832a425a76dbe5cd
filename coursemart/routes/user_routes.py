from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from coursemart.auth import service
from coursemart.auth.dependencies import login_credentials, require_user
from coursemart.auth.tokens import Role, TokenClaims
from coursemart.core.config import Settings, get_settings
from coursemart.database import get_db
from coursemart.routes.schemas import SignupRequest, serialize_course
from coursemart.services import catalog, purchases

router = APIRouter(tags=['users'])


@router.post('/signup')
def user_signup(
    payload: SignupRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    token = service.signup(db, Role.USER, payload.username, payload.password, settings)
    return {'message': 'User created successfully', 'token': token}


@router.post('/login')
def user_login(
    credentials: tuple[str, str] = Depends(login_credentials),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    username, password = credentials
    token = service.login(db, Role.USER, username, password, settings)
    return {'message': 'Logged in successfully', 'token': token}


@router.get('/courses', dependencies=[Depends(require_user)])
def list_courses(db: Session = Depends(get_db)):
    return {'courses': [serialize_course(course) for course in catalog.list_courses(db)]}


@router.post('/courses/{course_id}')
def purchase_course(
    course_id: str,
    claims: TokenClaims = Depends(require_user),
    db: Session = Depends(get_db),
):
    if not purchases.purchase_course(db, claims.username, course_id):
        return {'message': 'Course already purchased'}
    return {'message': 'Course purchased successfully'}


@router.get('/purchasedCourses')
def list_purchased_courses(
    claims: TokenClaims = Depends(require_user),
    db: Session = Depends(get_db),
):
    return {'purchasedCourses': purchases.list_purchased_course_ids(db, claims.username)}
