"""
Credential enrollment and verification for both roles.

Admins and users live in separate stores; ``Role`` picks the store. Token
issuance for login is composed by ``login`` so that ``authenticate`` stays a
pure credential check.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from coursemart.auth import passwords
from coursemart.auth.tokens import Role, create_access_token
from coursemart.core.config import Settings
from coursemart.core.errors import AlreadyExists, UnknownUser, WrongPassword
from coursemart.models.admin import Admin
from coursemart.models.user import User

logger = logging.getLogger(__name__)

ACCOUNT_MODELS = {
    Role.ADMIN: Admin,
    Role.USER: User,
}

ALREADY_EXISTS_MESSAGES = {
    Role.ADMIN: "Admin already exists",
    Role.USER: "User already exists",
}


def find_account(db: Session, role: Role, username: str) -> Admin | User | None:
    model = ACCOUNT_MODELS[role]
    return db.query(model).filter(model.username == username).first()


def signup(db: Session, role: Role, username: str, password: str, settings: Settings) -> str:
    if find_account(db, role, username) is not None:
        logger.warning("Signup rejected, %s %r already exists", role.value, username)
        raise AlreadyExists(ALREADY_EXISTS_MESSAGES[role])

    password_hash = passwords.hash_password(password, rounds=settings.bcrypt_rounds)

    account = ACCOUNT_MODELS[role](username=username, password_hash=password_hash)
    db.add(account)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Signup rejected, concurrent signup for %s %r", role.value, username)
        raise AlreadyExists(ALREADY_EXISTS_MESSAGES[role]) from exc
    logger.info("Created %s %r", role.value, username)

    return create_access_token(username, role, settings)


def authenticate(db: Session, role: Role, username: str, password: str) -> Admin | User:
    account = find_account(db, role, username)
    if account is None:
        logger.warning("Login rejected, unknown %s %r", role.value, username)
        raise UnknownUser()

    if not passwords.verify_password(password, account.password_hash):
        logger.warning("Login rejected, wrong password for %s %r", role.value, username)
        raise WrongPassword()

    return account


def login(db: Session, role: Role, username: str, password: str, settings: Settings) -> str:
    authenticate(db, role, username, password)
    logger.info("Logged in %s %r", role.value, username)
    return create_access_token(username, role, settings)
