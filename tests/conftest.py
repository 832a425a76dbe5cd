import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from coursemart.core.config import Settings
from coursemart.database import Base
from coursemart.models import admin, course, user  # noqa: F401


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_secret_key='test-secret',
        database_url='sqlite:///:memory:',
        bcrypt_rounds=4,
    )


@pytest.fixture
def db():
    engine = create_engine('sqlite:///:memory:')
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    session = testing_session_local()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
