import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Mapping

from dotenv import load_dotenv


class ConfigurationError(RuntimeError):
    """Raised when startup configuration is missing or malformed."""


def _get_int(environ: Mapping[str, str], name: str, default: int) -> int:
    value = environ.get(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}.") from exc


def _get_list(environ: Mapping[str, str], name: str) -> tuple[str, ...]:
    value = environ.get(name) or ""
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    jwt_secret_key: str = field(repr=False)
    database_url: str
    jwt_algorithm: str = "HS256"
    jwt_expires_seconds: int = 3600
    bcrypt_rounds: int = 10
    app_env: str = "development"
    port: int = 3000
    cors_origins: tuple[str, ...] = ()


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    if environ is None:
        load_dotenv()
        environ = os.environ

    jwt_secret_key = environ.get("JWT_SECRET_KEY", "")
    if not jwt_secret_key:
        raise ConfigurationError("JWT_SECRET_KEY must be set.")

    database_url = environ.get("DATABASE_URL", "")
    if not database_url:
        raise ConfigurationError("DATABASE_URL must be set.")

    return Settings(
        jwt_secret_key=jwt_secret_key,
        database_url=database_url,
        jwt_algorithm=environ.get("JWT_ALGORITHM", "HS256"),
        jwt_expires_seconds=_get_int(environ, "JWT_EXPIRES_SECONDS", 3600),
        bcrypt_rounds=_get_int(environ, "BCRYPT_ROUNDS", 10),
        app_env=environ.get("APP_ENV", "development"),
        port=_get_int(environ, "PORT", 3000),
        cors_origins=load_cors_origins(environ),
    )


def load_cors_origins(environ: Mapping[str, str] | None = None) -> tuple[str, ...]:
    if environ is None:
        load_dotenv()
        environ = os.environ
    return _get_list(environ, "CORS_ORIGINS")


@lru_cache
def get_settings() -> Settings:
    return load_settings()
