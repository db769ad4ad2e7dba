# toolshub/config.py

import os


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _database_url(default: str = None) -> str:
    url = os.environ.get("DATABASE_URL", default)
    # Heroku/Render style URLs
    if url and url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    return url


class Config:
    FLASK_ENV = "production"
    SECRET_KEY = os.environ.get("SECRET_KEY", "change-me")

    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    REDIS_URL = os.environ.get("REDIS_URL")
    CACHE_TTL_LISTING = int(os.environ.get("CACHE_TTL_LISTING", 300))

    PUBLIC_BASE_URL = os.environ.get("PUBLIC_BASE_URL", "https://toolshub4u.web.app")
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    ADMIN_USERNAME = os.environ.get("ADMIN_USERNAME")
    ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD")
    ADMIN_AUTH_REQUIRED = _env_bool("ADMIN_AUTH_REQUIRED", False)
    ADMIN_TOKEN_HOURS = int(os.environ.get("ADMIN_TOKEN_HOURS", 12))

    SEED_ENABLED = _env_bool("SEED_ENABLED", False)

    RESERVED_SLUGS = {"add", "all", "featured"}

    RATELIMIT_ENABLED = _env_bool("RATELIMIT_ENABLED", True)
    RATELIMIT_STORAGE_URI = os.environ.get("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_HEADERS_ENABLED = True


class DevelopmentConfig(Config):
    FLASK_ENV = "development"
    SQLALCHEMY_DATABASE_URI = _database_url("sqlite:///toolshub.db")
    SEED_ENABLED = _env_bool("SEED_ENABLED", True)


class ProductionConfig(Config):
    FLASK_ENV = "production"


class TestingConfig(Config):
    FLASK_ENV = "testing"
    TESTING = True
    SECRET_KEY = "testing-secret-key-with-enough-length"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    REDIS_URL = None
    ADMIN_USERNAME = "admin"
    ADMIN_PASSWORD = "s3cret-pass"
    ADMIN_AUTH_REQUIRED = False
    SEED_ENABLED = True
    RATELIMIT_ENABLED = False
    PUBLIC_BASE_URL = "https://toolshub.test"


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
