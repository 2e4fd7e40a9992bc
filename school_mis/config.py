import os
from datetime import timedelta
from dotenv import load_dotenv


load_dotenv()


def _env_flag(name, default):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


class Config:
    SECRET_KEY = os.getenv("JWT_SECRET_KEY", "fallback-jwt")  # used for both Flask and JWT
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "fallback-jwt")
    # In-memory SQLite unless a real database is configured
    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI", "sqlite://")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    REDIS_URL = os.getenv("REDIS_URL")
    RATELIMIT_STORAGE_URI = os.getenv("REDIS_URL", "memory://")
    RATELIMIT_ENABLED = True
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    FLASK_ENV = os.getenv("FLASK_ENV", "development")
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16 MB cap for base64 uploads

    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=8)
    JWT_TOKEN_LOCATION = ["headers", "cookies"]
    JWT_COOKIE_SECURE = _env_flag("JWT_COOKIE_SECURE", "true")  # only over HTTPS
    JWT_COOKIE_SAMESITE = "Lax"
    JWT_COOKIE_CSRF_PROTECT = False

    SIMULATED_LATENCY_MS = int(os.getenv("SIMULATED_LATENCY_MS", "0"))
    AUDIT_LOG_FILE = os.getenv("AUDIT_LOG_FILE", os.path.join("logs", "audit.log"))
    SEED_DEMO_DATA = _env_flag("SEED_DEMO_DATA", "true")

    LOAN_PERIOD_DAYS = 14
    TERM_ATTENDANCE_DAYS = 44  # approx. school days across two months of a term


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "testing-secret-key-with-enough-length"
    SECRET_KEY = "testing-secret-key-with-enough-length"
    JWT_COOKIE_SECURE = False
    RATELIMIT_ENABLED = False
    RATELIMIT_STORAGE_URI = "memory://"
    SIMULATED_LATENCY_MS = 0
    SEED_DEMO_DATA = False
