import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default=False):
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Shared secret for the admin API and the render trigger
    ADMIN_TOKEN = os.getenv("ADMIN_TOKEN", "")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Static output
    OUTPUT_ROOT = os.getenv("OUTPUT_ROOT", "/srv/www")

    # Render trigger: "inprocess" builds inside this process,
    # "http" calls the renderer service at RENDERER_URL
    RENDER_MODE = os.getenv("RENDER_MODE", "inprocess")
    RENDERER_URL = os.getenv("RENDERER_URL", "http://renderer:3002")
    RENDER_TIMEOUT_SECONDS = float(os.getenv("RENDER_TIMEOUT_SECONDS", "30"))

    # Autopost scheduler
    SCHEDULER_ENABLED = _env_bool("SCHEDULER_ENABLED", True)
    SCHEDULER_INTERVAL_SECONDS = float(os.getenv("SCHEDULER_INTERVAL_SECONDS", "60"))
    SCHEDULER_BATCH_SIZE = int(os.getenv("SCHEDULER_BATCH_SIZE", "5"))
    AUTOPOST_RETRY_BACKOFF_MINUTES = int(os.getenv("AUTOPOST_RETRY_BACKOFF_MINUTES", "15"))


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///landing_factory.db")


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    ADMIN_TOKEN = "test-admin-token-0123456789"
    OUTPUT_ROOT = os.getenv("TEST_OUTPUT_ROOT", "/tmp/landing-factory-test")
    RENDER_MODE = "inprocess"
    SCHEDULER_ENABLED = False


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
