import os


class BaseConfig:
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    SITE_TITLE = "Next.js on ECS"
    SITE_DESCRIPTION = "Simple Next.js app deployed on AWS ECS"
    SITE_LANG = "en"
    HEALTH_CHECK_PATH = "/api/health"


class DevConfig(BaseConfig):
    DEBUG = True


class ProdConfig(BaseConfig):
    DEBUG = False


class TestConfig(BaseConfig):
    DEBUG = False
    TESTING = True


def get_config(name: str | None):
    env = name or os.getenv("FLASK_ENV") or os.getenv("ENV") or "dev"
    env = env.lower()
    if env.startswith("prod"):
        return ProdConfig
    if env.startswith("test"):
        return TestConfig
    return DevConfig
