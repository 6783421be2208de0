from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Bitbucket Webhooks"
    WEBHOOK_PATH: str = "/webhooks"
    LOG_LEVEL: str = "INFO"

    # Route dispatch failures to the module logger when no hook is set
    LOG_WEBHOOK_ERRORS: bool = True

    model_config = {
        "env_file": ".env"
    }


@lru_cache
def get_settings():
    return Settings()


settings = get_settings()
