from pydantic_settings import BaseSettings

from core.constants import DEFAULT_API_ENDPOINT, DEFAULT_USER_AGENT


class Settings(BaseSettings):
    api_endpoint: str = DEFAULT_API_ENDPOINT
    request_timeout: float = 20.0
    user_agent: str = DEFAULT_USER_AGENT
    follow_redirects: bool = True
    debug: bool = False

    class Config:
        env_file = ".env"
        env_prefix = "criticalmaps_"
        extra = "ignore"


settings = Settings()


def get_settings() -> Settings:
    return settings
