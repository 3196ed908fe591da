from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "Crockford ID Service"

    # Identifier defaults (Env Vars - optional)
    UPPERCASE: bool = True
    CHECKSUM: bool = True
    GROUP_SIZE: int = 4

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
