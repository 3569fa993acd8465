from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    specs_dir: Path = Path("specs")
    examples_dir: Path = Path("examples")
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="SDK_DOCS_", env_file=".env", case_sensitive=False, extra="ignore"
    )


def get_settings() -> Settings:
    return Settings()
