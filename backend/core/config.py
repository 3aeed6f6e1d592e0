from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WATER_", env_file=".env", extra="ignore")

    surveys_path: str = Field(default="surveys.json", description="JSON array file backing the surveys collection")
    issues_path: str = Field(default="issues.json", description="JSON array file backing the issues collection")

    host: str = Field(default="0.0.0.0", description="Interface uvicorn binds to")
    port: int = Field(default=5000, description="Port uvicorn listens on")
    cors_origins: List[str] = Field(default_factory=lambda: ["*"], description="Origins allowed to call the API")
    log_level: str = Field(default="INFO")

settings = Settings()
