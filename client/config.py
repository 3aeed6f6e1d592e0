from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WATER_", env_file=".env", extra="ignore")

    api_url: str = Field(default="http://localhost:5000", description="Base URL of the backend")
    timeout_seconds: float = Field(default=5.0)

client_settings = ClientSettings()
