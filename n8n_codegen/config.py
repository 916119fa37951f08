# n8n_codegen/config.py
from functools import lru_cache
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    app_name: str = "n8n Workflow CodeGen"

    # n8n REST API
    n8n_url: str = Field(default="http://localhost:5678")
    n8n_api_key: str = Field(default="")

    # Optional LLM refactoring; AI is disabled while the key is unset
    openai_api_key: Optional[str] = Field(default=None)
    openai_model: str = Field(default="gpt-3.5-turbo")
    openai_base_url: str = Field(default="https://api.openai.com/v1")

    log_level: str = Field(default="WARNING")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    @property
    def n8n_api_base(self) -> str:
        return f"{self.n8n_url.rstrip('/')}/api/v1"

class Features:
    def __init__(self, settings: Settings):
        self._settings = settings

    @property
    def ai_refactor(self) -> bool:
        return bool(self._settings.openai_api_key)

@lru_cache()
def get_settings() -> Settings:
    return Settings()

@lru_cache()
def get_features() -> Features:
    return Features(get_settings())
