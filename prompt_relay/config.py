from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Prompt relay settings loaded from environment."""

    # Service
    service_name: str = "prompt-relay"
    log_level: str = "INFO"

    # Gemini API
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash-preview-09-2025"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_timeout_seconds: float = 60.0

    @property
    def gemini_generate_url(self) -> str:
        return f"{self.gemini_base_url}/models/{self.gemini_model}:generateContent"

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
