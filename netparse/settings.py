## Application settings configuration

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="NETPARSE_", extra="ignore")

    # "ollama" or "openai" (any OpenAI-compatible server)
    llm_provider: str = "ollama"

    # Ollama settings
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.2"

    # OpenAI-compatible settings
    openai_base_url: str = "https://api.groq.com/openai/v1"
    openai_api_key: Optional[str] = None
    openai_model: str = "llama-3.1-8b-instant"

    request_timeout: float = 120.0


settings = Settings()
