"""Configuration management for CineChat."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""
    
    # OpenAI API
    openai_api_key: str = Field("", description="OpenAI API key")
    OPENAI_API_KEY: str = Field("", description="OpenAI API key (alternative naming)")
    openai_model: str = Field("gpt-4o-mini", description="Model used for movie extraction")
    
    @property
    def effective_openai_key(self) -> str:
        """Get the effective OpenAI API key from either field."""
        return self.openai_api_key or self.OPENAI_API_KEY
    
    # Logging
    log_level: str = Field("INFO", description="Logging level")
    
    # Extraction settings
    max_chat_chars: int = Field(100000, description="Chat log characters sent to the model")
    request_timeout: int = Field(60, description="Timeout for extraction requests in seconds")
    max_retries: int = Field(3, description="Maximum retry attempts")
    retry_delay: float = Field(1.0, description="Base retry delay in seconds")
    retry_backoff: float = Field(2.0, description="Exponential base for the wait between retries")
    retry_max_wait: float = Field(20.0, description="Longest wait between retries in seconds")
    
    # Response cache
    cache_dir: str = Field("cache/llm_cache", description="Directory for cached model responses")
    cache_ttl_hours: int = Field(24, description="Cache time-to-live in hours")
    
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


# Global settings instance
settings = Settings()
