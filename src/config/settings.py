from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Gateway credentials; upstream rejects missing keys, nothing is checked here
    pica_secret_key: str = ""
    pica_openai_connection_key: str = ""
    pica_anthropic_connection_key: str = ""
    pica_perplexity_connection_key: str = ""
    pica_tavily_connection_key: str = ""
    pica_firecrawl_connection_key: str = ""

    gateway_base_url: str = "https://api.picaos.com/v1/passthrough"
    gateway_timeout: float | None = None
    anthropic_version: str = "2023-06-01"

    log_level: str = "INFO"
    app_host: str = "0.0.0.0"
    app_port: int = 8000


def get_settings() -> Settings:
    """Read configuration at call time; nothing is cached between requests."""
    return Settings()
