from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    redis_url: str = "redis://localhost:6379"
    anthropic_api_key: str = ""

    namespace: str = "cutelinks"
    base_url: str = "http://localhost:8000"

    # Slugs: "words" draws from the word lists, "pool" hands out pre-generated ones
    slug_strategy: str = "words"
    max_slug_length: int | None = 10
    pool_low_water_mark: int = 5
    pool_batch_size: int = 16
    # 0 surfaces a slug collision to the caller instead of regenerating
    slug_conflict_retries: int = 0

    captcha_tolerance: int = 3
    captcha_ttl_seconds: int = 600
    redirect_countdown_seconds: int = 5

    # LLM slug source: "claude", "ollama", or "none"
    llm_provider: str = "none"
    llm_model: str = "claude-sonnet-4-5-20250929"
    ollama_model: str = "llama3.2"
    ollama_url: str = "http://localhost:11434"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
