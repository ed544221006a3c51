from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "configuquote-api"
    ENV: str = "dev"

    GEMINI_API_KEY: str | None = None
    GEMINI_CHAT_MODEL: str = "gemini-2.0-flash"

    LLM_PROVIDER: str = "gemini"  # gemini | ollama
    OLLAMA_MODEL: str = "qwen2.5:7b-instruct"
    OLLAMA_BASE_URL: str = "http://127.0.0.1:11434"
    OLLAMA_TIMEOUT: float = 120.0

    QUOTE_NOTIFY_ENABLED: bool = True
    QUOTE_NOTIFY_RECIPIENT: str = "operations-team@example.com"
    QUOTE_NOTIFY_SUBJECT: str = "New ConfiguQuote Request Generated"

settings = Settings()
