from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):  # type: ignore
    debug: bool = False

    openai_api_key: str = ''
    openai_main_model_name: str = 'gpt-4o-mini'
    openai_temperature: float = 0.7
    openai_max_retries: int = 0
    openai_request_timeout: int = 30

    generation_max_tokens: int = 4096
    evaluation_max_tokens: int = 1500
    explanation_max_tokens: int = 2000

    sentry_dsn: str = ''

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )


settings = Settings()
