from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "INFO"

    # stream sink rendering
    stream_na_rep: str = "NA"
    stream_float_digits: int = 7

    # mock simulation runner
    demo_niter: int = 10
    demo_db_url: str = "sqlite://"
    demo_table: str = "output"

    model_config = SettingsConfigDict(env_prefix="OUTSINK_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
