from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    supabase_url: str = ""
    supabase_key: str = ""
    scenarios_table: str = "scenarios"
    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"
    report_title: str = "ROI Analysis Report"
    report_footer: str = "Generated by Invoice ROI Simulator"

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
