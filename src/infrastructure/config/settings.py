"""Application Settings"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    アプリケーション設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    デプロイ側の変数名（CAST_TABLE_NAME / TABLE_NAME / REGION）をそのまま読む。
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Service
    service_name: str = "movie-cast-api"
    log_level: str = "INFO"

    # AWS
    region: str = "eu-west-1"

    # DynamoDB
    cast_table_name: str = "MovieCast"
    table_name: str = "Movies"


@lru_cache()
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得"""
    return Settings()
