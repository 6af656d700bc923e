"""
AWS Clients

Lambda 実行環境ではプロセスが複数の呼び出しで再利用されるため、
クライアントは初回アクセス時に1度だけ生成し、以降は使い回す。
"""
from functools import lru_cache

import boto3
import structlog

from src.infrastructure.config import get_settings

logger = structlog.get_logger()


@lru_cache()
def get_dynamodb_resource():
    """DynamoDB リソースのシングルトンを取得"""
    settings = get_settings()
    logger.info("dynamodb_resource_created", region=settings.region)
    return boto3.resource("dynamodb", region_name=settings.region)
