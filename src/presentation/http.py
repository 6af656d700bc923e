"""API Gateway レスポンス整形"""
from __future__ import annotations

import base64
import json
from decimal import Decimal
from typing import Any

from boto3.dynamodb.types import Binary
from botocore.exceptions import ClientError

JSON_HEADERS = {
    "content-type": "application/json",
}


class DecimalEncoder(json.JSONEncoder):
    """DynamoDB の Decimal を JSON の数値に、Binary を base64 文字列に変換する"""

    def default(self, obj):
        if isinstance(obj, Decimal):
            return int(obj) if obj % 1 == 0 else float(obj)
        if isinstance(obj, Binary):
            obj = obj.value
        if isinstance(obj, (bytes, bytearray)):
            return base64.b64encode(obj).decode("ascii")
        if isinstance(obj, (set, frozenset, tuple)):
            return list(obj)
        return super().default(obj)


def response(status_code: int, body: dict[str, Any]) -> dict[str, Any]:
    """API Gateway レスポンス形式"""
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(body, cls=DecimalEncoder),
    }


def serialize_error(exc: BaseException) -> dict[str, Any]:
    """
    例外をレスポンス用の dict に変換

    ストアのエラーは種類を区別せず、そのままの内容を返す。
    ClientError の場合は AWS のエラーコードとリクエスト情報も含める。
    """
    error: dict[str, Any] = {
        "name": type(exc).__name__,
        "message": str(exc),
    }
    if isinstance(exc, ClientError):
        details = exc.response.get("Error", {})
        metadata = exc.response.get("ResponseMetadata", {})
        error["name"] = details.get("Code", error["name"])
        error["code"] = details.get("Code")
        error["metadata"] = {
            "httpStatusCode": metadata.get("HTTPStatusCode"),
            "requestId": metadata.get("RequestId"),
        }
    return error
