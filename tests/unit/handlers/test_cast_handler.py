"""Movie Cast Lambda Handler Unit Tests"""
import json
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError
import pytest

from src.handlers.cast import handler
from src.infrastructure.config import get_settings

CAST_ITEMS = [
    {"movieId": Decimal("550"), "roleName": "Tyler Durden", "actorName": "Brad Pitt"},
    {"movieId": Decimal("550"), "roleName": "The Narrator", "actorName": "Edward Norton"},
]


@pytest.fixture
def cast_table():
    table = MagicMock()
    table.name = "cast"
    table.query.return_value = {"Items": CAST_ITEMS, "Count": 2}
    return table


@pytest.fixture
def movie_table():
    table = MagicMock()
    table.name = "movies"
    table.get_item.return_value = {
        "Item": {
            "id": Decimal("550"),
            "title": "Fight Club",
            "genre_ids": [Decimal("18")],
            "overview": "...",
            "extraField": "x",
        }
    }
    return table


@pytest.fixture(autouse=True)
def dynamodb(monkeypatch, cast_table, movie_table):
    """共有 DynamoDB リソースを差し替える"""
    settings = get_settings()
    tables = {
        settings.cast_table_name: cast_table,
        settings.table_name: movie_table,
    }
    resource = MagicMock()
    resource.Table.side_effect = lambda name: tables[name]
    monkeypatch.setattr(handler, "get_dynamodb_resource", lambda: resource)
    return resource


def invoke(params):
    event = {"rawPath": "/movies/cast", "queryStringParameters": params}
    context = SimpleNamespace(aws_request_id="test-request")
    result = handler.lambda_handler(event, context)
    return result["statusCode"], json.loads(result["body"]), result["headers"]


class TestValidation:
    """入力検証のテスト"""

    def test_missing_query_parameters(self, cast_table):
        """パラメータ無し → 500 Missing query parameters"""
        status, body, headers = invoke(None)

        assert status == 500
        assert body == {"message": "Missing query parameters"}
        assert headers["content-type"] == "application/json"
        cast_table.query.assert_not_called()

    @pytest.mark.parametrize("params", [{}, {"facts": "true"}])
    def test_missing_movie_id(self, cast_table, params):
        """movieId 無し（空のパラメータを含む） → 500 Missing movie Id parameter"""
        status, body, _ = invoke(params)

        assert status == 500
        assert body == {"message": "Missing movie Id parameter"}
        cast_table.query.assert_not_called()

    @pytest.mark.parametrize("movie_id", ["fight-club", "5_50"])
    def test_non_numeric_movie_id(self, cast_table, movie_table, movie_id):
        """数値でない movieId はストアに問い合わせずに拒否する"""
        status, body, _ = invoke({"movieId": movie_id, "facts": "true"})

        assert status == 500
        assert body == {"message": "Invalid movie Id parameter"}
        cast_table.query.assert_not_called()
        movie_table.get_item.assert_not_called()


class TestCastQuery:
    """キャスト取得のテスト"""

    def test_movie_id_only(self, cast_table, movie_table):
        """movieId のみ → キー条件だけの Query を1回、movie は含めない"""
        status, body, headers = invoke({"movieId": "550"})

        assert status == 200
        assert headers == {"content-type": "application/json"}
        cast_table.query.assert_called_once_with(
            KeyConditionExpression=Key("movieId").eq(550)
        )
        movie_table.get_item.assert_not_called()
        assert body == {
            "cast": [
                {"movieId": 550, "roleName": "Tyler Durden", "actorName": "Brad Pitt"},
                {"movieId": 550, "roleName": "The Narrator", "actorName": "Edward Norton"},
            ]
        }

    def test_role_name_takes_precedence_over_actor_name(self, cast_table):
        """roleName と actorName が両方あれば roleName だけで絞り込む"""
        status, _, _ = invoke({"movieId": "550", "roleName": "Brad", "actorName": "Edward"})

        assert status == 200
        cast_table.query.assert_called_once_with(
            KeyConditionExpression=Key("movieId").eq(550),
            FilterExpression=Attr("roleName").begins_with("Brad"),
        )

    def test_actor_name_filter(self, cast_table):
        invoke({"movieId": "550", "actorName": "Edward"})

        cast_table.query.assert_called_once_with(
            KeyConditionExpression=Key("movieId").eq(550),
            FilterExpression=Attr("actorName").begins_with("Edward"),
        )

    def test_facts_attaches_movie(self, movie_table):
        """facts=true → title / genre_ids / overview のみを付与"""
        status, body, _ = invoke({"movieId": "550", "facts": "true"})

        assert status == 200
        movie_table.get_item.assert_called_once_with(Key={"id": 550})
        assert body["movie"] == {"title": "Fight Club", "genre_ids": [18], "overview": "..."}
        assert len(body["cast"]) == 2

    def test_facts_movie_not_found(self, movie_table):
        """映画が無ければ movie キーを含めない（null にもしない）"""
        movie_table.get_item.return_value = {}

        status, body, _ = invoke({"movieId": "550", "facts": "true"})

        assert status == 200
        assert "movie" not in body
        assert len(body["cast"]) == 2

    def test_facts_not_literal_true(self, movie_table):
        status, body, _ = invoke({"movieId": "550", "facts": "yes"})

        assert status == 200
        assert "movie" not in body
        movie_table.get_item.assert_not_called()


class TestStoreFailures:
    """ストア障害のテスト"""

    def test_cast_query_failure(self, cast_table, movie_table):
        """キャスト検索の失敗 → 500 error"""
        cast_table.query.side_effect = ClientError(
            {
                "Error": {"Code": "ResourceNotFoundException", "Message": "Table not found"},
                "ResponseMetadata": {"HTTPStatusCode": 400, "RequestId": "abc"},
            },
            "Query",
        )

        status, body, headers = invoke({"movieId": "550", "facts": "true"})

        assert status == 500
        assert body["error"]["code"] == "ResourceNotFoundException"
        assert headers["content-type"] == "application/json"
        movie_table.get_item.assert_not_called()

    def test_movie_lookup_failure_discards_cast(self, cast_table, movie_table):
        """映画取得の失敗 → キャストが取得済みでも返さない"""
        movie_table.get_item.side_effect = RuntimeError("connection reset")

        status, body, _ = invoke({"movieId": "550", "facts": "true"})

        cast_table.query.assert_called_once()
        assert status == 500
        assert body == {"error": {"name": "RuntimeError", "message": "connection reset"}}
        assert "cast" not in body
