"""
Lambda Handlers for Movie Cast API

サーバレス構成のエントリポイント:
- Cast (映画キャスト取得 + 映画メタデータ)
"""
