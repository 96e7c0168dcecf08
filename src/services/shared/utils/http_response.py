import json


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def error_response(status_code: int, code: str, message: str) -> dict:
    """エラーコード付きのレスポンスを生成する

    エラーコードは `#` を前置してクライアントへ返す。
    """
    return api_response(status_code, {"code": f"#{code}", "message": message})
