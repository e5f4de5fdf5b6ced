import json


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway (REST API, Lambda プロキシ統合) のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def error_body(kind: str, message: str, **details: object) -> dict:
    """エラーレスポンスのボディ（kind は種別を表す固定文字列）"""
    return {"status": "error", "kind": kind, "message": message, **details}
