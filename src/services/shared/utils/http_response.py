import json

from aws_lambda_powertools.event_handler import Response, content_types


def api_response(status_code: int, body: dict | list) -> Response:
    """API Gateway 向けの JSON レスポンスを生成する"""
    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=json.dumps(body, default=str),
    )


def error_response(status_code: int, message: str) -> Response:
    """エラーレスポンス（{"message": ...}）を生成する"""
    return api_response(status_code, {"message": message})
