from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, Response
from aws_lambda_powertools.event_handler.exceptions import ServiceError
from pydantic import ValidationError

from services.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    InvalidCredentialsException,
    ResourceNotFoundException,
)
from services.shared.utils.http_response import error_response

# ドメイン例外 -> HTTP ステータス（サブクラスは MRO で解決される）
DOMAIN_ERROR_STATUS: dict[type[DomainException], int] = {
    ResourceNotFoundException: 404,
    InvalidCredentialsException: 401,
    DuplicateResourceException: 409,
    BusinessRuleViolationException: 400,
}


def status_for(error: DomainException) -> int:
    """ドメイン例外に対応する HTTP ステータスを返す（未分類は 500）"""
    for cls in type(error).__mro__:
        if cls in DOMAIN_ERROR_STATUS:
            return DOMAIN_ERROR_STATUS[cls]
    return 500


def _error_message(error: dict) -> str:
    """ValueError 由来のエラーは "Value error, " を除いた元のメッセージを使う"""
    if error["type"] == "value_error":
        return str(error["ctx"]["error"])
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}" if location else error["msg"]


def register_error_handlers(app: APIGatewayRestResolver, logger: Logger) -> None:
    """例外を HTTP レスポンスに変換するハンドラを登録する"""

    @app.exception_handler(ValidationError)
    def handle_validation_error(e: ValidationError) -> Response:
        messages = [_error_message(error) for error in e.errors(include_url=False)]
        logger.info("Invalid request", extra={"errors": messages})
        return error_response(400, ", ".join(messages))

    @app.exception_handler(DomainException)
    def handle_domain_error(e: DomainException) -> Response:
        status_code = status_for(e)
        if status_code == 500:
            logger.exception("Unclassified domain error")
        else:
            logger.info(
                "Request rejected",
                extra={"error": type(e).__name__, "status_code": status_code},
            )
        return error_response(status_code, e.message)

    @app.exception_handler(ServiceError)
    def handle_service_error(e: ServiceError) -> Response:
        return error_response(e.status_code, e.msg)

    @app.exception_handler(Exception)
    def handle_unexpected_error(e: Exception) -> Response:
        logger.exception("Unexpected error")
        return error_response(500, "Internal server error")
