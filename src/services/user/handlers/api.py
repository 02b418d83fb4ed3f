from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.shared.utils import api_response
from services.shared.utils.error_handlers import register_error_handlers
from services.user.applications.login_user import LoginUserService
from services.user.applications.register_user import RegisterUserService
from services.user.domain.factory import UserDetails, UserFactory
from services.user.handlers.request_models import LoginUserRequest, RegisterUserRequest
from services.user.handlers.response_models import to_response
from services.user.infrastructure.dynamodb_user_repository import (
    DynamoDBUserRepository,
)

logger = Logger()

app = APIGatewayRestResolver(
    cors=CORSConfig(
        allow_origin="*",
        allow_headers=["Origin", "Content-Type", "Accept"],
    )
)
register_error_handlers(app, logger)

repository = DynamoDBUserRepository()
register_service = RegisterUserService(repository=repository, factory=UserFactory())
login_service = LoginUserService(repository=repository)


@app.post("/users")
def register_user():
    """ユーザー登録"""
    request = RegisterUserRequest.model_validate_json(
        app.current_event.decoded_body or "{}"
    )
    details: UserDetails = {
        "email": request.email,
        "name": request.name,
        "password": request.password,
        "national_id": request.national_id,
    }
    user = register_service.register(details)
    logger.info("User registered", extra={"user_id": str(user.id)})
    return api_response(201, to_response(user))


@app.post("/users/login")
def login_user():
    """ログイン"""
    request = LoginUserRequest.model_validate_json(
        app.current_event.decoded_body or "{}"
    )
    user = login_service.login(request.email, request.password)
    logger.info("User logged in", extra={"user_id": str(user.id)})
    return api_response(200, to_response(user))


@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """ユーザー API Lambda Handler"""
    return app.resolve(event, context)
