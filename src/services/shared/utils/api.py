from collections.abc import Callable
from functools import wraps
from typing import TypeVar

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import BaseModel, ValidationError

from services.shared.domain import Caller, Role, UserId
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    ConflictException,
    ForbiddenException,
    ResourceNotFoundException,
    ValidationException,
)

from .http_response import api_response, error_body

logger = Logger(child=True)

M = TypeVar("M", bound=BaseModel)

ROLE_CLAIM = "custom:role"

# ドメイン例外 -> (HTTP ステータス, 種別)。上から順に isinstance で判定する
ERROR_KINDS: tuple[tuple[type[Exception], int, str], ...] = (
    (ValidationException, 400, "ValidationError"),
    (ForbiddenException, 403, "Forbidden"),
    (ResourceNotFoundException, 404, "NotFound"),
    (ConflictException, 409, "Conflict"),
    (BusinessRuleViolationException, 422, "InvalidState"),
)


def error_response(exc: Exception) -> dict:
    """例外を API レスポンスに変換する"""
    if isinstance(exc, ValidationError):
        return api_response(
            400,
            error_body(
                "ValidationError",
                "Request validation failed",
                errors=exc.errors(include_url=False, include_context=False),
            ),
        )
    for exc_type, status_code, kind in ERROR_KINDS:
        if isinstance(exc, exc_type):
            return api_response(status_code, error_body(kind, str(exc)))

    logger.exception("Unhandled error")
    return api_response(500, error_body("InternalError", "Internal server error"))


def api_handler(
    func: Callable[[APIGatewayProxyEvent, LambdaContext], dict],
) -> Callable[[APIGatewayProxyEvent, LambdaContext], dict]:
    """ハンドラ内で発生した例外を種別付きのエラーレスポンスに変換する

    Usage:
        @logger.inject_lambda_context
        @event_source(data_class=APIGatewayProxyEvent)
        @api_handler
        def lambda_handler(event, context): ...
    """

    @wraps(func)
    def wrapper(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
        try:
            return func(event, context)
        except Exception as e:
            if not isinstance(e, ValidationError):
                logger.info(
                    "Request failed",
                    extra={"error": type(e).__name__, "reason": str(e)},
                )
            return error_response(e)

    return wrapper


def get_caller(event: APIGatewayProxyEvent) -> Caller:
    """Cognito オーソライザーのクレームから呼び出し元を取得する"""
    claims = event.request_context.authorizer.claims or {}
    sub = claims.get("sub")
    if not sub:
        raise ForbiddenException("Authenticated caller identity is required")
    try:
        role = Role(claims.get(ROLE_CLAIM, Role.USER.value))
    except ValueError:
        role = Role.USER
    return Caller(user_id=UserId(value=sub), role=role)


def require_role(caller: Caller, *roles: Role) -> None:
    """呼び出し元が指定ロールのいずれかを持つことを確認する"""
    if not caller.has_role(*roles):
        raise ForbiddenException(
            f"Role '{caller.role.value}' is not allowed to perform this operation"
        )


def path_param(event: APIGatewayProxyEvent, name: str) -> str:
    """パスパラメータを取得する（欠落時は ValidationException）"""
    value = (event.path_parameters or {}).get(name)
    if not value:
        raise ValidationException(f"{name} is required")
    return value


def parse_body(event: APIGatewayProxyEvent, model: type[M]) -> M:
    """リクエストボディを pydantic モデルで検証する"""
    return model.model_validate_json(event.decoded_body or "{}")
