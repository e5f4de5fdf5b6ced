import json

import pytest
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEvent
from pydantic import BaseModel, Field

from services.shared.domain import (
    BusinessRuleViolationException,
    ConflictException,
    ForbiddenException,
    ResourceNotFoundException,
    Role,
    UserId,
    ValidationException,
)
from services.shared.domain.exception import (
    SeatConflictException,
    SeatNotFoundException,
)
from services.shared.utils import (
    api_handler,
    get_caller,
    parse_body,
    path_param,
    require_role,
)


class _Body(BaseModel):
    name: str = Field(..., min_length=1)


@pytest.fixture
def make_event():
    def _factory(
        claims: dict | None = None,
        path_parameters: dict | None = None,
        body: dict | None = None,
    ) -> APIGatewayProxyEvent:
        return APIGatewayProxyEvent(
            {
                "requestContext": {"authorizer": {"claims": claims or {}}},
                "pathParameters": path_parameters,
                "body": json.dumps(body) if body is not None else None,
                "isBase64Encoded": False,
            }
        )

    return _factory


def _raising(exc: Exception):
    @api_handler
    def handler(event, context):
        raise exc

    return handler


class TestApiHandler:
    @pytest.mark.parametrize(
        ("exc", "status_code", "kind"),
        [
            (ValidationException("bad"), 400, "ValidationError"),
            (ForbiddenException("no"), 403, "Forbidden"),
            (ResourceNotFoundException("missing"), 404, "NotFound"),
            (SeatNotFoundException(["Z9"]), 404, "NotFound"),
            (ConflictException("busy"), 409, "Conflict"),
            (SeatConflictException(["A1", "A2"]), 409, "Conflict"),
            (BusinessRuleViolationException("nope"), 422, "InvalidState"),
        ],
    )
    def test_domain_errors_are_mapped_to_kinds(self, exc, status_code, kind):
        response = _raising(exc)({}, None)

        assert response["statusCode"] == status_code
        body = json.loads(response["body"])
        assert body["status"] == "error"
        assert body["kind"] == kind
        assert body["message"] == str(exc)

    def test_seat_conflict_message_lists_every_seat(self):
        response = _raising(SeatConflictException(["A1", "B2"]))({}, None)

        message = json.loads(response["body"])["message"]
        assert "A1" in message
        assert "B2" in message

    def test_unexpected_error_is_internal(self):
        response = _raising(RuntimeError("boom"))({}, None)

        assert response["statusCode"] == 500
        body = json.loads(response["body"])
        assert body["kind"] == "InternalError"
        assert "boom" not in body["message"]

    def test_request_validation_error_is_400(self, make_event):
        @api_handler
        def handler(event, context):
            parse_body(event, _Body)

        response = handler(make_event(body={"name": ""}), None)

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert body["kind"] == "ValidationError"
        assert body["errors"]

    def test_successful_response_passes_through(self):
        @api_handler
        def handler(event, context):
            return {"statusCode": 200}

        assert handler({}, None) == {"statusCode": 200}


class TestCaller:
    def test_caller_from_claims(self, make_event):
        caller = get_caller(make_event(claims={"sub": "u-1", "custom:role": "admin"}))

        assert caller.user_id == UserId(value="u-1")
        assert caller.role == Role.ADMIN

    def test_role_defaults_to_user(self, make_event):
        caller = get_caller(make_event(claims={"sub": "u-1", "custom:role": "root"}))

        assert caller.role == Role.USER

    def test_missing_identity_is_forbidden(self, make_event):
        with pytest.raises(ForbiddenException):
            get_caller(make_event(claims={}))

    def test_require_role(self, make_event):
        caller = get_caller(make_event(claims={"sub": "u-1", "custom:role": "driver"}))

        require_role(caller, Role.ADMIN, Role.DRIVER)
        with pytest.raises(ForbiddenException):
            require_role(caller, Role.ADMIN)


class TestRequestParsing:
    def test_path_param(self, make_event):
        event = make_event(path_parameters={"trip_id": "trip-1"})

        assert path_param(event, "trip_id") == "trip-1"
        with pytest.raises(ValidationException):
            path_param(event, "booking_id")

    def test_parse_body(self, make_event):
        assert parse_body(make_event(body={"name": "x"}), _Body).name == "x"
