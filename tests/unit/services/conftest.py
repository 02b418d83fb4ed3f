import json
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingId, BookingPeriod
from services.shared.domain import IsoDateTime, Money
from services.user.domain import Email, User, UserId, UserRole
from services.vehicle.domain import Vehicle, VehicleId, VehicleStatus

CREATED_AT = IsoDateTime(datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_user():
    """User を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        user_id: str = "user-1",
        email: str = "client@example.com",
        name: str = "Client",
        password: str = "secret",
        national_id: str = "ID-0001",
        role: UserRole = UserRole.CLIENT,
    ) -> User:
        return User(
            id=UserId(value=user_id),
            email=Email(email),
            name=name,
            password=password,
            national_id=national_id,
            role=role,
        )

    return _factory


@pytest.fixture
def create_vehicle():
    """Vehicle を生成する Factory fixture"""

    def _factory(
        vehicle_id: str = "vehicle-1",
        hourly_fare: Decimal = Decimal("12.50"),
        status: VehicleStatus = VehicleStatus.AVAILABLE,
    ) -> Vehicle:
        return Vehicle(
            id=VehicleId(value=vehicle_id),
            brand="Toyota",
            brand_model="Corolla",
            transmission_type="AUTOMATIC",
            year=2022,
            type="SEDAN",
            hourly_fare=Money(amount=hourly_fare),
            status=status,
        )

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture"""

    def _factory(
        status: BookingStatus = BookingStatus.RESERVED,
        booking_id: str = "booking-1",
        user_id: str = "user-1",
        vehicle_id: str = "vehicle-1",
        start: str = "2024-01-10T00:00:00Z",
        end: str = "2024-01-12T00:00:00Z",
        hourly_fare: Decimal = Decimal("12.50"),
        feedback: str | None = None,
        rating: int | None = None,
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            user_id=UserId(value=user_id),
            vehicle_id=VehicleId(value=vehicle_id),
            period=BookingPeriod.from_strings(start, end),
            pick_up_location="Airport",
            drop_off_location="Downtown",
            hourly_fare=Money(amount=hourly_fare),
            created_at=CREATED_AT,
            status=status,
            feedback=feedback,
            rating=rating,
        )

    return _factory


@pytest.fixture
def lambda_context():
    """Powertools の inject_lambda_context が参照する属性だけを持つ LambdaContext"""

    @dataclass
    class LambdaContext:
        function_name: str = "test"
        memory_limit_in_mb: int = 128
        invoked_function_arn: str = (
            "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
        )
        aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"

    return LambdaContext()


@pytest.fixture
def api_event():
    """API Gateway (REST) のプロキシイベントを生成する Factory fixture"""

    def _factory(
        method: str,
        path: str,
        body: dict | None = None,
        query: dict[str, str] | None = None,
    ) -> dict:
        return {
            "resource": path,
            "path": path,
            "httpMethod": method,
            "headers": {"Content-Type": "application/json"},
            "multiValueHeaders": {"Content-Type": ["application/json"]},
            "queryStringParameters": query,
            "multiValueQueryStringParameters": (
                {key: [value] for key, value in query.items()} if query else None
            ),
            "pathParameters": None,
            "stageVariables": None,
            "requestContext": {
                "accountId": "123456789012",
                "apiId": "test-api",
                "httpMethod": method,
                "path": f"/prod{path}",
                "resourcePath": path,
                "stage": "prod",
                "requestId": "c6af9ac6-7b61-11e6-9a41-93e8deadbeef",
                "identity": {"sourceIp": "127.0.0.1"},
            },
            "body": json.dumps(body) if body is not None else None,
            "isBase64Encoded": False,
        }

    return _factory
