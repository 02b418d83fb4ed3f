from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingId, BookingPeriod
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain import DuplicateResourceException
from services.user.domain import UserId


def _item(
    booking_id: str,
    status: str = "CONFIRMED",
    start: str = "2024-01-10T00:00:00+00:00",
    end: str = "2024-01-12T00:00:00+00:00",
    vehicle_id: str = "vehicle-1",
    **extra,
) -> dict:
    item = {
        "PK": f"BOOKING#{booking_id}",
        "SK": "BOOKING",
        "booking_id": booking_id,
        "user_id": "user-1",
        "vehicle_id": vehicle_id,
        "status": status,
        "start_date": start,
        "end_date": end,
        "pick_up_location": "Airport",
        "drop_off_location": "Downtown",
        "hourly_fare": "12.50",
        "messages": [],
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
    }
    item.update(extra)
    return item


class TestDynamoDBBookingRepository:
    @pytest.fixture
    def table(self):
        return MagicMock()

    @pytest.fixture
    def vehicle_repository(self):
        repository = MagicMock()
        repository.find_by_id.return_value = None
        return repository

    @pytest.fixture
    def repository(self, table, vehicle_repository):
        with patch("boto3.resource") as mock_resource:
            mock_resource.return_value.Table.return_value = table
            yield DynamoDBBookingRepository(
                table_name="test-table", vehicle_repository=vehicle_repository
            )

    def test_save_writes_item_with_index_keys(self, repository, table, create_booking):
        # Arrange
        booking = create_booking(booking_id="b-1", user_id="user-1")

        # Act
        repository.save(booking)

        # Assert
        item = table.put_item.call_args.kwargs["Item"]
        assert item["PK"] == "BOOKING#b-1"
        assert item["GSI1PK"] == "USER#user-1#BOOKINGS"
        assert item["GSI2PK"] == "BOOKINGS"
        assert item["GSI2SK"] == "2024-01-10T00:00:00+00:00"
        assert item["status"] == "RESERVED"
        assert item["hourly_fare"] == "12.50"
        assert "rating" not in item
        assert "ConditionExpression" in table.put_item.call_args.kwargs

    def test_save_duplicate_raises(self, repository, table, create_booking):
        table.put_item.side_effect = ClientError(
            {"Error": {"Code": "ConditionalCheckFailedException", "Message": ""}},
            "PutItem",
        )

        with pytest.raises(DuplicateResourceException):
            repository.save(create_booking())

    def test_save_other_client_error_propagates(self, repository, table, create_booking):
        table.put_item.side_effect = ClientError(
            {"Error": {"Code": "ProvisionedThroughputExceededException", "Message": ""}},
            "PutItem",
        )

        with pytest.raises(ClientError):
            repository.save(create_booking())

    def test_update_overwrites_without_condition(self, repository, table, create_booking):
        repository.update(create_booking(rating=4))

        kwargs = table.put_item.call_args.kwargs
        assert "ConditionExpression" not in kwargs
        assert kwargs["Item"]["rating"] == 4

    def test_find_by_id_restores_entity(
        self, repository, table, vehicle_repository, create_vehicle
    ):
        # Arrange
        table.get_item.return_value = {
            "Item": _item(
                "b-1",
                rating=5,
                feedback="good",
                messages=[
                    {
                        "message_id": "m-1",
                        "message": "hello",
                        "created_at": "2024-01-02T00:00:00+00:00",
                    }
                ],
            )
        }
        vehicle = create_vehicle(vehicle_id="vehicle-1")
        vehicle_repository.find_by_id.return_value = vehicle

        # Act
        booking = repository.find_by_id(BookingId(value="b-1"))

        # Assert
        assert booking.status == BookingStatus.CONFIRMED
        assert booking.rating == 5
        assert booking.feedback == "good"
        assert booking.vehicle is vehicle
        assert [m.message for m in booking.messages] == ["hello"]
        table.get_item.assert_called_once_with(
            Key={"PK": "BOOKING#b-1", "SK": "BOOKING"}, ConsistentRead=True
        )

    def test_find_by_id_not_found(self, repository, table):
        table.get_item.return_value = {}
        assert repository.find_by_id(BookingId(value="ghost")) is None

    def test_find_by_user_id_sorted_by_start(self, repository, table):
        table.query.return_value = {
            "Items": [
                _item("b-2", start="2024-02-01T00:00:00+00:00", end="2024-02-02T00:00:00+00:00"),
                _item("b-1"),
            ]
        }

        bookings = repository.find_by_user_id(UserId(value="user-1"))

        assert [str(b.id) for b in bookings] == ["b-1", "b-2"]
        assert table.query.call_args.kwargs["IndexName"] == "GSI1"

    def test_vehicle_is_fetched_once_per_id(self, repository, table, vehicle_repository):
        table.query.return_value = {"Items": [_item("b-1"), _item("b-2")]}

        repository.find_all()

        vehicle_repository.find_by_id.assert_called_once()

    @pytest.mark.parametrize(
        ("start", "end", "expected"),
        [
            ("2024-01-11T00:00:00Z", "2024-01-13T00:00:00Z", ["b-1"]),
            ("2024-01-12T00:00:00Z", "2024-01-13T00:00:00Z", []),
        ],
    )
    def test_find_active_overlapping_boundaries(
        self, repository, table, start, end, expected
    ):
        """[2024-01-10, 2024-01-12) の予約は、終了時刻から始まる期間とは重ならない"""
        table.query.return_value = {"Items": [_item("b-1", status="CONFIRMED")]}

        bookings = repository.find_active_overlapping(
            BookingPeriod.from_strings(start, end)
        )

        assert [str(b.id) for b in bookings] == expected
        assert table.query.call_args.kwargs["IndexName"] == "GSI2"

    def test_find_active_overlapping_ignores_closed_bookings(self, repository, table):
        table.query.return_value = {
            "Items": [_item("b-1", status="CANCELLED"), _item("b-2", status="FINISHED")]
        }

        bookings = repository.find_active_overlapping(
            BookingPeriod.from_strings("2024-01-11T00:00:00Z", "2024-01-13T00:00:00Z")
        )

        assert bookings == []
