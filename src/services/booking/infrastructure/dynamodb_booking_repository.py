import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.booking.domain.entity import Booking, BookingMessage
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId, BookingPeriod, MessageId
from services.shared.domain import IsoDateTime, Money
from services.shared.domain.exception.exceptions import DuplicateResourceException
from services.shared.utils.dynamodb import query_all
from services.user.domain import UserId
from services.vehicle.domain import VehicleId, VehicleRepository
from services.vehicle.infrastructure.dynamodb_vehicle_repository import (
    DynamoDBVehicleRepository,
)


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    - メッセージは予約アイテムのリスト属性として保持する（追記順）
    - 車両情報は参照時に VehicleRepository から取得して紐づける
    """

    def __init__(
        self,
        table_name: str | None = None,
        vehicle_repository: VehicleRepository | None = None,
    ) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)
        self.vehicle_repository = vehicle_repository or DynamoDBVehicleRepository(
            self.table_name
        )

    def save(self, booking: Booking) -> None:
        """予約をDBに新規保存する"""
        try:
            self.table.put_item(
                Item=self._to_item(booking),
                ConditionExpression=Attr("PK").not_exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Booking already exists: {booking.id}"
                )
            raise

    def update(self, booking: Booking) -> None:
        """予約を上書き保存する

        NOTE: バージョンによる競合検出は行わない（後勝ち）
        """
        self.table.put_item(Item=self._to_item(booking))

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"BOOKING#{booking_id}", "SK": "BOOKING"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._attach_vehicles([self._to_entity(item)])[0]

    def find_by_user_id(self, user_id: UserId) -> list[Booking]:
        """ユーザーの予約を開始日時の昇順で取得"""
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(f"USER#{user_id}#BOOKINGS"),
            ScanIndexForward=True,
        )
        return self._to_entities(items)

    def find_all(self) -> list[Booking]:
        """全予約を開始日時の昇順で取得"""
        items = query_all(
            self.table,
            IndexName="GSI2",
            KeyConditionExpression=Key("GSI2PK").eq("BOOKINGS"),
            ScanIndexForward=True,
        )
        return self._to_entities(items)

    def find_active_overlapping(self, period: BookingPeriod) -> list[Booking]:
        """期間が重なる RESERVED / CONFIRMED の予約を取得

        開始日時 < period.end をキー条件で絞り込み、
        終了日時 > period.start は BookingPeriod.overlaps で判定する。
        """
        items = query_all(
            self.table,
            IndexName="GSI2",
            KeyConditionExpression=Key("GSI2PK").eq("BOOKINGS")
            & Key("GSI2SK").lt(str(period.end)),
            FilterExpression=Attr("status").is_in(
                [status.value for status in BookingStatus.active()]
            ),
        )
        bookings = [self._to_entity(item) for item in items]
        return [
            booking
            for booking in bookings
            if booking.status in BookingStatus.active()
            and booking.period.overlaps(period)
        ]

    def _to_entities(self, items: list[dict]) -> list[Booking]:
        bookings = [self._to_entity(item) for item in items]
        bookings.sort(key=lambda booking: booking.period.start.value)
        return self._attach_vehicles(bookings)

    def _attach_vehicles(self, bookings: list[Booking]) -> list[Booking]:
        """予約に車両情報を紐づける（同じ車両は1回だけ取得）"""
        vehicles = {}
        for booking in bookings:
            if booking.vehicle_id not in vehicles:
                vehicles[booking.vehicle_id] = self.vehicle_repository.find_by_id(
                    booking.vehicle_id
                )
            vehicle = vehicles[booking.vehicle_id]
            if vehicle is not None:
                booking.attach_vehicle(vehicle)
        return bookings

    def _to_item(self, booking: Booking) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        start_date = str(booking.period.start)
        item = {
            "PK": f"BOOKING#{booking.id}",
            "SK": "BOOKING",
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "user_id": str(booking.user_id),
            "vehicle_id": str(booking.vehicle_id),
            "status": booking.status.value,
            "start_date": start_date,
            "end_date": str(booking.period.end),
            "pick_up_location": booking.pick_up_location,
            "drop_off_location": booking.drop_off_location,
            "hourly_fare": str(booking.hourly_fare.amount),
            "messages": [
                {
                    "message_id": str(message.id),
                    "message": message.message,
                    "created_at": str(message.created_at),
                }
                for message in booking.messages
            ],
            "created_at": str(booking.created_at),
            "updated_at": str(booking.updated_at),
            "GSI1PK": f"USER#{booking.user_id}#BOOKINGS",
            "GSI1SK": start_date,
            "GSI2PK": "BOOKINGS",
            "GSI2SK": start_date,
        }
        if booking.observations is not None:
            item["observations"] = booking.observations
        if booking.feedback is not None:
            item["feedback"] = booking.feedback
        if booking.rating is not None:
            item["rating"] = booking.rating
        return item

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        booking_id = BookingId(value=item["booking_id"])
        rating = item.get("rating")
        return Booking(
            id=booking_id,
            user_id=UserId(value=item["user_id"]),
            vehicle_id=VehicleId(value=item["vehicle_id"]),
            period=BookingPeriod.from_strings(item["start_date"], item["end_date"]),
            pick_up_location=item["pick_up_location"],
            drop_off_location=item["drop_off_location"],
            hourly_fare=Money(amount=Decimal(item["hourly_fare"])),
            created_at=IsoDateTime.from_string(item["created_at"]),
            updated_at=IsoDateTime.from_string(item["updated_at"]),
            status=BookingStatus(item["status"]),
            observations=item.get("observations"),
            feedback=item.get("feedback"),
            rating=int(rating) if rating is not None else None,
            messages=[
                BookingMessage(
                    id=MessageId(value=message["message_id"]),
                    booking_id=booking_id,
                    message=message["message"],
                    created_at=IsoDateTime.from_string(message["created_at"]),
                )
                for message in item.get("messages", [])
            ],
        )
