from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from services.booking.domain.entity import Booking, BookingMessage
from services.vehicle.handlers.response_models import VehicleData, to_vehicle_data


class MessageData(BaseModel):
    """予約メッセージのレスポンスモデル"""

    id: str
    created_at: str
    booking_id: str
    message: str


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    id: str
    created_at: str
    updated_at: str
    status: str
    user_id: str
    vehicle: Optional[VehicleData]
    observations: Optional[str]
    feedback: Optional[str]
    rating: Optional[int]
    start_date: str
    end_date: str
    pick_up_location: str
    drop_off_location: str
    hourly_fare: str
    total_amount: str
    messages: list[MessageData]


def _to_message_data(message: BookingMessage) -> MessageData:
    return MessageData(
        id=str(message.id),
        created_at=str(message.created_at),
        booking_id=str(message.booking_id),
        message=message.message,
    )


def to_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return BookingData(
        id=str(booking.id),
        created_at=str(booking.created_at),
        updated_at=str(booking.updated_at),
        status=booking.status.value,
        user_id=str(booking.user_id),
        vehicle=to_vehicle_data(booking.vehicle) if booking.vehicle else None,
        observations=booking.observations,
        feedback=booking.feedback,
        rating=booking.rating,
        start_date=str(booking.period.start),
        end_date=str(booking.period.end),
        pick_up_location=booking.pick_up_location,
        drop_off_location=booking.drop_off_location,
        hourly_fare=str(booking.hourly_fare),
        total_amount=str(booking.total_amount),
        messages=[_to_message_data(message) for message in booking.messages],
    ).model_dump()
