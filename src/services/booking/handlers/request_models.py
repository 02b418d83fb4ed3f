from datetime import datetime, timezone

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class _RequestModel(BaseModel):
    """snake_case / camelCase のどちらのキーも受け付ける"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateBookingRequest(_RequestModel):
    """予約作成リクエストモデル"""

    user_id: str = Field(..., min_length=1, description="予約者のユーザーID")
    vehicle_id: str = Field(..., min_length=1, description="車両ID")
    start_date: AwareDatetime = Field(
        ...,
        description="利用開始日時（RFC 3339）",
        examples=["2030-01-10T10:00:00Z"],
    )
    end_date: AwareDatetime = Field(
        ...,
        description="利用終了日時（RFC 3339）",
        examples=["2030-01-12T10:00:00Z"],
    )
    pick_up_location: str = Field(..., min_length=1, description="受取場所")
    drop_off_location: str = Field(..., min_length=1, description="返却場所")

    @model_validator(mode="after")
    def validate_period(self) -> "CreateBookingRequest":
        """開始日時が過去でなく、終了日時より前であること"""
        if self.start_date < datetime.now(timezone.utc):
            raise ValueError("start date cannot be in the past")
        if self.start_date >= self.end_date:
            raise ValueError("start date must be before end date")
        return self

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "user_id": "7d9f5c1e-2f0a-4a57-9d43-3c0f3f4b8a11",
                    "vehicle_id": "e1b0b6a4-6c1d-4c9e-8a8b-1f2d3c4b5a69",
                    "start_date": "2030-01-10T10:00:00Z",
                    "end_date": "2030-01-12T10:00:00Z",
                    "pick_up_location": "Airport",
                    "drop_off_location": "Downtown",
                }
            ]
        },
    )


class BookingActionRequest(_RequestModel):
    """キャンセル・確定・完了リクエストモデル"""

    id: str = Field(..., min_length=1, description="予約ID")
    user_id: str = Field(..., min_length=1, description="操作ユーザーのID")


class AddFeedbackRequest(BookingActionRequest):
    """フィードバック登録リクエストモデル"""

    feedback: str = Field(..., min_length=1)


class RateBookingRequest(BookingActionRequest):
    """評価登録リクエストモデル"""

    rating: int = Field(..., ge=1, le=5, description="評価（1〜5）")


class AddMessageRequest(BookingActionRequest):
    """メッセージ追加リクエストモデル"""

    message: str = Field(..., min_length=1)
