from __future__ import annotations

from pydantic import BaseModel

from services.vehicle.domain.entity import Vehicle


class VehicleData(BaseModel):
    """車両のレスポンスモデル"""

    id: str
    status: str
    brand_model: str
    brand: str
    transmission_type: str
    year: int
    type: str
    hourly_fare: str


def to_vehicle_data(vehicle: Vehicle) -> VehicleData:
    return VehicleData(
        id=str(vehicle.id),
        status=vehicle.status.value,
        brand_model=vehicle.brand_model,
        brand=vehicle.brand,
        transmission_type=vehicle.transmission_type,
        year=vehicle.year,
        type=vehicle.type,
        hourly_fare=str(vehicle.hourly_fare),
    )


def to_response(vehicle: Vehicle) -> dict:
    """Vehicle エンティティをレスポンス辞書に変換する"""
    return to_vehicle_data(vehicle).model_dump()
