from services.shared.domain import AggregateRoot, Money
from services.vehicle.domain.enum import VehicleStatus
from services.vehicle.domain.value_object import VehicleId


class Vehicle(AggregateRoot[VehicleId]):
    """レンタル車両"""

    def __init__(
        self,
        id: VehicleId,
        brand: str,
        brand_model: str,
        transmission_type: str,
        year: int,
        type: str,
        hourly_fare: Money,
        status: VehicleStatus = VehicleStatus.AVAILABLE,
    ) -> None:
        super().__init__(id)
        self._brand = brand
        self._brand_model = brand_model
        self._transmission_type = transmission_type
        self._year = year
        self._type = type
        self._hourly_fare = hourly_fare
        self._status = status

    @property
    def brand(self) -> str:
        return self._brand

    @property
    def brand_model(self) -> str:
        return self._brand_model

    @property
    def transmission_type(self) -> str:
        return self._transmission_type

    @property
    def year(self) -> int:
        return self._year

    @property
    def type(self) -> str:
        return self._type

    @property
    def hourly_fare(self) -> Money:
        return self._hourly_fare

    @property
    def status(self) -> VehicleStatus:
        return self._status

    def change_hourly_fare(self, hourly_fare: Money) -> None:
        """時間単価を変更する（既存の予約の料金には影響しない）"""
        self._hourly_fare = hourly_fare
