from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingPeriod
from services.vehicle.domain import Vehicle, VehicleRepository


class FindAvailableVehiclesService:
    """空き車両検索ユースケース

    全車両から、期間が重なる RESERVED / CONFIRMED の予約を持つ車両を除外する。
    車両のステータスは参照しない。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        vehicle_repository: VehicleRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._vehicle_repository = vehicle_repository

    def find(self, period: BookingPeriod) -> list[Vehicle]:
        occupied = {
            booking.vehicle_id
            for booking in self._booking_repository.find_active_overlapping(period)
        }
        return [
            vehicle
            for vehicle in self._vehicle_repository.find_all()
            if vehicle.id not in occupied
        ]
