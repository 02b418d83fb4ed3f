from services.booking.domain.entity import Booking
from services.booking.domain.factory import BookingDetails, BookingFactory
from services.booking.domain.repository import BookingRepository
from services.user.domain import UserId, UserRepository
from services.user.domain.exception import UserNotFoundException
from services.vehicle.domain import VehicleId, VehicleRepository
from services.vehicle.domain.exception import VehicleNotFoundException


class ReserveBookingService:
    """車両予約ユースケース

    NOTE: 空き状況の再確認は行わない。呼び出し側が事前に
    FindAvailableVehiclesService で確認している前提（同時予約は競合しうる）。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        user_repository: UserRepository,
        vehicle_repository: VehicleRepository,
        factory: BookingFactory,
    ) -> None:
        self._booking_repository = booking_repository
        self._user_repository = user_repository
        self._vehicle_repository = vehicle_repository
        self._factory = factory

    def reserve(
        self, user_id: UserId, vehicle_id: VehicleId, details: BookingDetails
    ) -> Booking:
        """予約を作成し、RESERVED 状態で保存する"""
        user = self._user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundException()

        vehicle = self._vehicle_repository.find_by_id(vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundException()

        booking = self._factory.create(user.id, vehicle, details)
        self._booking_repository.save(booking)
        return booking
