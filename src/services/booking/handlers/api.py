from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig
from aws_lambda_powertools.event_handler.exceptions import BadRequestError
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.add_feedback import AddFeedbackService
from services.booking.applications.add_message import AddMessageService
from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.applications.confirm_booking import ConfirmBookingService
from services.booking.applications.find_available_vehicles import (
    FindAvailableVehiclesService,
)
from services.booking.applications.finish_booking import FinishBookingService
from services.booking.applications.get_bookings import GetBookingsService
from services.booking.applications.rate_booking import RateBookingService
from services.booking.applications.reserve_booking import ReserveBookingService
from services.booking.domain.factory import BookingDetails, BookingFactory
from services.booking.domain.value_object import BookingId, BookingPeriod
from services.booking.handlers.request_models import (
    AddFeedbackRequest,
    AddMessageRequest,
    BookingActionRequest,
    CreateBookingRequest,
    RateBookingRequest,
)
from services.booking.handlers.response_models import to_response
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain import IsoDateTime
from services.shared.utils import api_response
from services.shared.utils.error_handlers import register_error_handlers
from services.user.domain import UserId
from services.user.infrastructure.dynamodb_user_repository import (
    DynamoDBUserRepository,
)
from services.vehicle.domain import VehicleId
from services.vehicle.handlers.response_models import (
    to_response as to_vehicle_response,
)
from services.vehicle.infrastructure.dynamodb_vehicle_repository import (
    DynamoDBVehicleRepository,
)

logger = Logger()

app = APIGatewayRestResolver(
    cors=CORSConfig(
        allow_origin="*",
        allow_headers=["Origin", "Content-Type", "Accept"],
    )
)
register_error_handlers(app, logger)

user_repository = DynamoDBUserRepository()
vehicle_repository = DynamoDBVehicleRepository()
booking_repository = DynamoDBBookingRepository(vehicle_repository=vehicle_repository)
factory = BookingFactory()

find_available_service = FindAvailableVehiclesService(
    booking_repository=booking_repository, vehicle_repository=vehicle_repository
)
reserve_service = ReserveBookingService(
    booking_repository=booking_repository,
    user_repository=user_repository,
    vehicle_repository=vehicle_repository,
    factory=factory,
)
cancel_service = CancelBookingService(booking_repository, user_repository)
confirm_service = ConfirmBookingService(booking_repository, user_repository)
finish_service = FinishBookingService(booking_repository, user_repository)
feedback_service = AddFeedbackService(booking_repository, user_repository)
rate_service = RateBookingService(booking_repository, user_repository)
message_service = AddMessageService(booking_repository, user_repository, factory)
get_bookings_service = GetBookingsService(booking_repository)


def _body() -> str:
    return app.current_event.decoded_body or "{}"


def _query_datetime(name: str) -> IsoDateTime:
    value = app.current_event.get_query_string_value(name=name, default_value="")
    try:
        return IsoDateTime.from_string(value)
    except ValueError:
        raise BadRequestError(f"invalid {name} date")


@app.get("/bookings/available-vehicles")
def get_available_vehicles():
    """期間内に予約可能な車両の一覧"""
    start = _query_datetime("from")
    end = _query_datetime("to")
    try:
        period = BookingPeriod(start=start, end=end)
    except ValueError as e:
        raise BadRequestError(str(e))

    vehicles = find_available_service.find(period)
    logger.info(
        "Listed available vehicles",
        extra={"from": str(start), "to": str(end), "count": len(vehicles)},
    )
    return api_response(200, [to_vehicle_response(vehicle) for vehicle in vehicles])


@app.post("/bookings")
def create_booking():
    """予約作成"""
    request = CreateBookingRequest.model_validate_json(_body())
    details: BookingDetails = {
        "start_date": request.start_date,
        "end_date": request.end_date,
        "pick_up_location": request.pick_up_location,
        "drop_off_location": request.drop_off_location,
    }
    booking = reserve_service.reserve(
        UserId(request.user_id), VehicleId(request.vehicle_id), details
    )
    logger.info(
        "Booking reserved",
        extra={"booking_id": str(booking.id), "vehicle_id": request.vehicle_id},
    )
    return api_response(201, to_response(booking))


@app.patch("/bookings/cancel")
def cancel_booking():
    request = BookingActionRequest.model_validate_json(_body())
    logger.info("Cancelling booking", extra={"booking_id": request.id})
    booking = cancel_service.cancel(BookingId(request.id), UserId(request.user_id))
    return api_response(200, to_response(booking))


@app.patch("/bookings/confirm")
def confirm_booking():
    request = BookingActionRequest.model_validate_json(_body())
    logger.info("Confirming booking", extra={"booking_id": request.id})
    booking = confirm_service.confirm(BookingId(request.id), UserId(request.user_id))
    return api_response(200, to_response(booking))


@app.patch("/bookings/finish")
def finish_booking():
    request = BookingActionRequest.model_validate_json(_body())
    logger.info("Finishing booking", extra={"booking_id": request.id})
    booking = finish_service.finish(BookingId(request.id), UserId(request.user_id))
    return api_response(200, to_response(booking))


@app.patch("/bookings/feedback")
def add_feedback():
    request = AddFeedbackRequest.model_validate_json(_body())
    logger.info("Adding feedback", extra={"booking_id": request.id})
    booking = feedback_service.add_feedback(
        BookingId(request.id), UserId(request.user_id), request.feedback
    )
    return api_response(200, to_response(booking))


@app.patch("/bookings/rate")
def rate_booking():
    request = RateBookingRequest.model_validate_json(_body())
    logger.info("Rating booking", extra={"booking_id": request.id})
    booking = rate_service.rate(
        BookingId(request.id), UserId(request.user_id), request.rating
    )
    return api_response(200, to_response(booking))


@app.post("/bookings/message")
def add_message():
    request = AddMessageRequest.model_validate_json(_body())
    logger.info("Adding message", extra={"booking_id": request.id})
    booking = message_service.add_message(
        BookingId(request.id), UserId(request.user_id), request.message
    )
    return api_response(200, to_response(booking))


@app.get("/bookings")
def get_bookings():
    """予約の参照

    booking_id が指定されていれば単一の予約、なければ user_id の予約一覧を返す。
    """
    booking_id = app.current_event.get_query_string_value(
        name="booking_id", default_value=""
    )
    user_id = app.current_event.get_query_string_value(name="user_id", default_value="")

    if booking_id:
        booking = get_bookings_service.get_by_id(BookingId(booking_id))
        return api_response(200, to_response(booking))

    if user_id:
        bookings = get_bookings_service.list_by_user(UserId(user_id))
        return api_response(200, [to_response(booking) for booking in bookings])

    raise BadRequestError("invalid query params, required booking_id or user_id")


@app.get("/bookings/admin")
def get_admin_bookings():
    """管理者向けの全予約一覧"""
    bookings = get_bookings_service.list_all()
    return api_response(200, [to_response(booking) for booking in bookings])


@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約 API Lambda Handler"""
    return app.resolve(event, context)
