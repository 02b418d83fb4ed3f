from .booking_id import BookingId as BookingId
from .booking_period import BookingPeriod as BookingPeriod
from .message_id import MessageId as MessageId
