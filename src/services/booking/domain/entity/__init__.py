from .booking import Booking as Booking
from .booking_message import BookingMessage as BookingMessage
