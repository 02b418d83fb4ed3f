from .exceptions import (
    BookingAlreadyCancelledException,
    BookingAlreadyFinishedException,
    BookingAlreadyHaveFeedbackException,
    BookingAlreadyStartedException,
    BookingNotFinishedException,
    BookingNotFoundException,
    BookingNotStartedException,
)

__all__ = [
    "BookingNotFoundException",
    "BookingAlreadyCancelledException",
    "BookingAlreadyFinishedException",
    "BookingAlreadyStartedException",
    "BookingNotStartedException",
    "BookingNotFinishedException",
    "BookingAlreadyHaveFeedbackException",
]
