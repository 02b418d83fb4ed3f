from services.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class BookingNotFoundException(ResourceNotFoundException):
    default_message = "booking not found"


class BookingAlreadyCancelledException(BusinessRuleViolationException):
    default_message = "booking already cancelled"


class BookingAlreadyFinishedException(BusinessRuleViolationException):
    default_message = "booking already finished"


class BookingAlreadyStartedException(BusinessRuleViolationException):
    default_message = "booking already started"


class BookingNotStartedException(BusinessRuleViolationException):
    default_message = "booking not started"


class BookingNotFinishedException(BusinessRuleViolationException):
    default_message = "booking not finished"


class BookingAlreadyHaveFeedbackException(BusinessRuleViolationException):
    default_message = "booking already have feedback"
