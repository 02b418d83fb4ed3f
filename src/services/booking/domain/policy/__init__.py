from .booking_policy import can_manage as can_manage
from .booking_policy import can_review as can_review
from .booking_policy import is_owner as is_owner
