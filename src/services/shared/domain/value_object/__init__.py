from .iso_date_time import IsoDateTime as IsoDateTime
from .money import Money as Money
