from .entity import Vehicle as Vehicle
from .enum import VehicleStatus as VehicleStatus
from .repository import VehicleRepository as VehicleRepository
from .value_object import VehicleId as VehicleId
