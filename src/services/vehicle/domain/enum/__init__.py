from .vehicle_status import VehicleStatus as VehicleStatus
