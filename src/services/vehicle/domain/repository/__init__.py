from .vehicle_repository import VehicleRepository as VehicleRepository
