from .vehicle_id import VehicleId as VehicleId
