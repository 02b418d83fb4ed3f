from .exceptions import VehicleNotFoundException

__all__ = ["VehicleNotFoundException"]
