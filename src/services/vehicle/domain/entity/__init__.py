from .vehicle import Vehicle as Vehicle
