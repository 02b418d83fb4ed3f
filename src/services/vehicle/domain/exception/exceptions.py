from services.shared.domain.exception import ResourceNotFoundException


class VehicleNotFoundException(ResourceNotFoundException):
    default_message = "vehicle not found"
