from client.services.locations import LocationService

__all__ = ["LocationService"]
