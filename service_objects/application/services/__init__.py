from service_objects.application.services.base_service import ServiceObject

__all__ = ["ServiceObject"]
