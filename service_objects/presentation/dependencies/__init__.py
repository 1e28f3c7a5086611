from service_objects.presentation.dependencies.services import ServiceDep, service_dependency

__all__ = ["ServiceDep", "service_dependency"]
