from service_objects.core.interfaces.service_locator import ServiceDefinition, ServiceLookup

__all__ = ["ServiceDefinition", "ServiceLookup"]
