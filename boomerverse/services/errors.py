"""
Exceptions raised by the service layer
"""

class ServiceError(Exception):
    """Base class for upstream failures surfaced to API callers"""

class UpstreamError(ServiceError):
    """An asset search page could not be retrieved"""

class FetchError(ServiceError):
    """A remote image could not be downloaded"""
