"""Exceptions raised by the REST client SDK."""


class RestClientError(RuntimeError):
    """Base class for every failure raised by this package."""


class InvalidInputKindError(RestClientError, TypeError):
    """Raised when a query-string encoder receives something that is not a record."""


class SerializationError(RestClientError):
    """Raised when a request body cannot be encoded as JSON."""


class AlreadyInitializedError(RestClientError):
    """Raised when a client is initialized a second time."""


class ServiceResolutionError(RestClientError):
    """Raised when a resource name cannot be resolved to an address."""


class RequestConstructionError(RestClientError):
    """Raised when an outgoing request cannot be built (e.g. malformed URL)."""


class TransportError(RestClientError):
    """Raised when the HTTP transport fails to deliver a request."""
