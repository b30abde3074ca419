"""Exception types shared across the server."""


class SchemaStitchingError(Exception):
    """Raised when local schemas cannot be composed into one schema."""

    pass


class ServiceNotRegisteredError(LookupError):
    """Raised when a service is requested that was never registered."""

    pass
