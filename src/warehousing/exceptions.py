"""Errors raised by the warehousing domain.

Each error carries the HTTP status and title it maps to at the API
boundary. Field-level validation problems are reported through Protean's
``ValidationError`` instead.
"""


class WarehousingError(Exception):
    """Base class for all warehousing rule violations."""

    status_code = 500
    title = "Internal Server Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResourceNotFound(WarehousingError):
    """A warehouse or item id did not resolve."""

    status_code = 404
    title = "Resource Not Found"


class DuplicateResource(WarehousingError):
    """A warehouse name or SKU is already taken."""

    status_code = 409
    title = "Duplicate Resource"


class InsufficientCapacity(WarehousingError):
    """The target warehouse cannot absorb the requested quantity."""

    status_code = 400
    title = "Insufficient Capacity"


class InvalidArgument(WarehousingError):
    """The request contradicts the current state of the data it names."""

    status_code = 400
    title = "Bad Request"


class InvalidState(WarehousingError):
    """The resource is in a state that forbids the operation."""

    status_code = 409
    title = "Invalid State"
