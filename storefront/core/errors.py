"""Error taxonomy shared by the stores, services and HTTP layer"""


class StoreError(Exception):
    """Base class for errors surfaced to API callers"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(StoreError):
    """Missing or invalid request field"""

    status_code = 400


class NotFound(StoreError):
    """Unknown product or cart line"""

    status_code = 404


class Internal(StoreError):
    """Storage failure. The cause is logged, never returned."""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
