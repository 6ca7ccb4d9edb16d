class MarketplaceError(Exception):
    """Base class for domain errors raised by services."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(MarketplaceError):
    status_code = 404


class InvalidStateError(MarketplaceError):
    status_code = 400


class ForbiddenError(MarketplaceError):
    status_code = 403
