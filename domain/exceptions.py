"""Domain Exceptions"""


class BookingAppError(Exception):
    """Base exception for hotel booking errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidCriteria(BookingAppError):
    """Raised when search input is malformed."""

    pass


class InvalidRange(BookingAppError):
    """Raised when check-out is not after check-in or guests < 1."""

    pass


class NotFound(BookingAppError):
    """Raised when a referenced booking, hotel or record does not exist."""

    pass


class PersistenceError(BookingAppError):
    """Raised when the document store fails to read or write."""

    pass


class AuthRequired(BookingAppError):
    """Raised when an operation needs a signed-in user."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)
