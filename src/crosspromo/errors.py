from typing import Optional


class AppSearchError(Exception):
    """Base error for everything raised by the lookup and search clients."""

    default_message = "App Store request failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(AppSearchError):
    default_message = "No app found with the provided ID"


class InvalidRequestError(AppSearchError):
    default_message = "Invalid URL provided"


class NetworkError(AppSearchError):
    def __init__(self, message: str):
        super().__init__(f"Network error: {message}")


class DecodeError(AppSearchError):
    def __init__(self, message: str):
        super().__init__(f"Data decoding error: {message}")
