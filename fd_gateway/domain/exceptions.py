"""Domain-specific exceptions"""

RECOMMENDATION_UNAVAILABLE_MESSAGE = "Failed to get recommendations. Please try again later."


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class TextGenerationError(DomainException):
    """Text generation service failed, timed out, or returned unusable output"""

    def __init__(self, message: str, reason: str = "service_error"):
        super().__init__(message)
        self.reason = reason


class MalformedResponseError(TextGenerationError):
    """Structured reply does not carry the required recommendation fields"""

    def __init__(self, message: str):
        super().__init__(message, reason="malformed_response")


class ExternalError(DomainException):
    """Recommendation unavailable; the message is safe to show to end users"""

    def __init__(self, reason: str = "service_error"):
        super().__init__(RECOMMENDATION_UNAVAILABLE_MESSAGE)
        self.reason = reason
