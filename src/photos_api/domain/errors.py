"""Errors raised by the photo service."""


class PhotoServiceError(Exception):
    """Base class for photo service failures."""


class RateLimitExceededError(PhotoServiceError):
    """The creation allowance is exhausted."""


class PhotoNotFoundError(PhotoServiceError):
    """No photo exists for the requested id."""

    def __init__(self, photo_id: int) -> None:
        super().__init__(f"Photo {photo_id} not found")
        self.photo_id = photo_id


class PhotoAccessDeniedError(PhotoServiceError):
    """The caller may not modify the requested photo."""

    def __init__(self, photo_id: int, principal: str) -> None:
        super().__init__(f"{principal} may not modify photo {photo_id}")
        self.photo_id = photo_id
        self.principal = principal
