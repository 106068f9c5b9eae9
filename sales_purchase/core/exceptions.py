class NotFoundError(LookupError):
    """Raised when a referenced entity or a stored record does not exist."""


class LookupServiceError(RuntimeError):
    """Raised when a sibling service cannot be reached or answers with an error."""


__all__ = ["LookupServiceError", "NotFoundError"]
