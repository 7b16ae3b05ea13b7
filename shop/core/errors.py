"""Base error for use-case failures rendered by the HTTP layer."""


class AppError(Exception):
    """A business-rule failure carrying a human-readable message."""

    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
