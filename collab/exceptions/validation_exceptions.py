from collab.constants.messages import ApiErrors


class ValidationException(Exception):
    """A required field is empty or missing. Reported to the caller, never retried."""

    def __init__(self, message: str = ApiErrors.VALIDATION_ERROR, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(self.message)
