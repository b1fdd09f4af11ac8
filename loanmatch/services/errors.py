# This project was developed with assistance from AI tools.
"""Domain errors raised by the scoring engine and its repositories."""


class InvalidInputError(ValueError):
    """Raised when borrower or offer figures cannot be scored (e.g. zero income)."""


class NotFoundError(LookupError):
    """Raised when a profile, financial record, offer or bundle does not exist."""

    def __init__(self, entity: str, key: str):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} '{key}' not found")
