from typing import Any

class InvalidFieldError(ValueError):
    """A submitted field is present but unusable (e.g. usage that is not a number)."""

class MissingFieldError(InvalidFieldError):
    """A required field is absent or blank after trimming."""

class RecordNotFoundError(KeyError):
    def __init__(self, noun: str, record_id: Any):
        super().__init__(f"{noun} with ID {record_id} not found")
        self.noun = noun
        self.record_id = record_id

    def __str__(self) -> str:
        return self.args[0]
