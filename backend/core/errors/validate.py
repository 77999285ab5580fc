from typing import Optional


class ValidateError(Exception):
    description: Optional[str] = None
    field: Optional[str] = None

    def __init__(self, description: Optional[str] = None, field: Optional[str] = None) -> None:
        self.description = description
        self.field = field
        super().__init__(description)

    def __str__(self):
        message = self.description or self.__class__.__name__
        if self.field:
            return f"{self.field}: {message}"
        return message
