from typing import Optional


class NotFoundError(Exception):
    description: Optional[str] = None

    def __init__(self, description: Optional[str] = None) -> None:
        self.description = description
        super().__init__(description)

    def __str__(self):
        return self.description or "Resource not found"
