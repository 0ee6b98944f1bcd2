from typing import Optional


class DuplicateRecordError(Exception):
    """Raised by a repository when a write violates a uniqueness constraint"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
