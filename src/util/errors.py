class ArityError(ValueError):
    """More chromosome tables requested than were supplied"""


class SchemaError(KeyError):
    """A required field is absent from an input record"""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field

    def __str__(self) -> str:
        return self.args[0]
