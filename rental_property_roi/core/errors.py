from __future__ import annotations


class InvalidInput(ValueError):
    """Raised when an input would make a ratio undefined.

    ``field`` names the offending input so the UI can point at it.
    """

    def __init__(self, field: str, value: float, reason: str):
        self.field = field
        self.value = value
        super().__init__(f"{field}={value!r}: {reason}")
