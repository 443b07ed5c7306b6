class FormMethodError(Exception):
    """Base class for all form_method errors."""


class InvalidMethodError(FormMethodError, ValueError):
    """Raised when a value is not a valid HTTP method token."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f'"{value}" is not a valid HTTP method.')
