class OdsCellException(Exception):
    """Generic root exception for odscell"""

    pass


class InvalidValueException(OdsCellException):
    """A date or time cell carries a value that cannot be parsed."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Invalid cell value: {value!r}")


class ConfigurationException(OdsCellException):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
