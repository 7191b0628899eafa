"""Module to define the errors raised by the Timestream constructs."""


class TimestreamError(Exception):
    """Base class for all errors raised by this package."""


class MalformedArnError(TimestreamError, ValueError):
    """An ARN could not be parsed into its resource name."""

    def __init__(self, arn: str, reason: str) -> None:
        super().__init__(f"Malformed ARN {arn!r}: {reason}")
        self.arn = arn
        self.reason = reason


class InvalidContextError(TimestreamError):
    """The account context is missing a value needed to build an ARN."""

    def __init__(self, missing: str) -> None:
        super().__init__(
            f"Cannot build ARN: {missing} is not available in the account context"
        )
        self.missing = missing


class InvalidDatabaseNameError(TimestreamError, ValueError):
    """A database name breaks the Timestream naming rules."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Invalid database name {name!r}: must be 3-256 characters "
            "of letters, digits, '_', '.' or '-'"
        )
        self.name = name
