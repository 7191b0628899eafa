"""CDK constructs for Amazon Timestream databases."""

from cdk_timestream.database import Database
from cdk_timestream.descriptor import (
    AccountContext,
    DatabaseDescriptor,
    KeyReference
)
from cdk_timestream.errors import (
    InvalidContextError,
    InvalidDatabaseNameError,
    MalformedArnError,
    TimestreamError
)

__all__ = [
    "AccountContext",
    "Database",
    "DatabaseDescriptor",
    "InvalidContextError",
    "InvalidDatabaseNameError",
    "KeyReference",
    "MalformedArnError",
    "TimestreamError",
]
