"""Module to define the value types describing a Timestream database."""

from dataclasses import dataclass, field
from typing import Optional

from aws_cdk import (
    Stack,
    Token,
    aws_kms as kms
)


@dataclass(frozen=True)
class KeyReference:
    """Reference to a KMS key, held by identifier only.

    The key itself is owned elsewhere; the reference is never
    dereferenced or validated.
    """

    key_id: str

    @classmethod
    def from_key(cls, key: kms.IKey) -> "KeyReference":
        """Reference an existing CDK key by its key id."""
        return cls(key_id=key.key_id)


@dataclass(frozen=True)
class AccountContext:
    """Partition, region and account used to build ARNs.

    Any of the values may be an unresolved CDK token, which
    CloudFormation fills in at deploy time.
    """

    partition: Optional[str] = field(default=None)
    region: Optional[str] = field(default=None)
    account: Optional[str] = field(default=None)

    @classmethod
    def from_stack(cls, stack: Stack) -> "AccountContext":
        return cls(
            partition=stack.partition,
            region=stack.region,
            account=stack.account
        )

    @property
    def is_resolved(self) -> bool:
        return not any(
            Token.is_unresolved(value)
            for value in (self.partition, self.region, self.account)
            if value is not None
        )


@dataclass(frozen=True)
class DatabaseDescriptor:
    """Public attributes of one Timestream database.

    Created once, either for a newly declared database or for an
    imported one, and never modified afterwards.
    """

    database_arn: str
    database_name: Optional[str] = field(default=None)
    kms_key: Optional[KeyReference] = field(default=None)

    def __post_init__(self) -> None:
        if not self.database_arn:
            raise ValueError("database_arn must not be empty")

    @property
    def is_resolved(self) -> bool:
        """True once no attribute holds a deploy-time token."""
        if Token.is_unresolved(self.database_arn):
            return False
        return self.database_name is None or not Token.is_unresolved(
            self.database_name
        )
