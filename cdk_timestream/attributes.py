"""Module to derive Timestream database attributes.

Names and ARNs are filled in from whatever is available: an explicit
value, a generated default, or the account context of the stack.
Values may be CDK tokens that only resolve at deploy time, so parsing
falls back to CloudFormation intrinsics when a string has no
structure to parse yet.
"""

import logging
from typing import Callable, Optional

from aws_cdk import (
    ArnFormat,
    Stack,
    Token
)
from constructs import Construct

from cdk_timestream.descriptor import AccountContext
from cdk_timestream.errors import (
    InvalidContextError,
    MalformedArnError
)

logger = logging.getLogger(__name__)

# service, partition, account and resource, ignoring a leading "arn"
MIN_ARN_SEGMENTS = 4


def resolve_name(
    explicit: Optional[str],
    generator: Callable[[], str]
) -> str:
    """Return the explicit name, or a generated one when it is empty."""
    if explicit:
        return explicit
    return generator()


def resolve_arn_from_name(
    name: str,
    service_namespace: str,
    context: AccountContext,
    resource_type: str = "database"
) -> str:
    """Build the ARN of a named resource in the given account context.

    EG: arn:aws:timestream:us-east-1:123456789012:database/metrics
    """
    if not context.account:
        raise InvalidContextError("account")
    if not context.partition:
        raise InvalidContextError("partition")
    if not context.is_resolved:
        logger.debug(
            "Deferring ARN resolution for %s/%s to deploy time",
            resource_type,
            name
        )

    return (
        f"arn:{context.partition}:{service_namespace}:{context.region or ''}:"
        f"{context.account}:{resource_type}/{name}"
    )


def resolve_name_from_arn(
    arn: str,
    scope: Optional[Construct] = None
) -> str:
    """Extract the resource name segment from an ARN.

    Accepts full ARNs (arn:partition:service:region:account:type/name)
    and the short service:partition:account:type/name form. An ARN that
    is a single unresolved token is split by CloudFormation when a
    scope is given.
    """
    try:
        return _parse_resource_name(arn)
    except MalformedArnError:
        if scope is None or not Token.is_unresolved(arn):
            raise

    logger.debug("Splitting unresolved ARN %s at deploy time", arn)
    components = Stack.of(scope).split_arn(
        arn,
        ArnFormat.SLASH_RESOURCE_NAME
    )
    return components.resource_name


def _parse_resource_name(arn: str) -> str:
    if not arn:
        raise MalformedArnError(arn, "ARN is empty")

    segments = arn.split(":")
    if segments[0] == "arn":
        segments = segments[1:]
    if len(segments) < MIN_ARN_SEGMENTS:
        raise MalformedArnError(
            arn,
            f"expected at least {MIN_ARN_SEGMENTS} ':'-delimited segments"
        )

    resource_type, _, resource_name = segments[-1].partition("/")
    if not resource_type or not resource_name:
        raise MalformedArnError(arn, "missing resource-type/resource-name")
    return resource_name


def find_name_in_arn(arn: str) -> Optional[str]:
    """Return the literal resource name of an ARN, or None when it has none."""
    try:
        name = _parse_resource_name(arn)
    except MalformedArnError:
        return None
    return None if Token.is_unresolved(name) else name
