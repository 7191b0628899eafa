"""Module to resolve the AWS account and region to deploy into."""

import logging
import os
from typing import Optional

import boto3

from lib.config_classes import AWSAccount

logger = logging.getLogger(__name__)


def lookup_caller_account() -> str:
    """Return the account id of the credentials in use."""
    sts = boto3.client("sts")
    return sts.get_caller_identity()["Account"]


def resolve_account(aws_acct: AWSAccount) -> str:
    """Resolve the account for an environment.

    Order: explicit config, CDK_DEFAULT_ACCOUNT, then an STS lookup.
    """
    if aws_acct.account:
        return aws_acct.account

    account = os.environ.get("CDK_DEFAULT_ACCOUNT")
    if account:
        return account

    account = lookup_caller_account()
    logger.info("Resolved deployment account %s from caller identity", account)
    return account


def resolve_region(aws_acct: AWSAccount) -> Optional[str]:
    """Resolve the region for an environment, if any is known."""
    return aws_acct.region or os.environ.get("CDK_DEFAULT_REGION")
