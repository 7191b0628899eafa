"""Module to define some CDK Project Classes."""

from dataclasses import dataclass, field
from typing import List

import aws_cdk as cdk


from lib.config_classes import (
    AWSAccount,
    DatabaseEncryption,
    Tag
)


@dataclass
class CDKTargetAWSEnv:
    """Define Target AWS Environment structure."""

    name: str
    aws_acct: AWSAccount
    tags: List[Tag]
    databases: List[str] = field(default_factory=list)
    encryption: DatabaseEncryption = field(default_factory=DatabaseEncryption)
    imported_database_arns: List[str] = field(default_factory=list)
    skip: bool = field(default=False)
    removal_policy: cdk.RemovalPolicy = field(
        default=cdk.RemovalPolicy.DESTROY
    )


@dataclass
class CDKProject:
    """Define CDKProject structure."""

    name: str
    envs: List[CDKTargetAWSEnv]
    tags: List[Tag]
