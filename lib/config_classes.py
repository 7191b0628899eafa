"""Module to define dataclasses for deploy_config.py."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Tag:
    """Define AWS Tag structure."""

    key: str
    value: str


@dataclass
class AWSAccount:
    """Define AWS Account structure.

    Leave account or region unset to resolve them from the
    deployment environment at synth time.
    """

    account: Optional[str] = field(default=None)
    region: str = field(default="ap-southeast-2")


@dataclass
class DatabaseEncryption:
    """Define KMS encryption settings for an environment's databases."""

    enabled: bool = field(default=True)
    key_rotation: bool = field(default=True)
    alias: Optional[str] = field(default=None)
