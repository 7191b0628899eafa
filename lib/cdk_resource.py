"""Module to define CDKResource definition."""

from dataclasses import dataclass, field

import aws_cdk as cdk


@dataclass
class CDKResourceDef:
    """Data class defining a resource parameters."""
    type: str               # noqa: E501 The resource type EG: Database
    module: str             # noqa: E501 The module that provisions this resource EG: cdk_timestream.
    name_ref: str           # noqa: E501 The name attribute of the created resource EG: database_name.
    kargs: dict             # noqa: E501 The keyword arguments used by the resource class.
    karg_name: bool = field(default=False)  # noqa: E501 Add a resource name karg if True
    removal_policy: cdk.RemovalPolicy = field(default=None)  # noqa: E501 Overrides the target's policy if set
