"""Module to create a Database Stack.

CDKStack has a _provison_resources() method called from
__init__(). This uses naming conventions and references
to CDKResource definitions to create the actual CDK resources.

This stack overrides _provision_resources() to create the KMS
key first, so every database can reference it.

EG: metrics_db = self.stage.databases.databases["metrics"]

"""
from typing import Dict, List, Optional

import aws_cdk as cdk

from cdk_timestream import (
    Database,
    KeyReference
)
from lib.cdk_classes import (
    CDKStack,
    CDKStage,
)
from lib.config_classes import DatabaseEncryption


class DatabaseStack(CDKStack):
    """Creates a stack for Timestream databases."""
    def __init__(
            self,
            stage: CDKStage,
            id: str,
            database_names: List[str],
            encryption: DatabaseEncryption,
            **kwargs,
    ) -> None:
        self.resource_names = database_names
        self.encryption = encryption
        self.key = None
        self.databases: Dict[str, Database] = {}
        super().__init__(stage, id, **kwargs)

    def _provision_resources(self) -> None:
        kms_key = self._provision_key()

        self.cdk_def = self._get_cdk_def(
            type="Database",
            module="cdk_timestream",
            name_ref="database_name",
            kargs={"kms_key": kms_key},
            karg_name=True
        )
        super()._provision_resources()

        for name in self.resource_names:
            database = self.resources[f"{name}{self.cdk_def.type}"].resource
            self.databases[name] = database
            self._add_outputs(name, database)

    def _provision_key(self) -> Optional[KeyReference]:
        """Create the KMS key shared by this stack's databases."""
        if not self.encryption.enabled or not self.resource_names:
            return None

        kargs = {
            "description": f"{self._prefix()} Timestream database encryption",
            "enable_key_rotation": self.encryption.key_rotation,
        }
        if self.encryption.alias:
            kargs["alias"] = self.encryption.alias
        cdk_def = self._get_cdk_def(
            type="Key",
            module="aws_cdk.aws_kms",
            name_ref="key_id",
            kargs=kargs
        )
        self.key = self._provision_resource("timestream", cdk_def).resource
        return KeyReference.from_key(self.key)

    def _add_outputs(self, name: str, database: Database) -> None:
        cdk.CfnOutput(
            self,
            f"{name}-arn-output",
            value=database.database_arn,
            export_name=f"{self._prefix()}-{name}-database-arn"
        )
        cdk.CfnOutput(
            self,
            f"{name}-name-output",
            value=database.database_name,
            export_name=f"{self._prefix()}-{name}-database-name"
        )
