"""Class that provides a Timestream Environment Stage."""

import logging

from lib.cdk_classes import (
    CDKStage
)
from lib.cdk_project_classes import (
    CDKTargetAWSEnv
)

from ..stacks.database_stack import DatabaseStack
from ..stacks.reader_stack import ReaderStack

logger = logging.getLogger(__name__)


class EnvDeployStage(CDKStage):
    """Deploy Timestream databases into the target AWS environment."""

    def __init__(self, scope, id, target: CDKTargetAWSEnv, **kwargs):
        """Create an instance of the class."""
        super().__init__(scope, id, target, **kwargs)
        logger.info("target name: %s", target.name)

        self.databases = DatabaseStack(
            stage=self,
            id="databases",
            database_names=target.databases,
            encryption=target.encryption,
        )

        database_arns = [
            database.database_arn
            for database in self.databases.databases.values()
        ]
        database_arns += target.imported_database_arns

        self.readers = None
        if database_arns:
            self.readers = ReaderStack(
                stage=self,
                id="readers",
                database_arns=database_arns,
            )
            self.readers.add_dependency(self.databases)
