"""Module to create a Reader Stack.

Imports Timestream databases by ARN, whether declared in a sibling
stack or created outside this project, and grants read access to
them through a managed policy.
"""
from typing import List

from aws_cdk import aws_iam as iam

from cdk_timestream import (
    Database,
    DatabaseDescriptor
)
from lib.cdk_classes import (
    CDKStack,
    CDKStage,
)

READ_ACTIONS = [
    "timestream:DescribeDatabase",
    "timestream:ListTables",
]


class ReaderStack(CDKStack):
    """Creates a stack granting read access to imported databases."""
    def __init__(
            self,
            stage: CDKStage,
            id: str,
            database_arns: List[str],
            **kwargs,
    ) -> None:
        self.resource_names = []
        self.database_arns = database_arns
        self.imported: List[DatabaseDescriptor] = []
        self.policy = None
        super().__init__(stage, id, **kwargs)

    def _provision_resources(self) -> None:
        self.imported = [
            Database.from_database_arn(self, arn)
            for arn in self.database_arns
        ]
        if not self.imported:
            return

        self.policy = iam.ManagedPolicy(
            self,
            "reader-policy",
            managed_policy_name=f"{self._prefix()}-timestream-reader",
            statements=[
                iam.PolicyStatement(
                    actions=READ_ACTIONS,
                    resources=[
                        descriptor.database_arn
                        for descriptor in self.imported
                    ]
                )
            ]
        )
