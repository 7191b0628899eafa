"""Module to define the Timestream Database construct."""

import logging
import re
from typing import Optional

from aws_cdk import (
    Names,
    Resource,
    Stack,
    Token,
    aws_timestream as timestream
)
from constructs import Construct

from cdk_timestream.attributes import (
    find_name_in_arn,
    resolve_arn_from_name,
    resolve_name,
    resolve_name_from_arn
)
from cdk_timestream.descriptor import (
    AccountContext,
    DatabaseDescriptor,
    KeyReference
)
from cdk_timestream.errors import InvalidDatabaseNameError

logger = logging.getLogger(__name__)

SERVICE_NAMESPACE = "timestream"
DATABASE_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_.-]{3,256}$")
DATABASE_NAME_MAX_LENGTH = 256


class Database(Resource):
    """A Timestream database.

    EG: Database(stack, "metrics", database_name="metrics",
                 kms_key=KeyReference.from_key(key))

    The database name defaults to a unique name derived from the
    construct path when none is given.
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        *,
        database_name: Optional[str] = None,
        kms_key: Optional[KeyReference] = None
    ) -> None:
        if database_name and not Token.is_unresolved(database_name):
            _validate_name(database_name)
        super().__init__(scope, id, physical_name=database_name)

        name = resolve_name(database_name, self._generate_name)
        self.resource = timestream.CfnDatabase(
            self,
            "Resource",
            database_name=name,
            kms_key_id=kms_key.key_id if kms_key else None
        )

        self._descriptor = DatabaseDescriptor(
            database_arn=resolve_arn_from_name(
                name,
                SERVICE_NAMESPACE,
                AccountContext.from_stack(Stack.of(self))
            ),
            database_name=name,
            kms_key=kms_key
        )
        logger.debug(
            "Declared Timestream database %s (encrypted: %s)",
            name,
            kms_key is not None
        )

    @classmethod
    def from_database_arn(
        cls,
        scope: Construct,
        database_arn: str
    ) -> DatabaseDescriptor:
        """Reference an existing database by its ARN."""
        return cls.from_database_attributes(scope, database_arn=database_arn)

    @classmethod
    def from_database_attributes(
        cls,
        scope: Construct,
        *,
        database_arn: str,
        database_name: Optional[str] = None
    ) -> DatabaseDescriptor:
        """Reference an existing database by ARN and optional name.

        Nothing is added to the construct tree. The name is taken from
        the ARN when not given. An explicit name wins over the one in
        the ARN. Imported databases never carry a key reference.
        """
        if not database_name:
            database_name = resolve_name_from_arn(database_arn, scope)
        else:
            arn_name = find_name_in_arn(database_arn)
            if arn_name is not None and arn_name != database_name:
                logger.warning(
                    "Database name %s does not match ARN %s; using %s",
                    database_name,
                    database_arn,
                    database_name
                )

        logger.debug("Imported Timestream database %s", database_name)
        return DatabaseDescriptor(
            database_arn=database_arn,
            database_name=database_name
        )

    @property
    def descriptor(self) -> DatabaseDescriptor:
        return self._descriptor

    @property
    def database_arn(self) -> str:
        return self._descriptor.database_arn

    @property
    def database_name(self) -> str:
        return self._descriptor.database_name

    @property
    def kms_key(self) -> Optional[KeyReference]:
        return self._descriptor.kms_key

    def _generate_name(self) -> str:
        return Names.unique_resource_name(
            self,
            max_length=DATABASE_NAME_MAX_LENGTH
        )


def _validate_name(name: str) -> None:
    if not DATABASE_NAME_PATTERN.match(name):
        raise InvalidDatabaseNameError(name)
