"""Module to define some CDK Helper Classes."""

import importlib
import logging

from aws_cdk import (
    Stage,
    Stack
)
from constructs import Construct

from lib.cdk_resource import CDKResourceDef


from lib.cdk_project_classes import (
    CDKTargetAWSEnv
)

from deploy_config import (
    project
)

logger = logging.getLogger(__name__)


class CDKStage(Stage):
    """Custom Stage Class with predined helpers."""

    def __init__(
            self,
            scope: Construct,
            id: str,
            target: CDKTargetAWSEnv,
            **kwargs
    ) -> None:
        """Create an instance of the class."""
        super().__init__(scope, id, **kwargs)
        self.target = target

    def _prefix(self) -> str:
        return f"{project.name}-{self.target.name}"


class CDKStack(Stack):
    """Custom Stack Class with predined helpers.

    Subclasses set resource_names and cdk_def before calling
    super().__init__(), or override _provision_resources().
    """
    def __init__(
        self,
        stage: CDKStage,
        id: str,
        **kwargs,
    ) -> None:
        super().__init__(stage, id, **kwargs)
        self.stage = stage
        self.resources = {}
        self._provision_resources()

    def _provision_resources(self) -> None:
        """Create CDK Resource objects."""
        for resource_name in self.resource_names:
            self._provision_resource(
                resource_name,
                self.cdk_def
            )

    def _provision_resource(
        self,
        resource_name: str,
        cdk_def: CDKResourceDef
    ) -> "CDKResource":
        resource = CDKResource(
            scope=self,
            cdk_def=cdk_def,
            name=resource_name
        )
        self.resources[f"{resource_name}{cdk_def.type}"] = resource
        return resource

    def _prefix(self) -> str:
        return f"{project.name}-{self.stage.target.name}"

    def _get_cdk_def(self, type, module, name_ref, kargs, karg_name=False):
        return CDKResourceDef(
            type=type,
            module=module,
            name_ref=name_ref,
            kargs=kargs,
            karg_name=karg_name
        )


class CDKResource():
    """Class to create CDK resources from a CDKResourceDef."""

    def __init__(
        self,
        scope: CDKStack,
        cdk_def: CDKResourceDef,
        name: str
    ) -> None:
        self.stack = scope
        self.cdk_def = cdk_def
        self.id = self._get_resource_id(name)
        self._create_resource()

    def _create_resource(self) -> None:
        """Create the CDK resource.

        Uses the dynamic nature of Python to import the necessary module
        and provision a resource.

        self.resource = getattr(
            importlib.import_module(CDKResourceDef.module),
            CDKResourceDef.type
        )(**kargs) equates to:
        self.resource = cdk_timestream.Database(**kargs) where:
        **kargs = (scope=self.stack, id=self.id, ...) etc.

        """
        module = importlib.import_module(self.cdk_def.module)

        kargs = self._get_kargs()
        self.resource = getattr(module, self.cdk_def.type)(**kargs)

        self.resource.apply_removal_policy(self._removal_policy())

        self.name = getattr(self.resource, self.cdk_def.name_ref)
        logger.debug("Provisioned %s %s", self.cdk_def.type, self.id)

    def _get_resource_id(self, name: str) -> str:
        """Create a unique resource id based on object context.

        Will create {project.name}-{stage.name}-{name}{Resource.type}.
        EG: tsdb-dev-metricsDatabase
        """
        return f"{self.stack._prefix()}-{name}{self.cdk_def.type}"

    def _removal_policy(self):
        if self.cdk_def.removal_policy is not None:
            return self.cdk_def.removal_policy
        return self.stack.stage.target.removal_policy

    def _get_kargs(self) -> dict:
        """Construct kargs for CDK resource.

        All CDK objects need a scope and an identifier.
        We then add the resource specific kargs from our CDKResourseDef.
        EG: cdk_timestream.Database takes "kms_key" as an argument.
        """
        kargs = {
            "scope": self.stack,
            "id": self.id
        }
        if self.cdk_def.karg_name:
            kargs[self.cdk_def.name_ref] = self.id.lower()
        kargs.update(self.cdk_def.kargs)

        return kargs
