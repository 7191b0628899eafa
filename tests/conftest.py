import aws_cdk as cdk
import pytest

from lib.cdk_project_classes import CDKTargetAWSEnv
from lib.config_classes import (
    AWSAccount,
    DatabaseEncryption,
    Tag,
)

ACCOUNT = "123456789012"
REGION = "us-east-1"


## Shared fixtures


@pytest.fixture(name="app")
def fixture_app() -> cdk.App:
    return cdk.App()


@pytest.fixture(name="stack")
def fixture_stack(app: cdk.App) -> cdk.Stack:
    # Environment-agnostic: partition, region and account are tokens
    return cdk.Stack(app, "test-stack")


@pytest.fixture(name="env_stack")
def fixture_env_stack(app: cdk.App) -> cdk.Stack:
    return cdk.Stack(
        app,
        "env-stack",
        env=cdk.Environment(account=ACCOUNT, region=REGION),
    )


@pytest.fixture(name="target")
def fixture_target() -> CDKTargetAWSEnv:
    return CDKTargetAWSEnv(
        name="test",
        aws_acct=AWSAccount(account=ACCOUNT, region=REGION),
        databases=["metrics", "events"],
        encryption=DatabaseEncryption(),
        tags=[Tag("environment", "test")],
    )
