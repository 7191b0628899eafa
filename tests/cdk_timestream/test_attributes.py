import aws_cdk as cdk
import pytest

from cdk_timestream.attributes import (
    find_name_in_arn,
    resolve_arn_from_name,
    resolve_name,
    resolve_name_from_arn,
)
from cdk_timestream.descriptor import AccountContext
from cdk_timestream.errors import (
    InvalidContextError,
    MalformedArnError,
)

CONTEXT = AccountContext(
    partition="aws", region="us-east-1", account="123456789012"
)


def test_resolve_name_prefers_explicit() -> None:
    calls = []

    def generator() -> str:
        calls.append(1)
        return "generated"

    assert resolve_name("custom", generator) == "custom"
    assert not calls


@pytest.mark.parametrize("explicit", [None, ""])
def test_resolve_name_falls_back_to_generator(explicit) -> None:
    assert resolve_name(explicit, lambda: "generated") == "generated"


def test_resolve_arn_from_name() -> None:
    arn = resolve_arn_from_name("metrics", "timestream", CONTEXT)
    assert arn == "arn:aws:timestream:us-east-1:123456789012:database/metrics"


@pytest.mark.parametrize(
    "context, missing",
    [
        (AccountContext(partition="aws", region="us-east-1"), "account"),
        (AccountContext(region="us-east-1", account="123456789012"), "partition"),
        (AccountContext(partition="", account="123456789012"), "partition"),
    ],
)
def test_resolve_arn_from_name_requires_context(
    context: AccountContext, missing: str
) -> None:
    with pytest.raises(InvalidContextError) as excinfo:
        resolve_arn_from_name("metrics", "timestream", context)
    assert excinfo.value.missing == missing


def test_resolve_arn_from_name_defers_unresolved_context(
    stack: cdk.Stack,
) -> None:
    context = AccountContext.from_stack(stack)
    assert not context.is_resolved

    arn = resolve_arn_from_name("metrics", "timestream", context)
    assert cdk.Token.is_unresolved(arn)
    assert arn.startswith("arn:")
    assert arn.endswith(":database/metrics")


def test_account_context_from_env_stack(env_stack: cdk.Stack) -> None:
    context = AccountContext.from_stack(env_stack)
    assert context.account == "123456789012"
    assert context.region == "us-east-1"


@pytest.mark.parametrize(
    "arn, expected_name",
    [
        ("arn:aws:timestream:us-east-1:123456789012:database/custom", "custom"),
        ("timestream:aws:123456789012:database/custom", "custom"),
        ("arn:aws-cn:timestream:cn-north-1:123456789012:database/a.b_c-d", "a.b_c-d"),
    ],
)
def test_resolve_name_from_arn(arn: str, expected_name: str) -> None:
    assert resolve_name_from_arn(arn) == expected_name


@pytest.mark.parametrize(
    "arn",
    [
        "",
        "not-an-arn",
        "timestream:aws:database/custom",
        "arn:aws:timestream:us-east-1:123456789012:database",
        "arn:aws:timestream:us-east-1:123456789012:/custom",
        "arn:aws:timestream:us-east-1:123456789012:database/",
    ],
)
def test_resolve_name_from_arn_rejects_malformed(arn: str) -> None:
    with pytest.raises(MalformedArnError):
        resolve_name_from_arn(arn)


def test_malformed_arn_error_is_value_error() -> None:
    with pytest.raises(ValueError, match="not-an-arn"):
        resolve_name_from_arn("not-an-arn")


def test_resolve_name_from_arn_round_trips_built_arn(stack: cdk.Stack) -> None:
    for name in ["metrics", "a.b", "x_y-z"]:
        arn = resolve_arn_from_name(
            name, "timestream", AccountContext.from_stack(stack)
        )
        assert resolve_name_from_arn(arn) == name


def test_resolve_name_from_token_arn_uses_scope(stack: cdk.Stack) -> None:
    arn = cdk.CfnParameter(stack, "DatabaseArn").value_as_string

    name = resolve_name_from_arn(arn, stack)

    assert cdk.Token.is_unresolved(name)
    assert "Fn::Select" in stack.resolve(name)


def test_resolve_name_from_token_arn_without_scope(stack: cdk.Stack) -> None:
    arn = cdk.CfnParameter(stack, "DatabaseArn").value_as_string

    with pytest.raises(MalformedArnError):
        resolve_name_from_arn(arn)


@pytest.mark.parametrize(
    "arn, expected_name",
    [
        ("arn:aws:timestream:us-east-1:123456789012:database/custom", "custom"),
        ("not-an-arn", None),
        ("arn:aws:timestream:us-east-1:123456789012:database", None),
    ],
)
def test_find_name_in_arn(arn: str, expected_name) -> None:
    assert find_name_in_arn(arn) == expected_name
