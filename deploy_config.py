"""Define a desired configuration for the Timestream environments.

Each CDKTargetAWSEnv becomes one stage holding its databases and
a reader stack for the databases it imports. Leave an account unset
to deploy into the account of the credentials in use.
"""
from typing import List

from lib.config_classes import (
    AWSAccount,
    DatabaseEncryption,
    Tag
)

from lib.cdk_project_classes import (
    CDKProject,
    CDKTargetAWSEnv
)

_prj_name = "tsdb"

"""A list of target AWS Accounts to deploy databases into."""
envs: List[CDKTargetAWSEnv] = [

    CDKTargetAWSEnv(
        name="dev",
        aws_acct=AWSAccount(), # account of the current credentials
        databases=["metrics", "events"], # one Timestream database per name
        encryption=DatabaseEncryption(enabled=False), # AWS owned key
        tags=[
            Tag("environment", "dev"),
        ]
    ),
    CDKTargetAWSEnv(
        name="prod",
        aws_acct=AWSAccount(
            account="012345678912", # account number to deploy to e.g. "012345678912"
        ),
        databases=["metrics", "events"],
        encryption=DatabaseEncryption(
            alias="alias/tsdb-prod-timestream", # customer managed key, rotated yearly
        ),
        imported_database_arns=[
            # databases owned by other teams to grant read access to e.g.
            # "arn:aws:timestream:ap-southeast-2:012345678912:database/billing"
        ],
        skip=True, # set to False once the account number is filled in
        tags=[
            Tag("environment", "prod"),
        ]
    ),
]

"""
The CDK project that provisions Timestream databases
into each TargetAWSEnv account.
"""
project = CDKProject(
    name=_prj_name,
    envs=envs,
    tags=[
        Tag("project-name", _prj_name),
        Tag("owner", "Apps-Services"),
    ]
)
