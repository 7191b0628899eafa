"""Application to create the Timestream database stages."""

import logging

import aws_cdk as cdk
from cdk_nag import AwsSolutionsChecks

from deploy_config import project
from lib.account import (
    resolve_account,
    resolve_region
)
from timestream_env.stages.env_deploy_stage import EnvDeployStage


app = cdk.App()
logging.basicConfig(
    level=app.node.try_get_context("log_level") or "INFO",
    format="%(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger("app")

for target in project.envs: # create a stage for each environment
    if target.skip:
        logger.info("skipping environment: %s", target.name)
        continue
    stage = EnvDeployStage(
        app,
        f"{project.name}-{target.name}",
        target,
        env=cdk.Environment(
            account=resolve_account(target.aws_acct),
            region=resolve_region(target.aws_acct)
        )
    )

    for tag in project.tags + target.tags:
        cdk.Tags.of(stage).add(
            tag.key,
            tag.value
        )

cdk.Aspects.of(app).add(AwsSolutionsChecks(verbose=True))

app.synth()
