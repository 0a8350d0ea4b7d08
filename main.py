import os

import aws_cdk as cdk

import constants
from storage.storage_stack import StorageStack

app = cdk.App()

# Storage sandbox stack
StorageStack(
    app,
    f"{constants.APP_NAME}-Storage-Sandbox",
    env=cdk.Environment(
        account=os.environ["CDK_DEFAULT_ACCOUNT"],
        region=os.environ["CDK_DEFAULT_REGION"],
    ),
)

app.synth()
