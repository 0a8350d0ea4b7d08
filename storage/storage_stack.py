from typing import Any

import aws_cdk as cdk
import aws_cdk.aws_dynamodb as dynamodb
from constructs import Construct

from storage.key_schema import KeyAttributeType
from storage.table import Table


class StorageStack(cdk.Stack):
    def __init__(self, scope: Construct, id_: str, **kwargs: Any):
        super().__init__(scope, id_, **kwargs)

        table = Table(
            self,
            "Table",
            stream_specification=dynamodb.StreamViewType.NEW_AND_OLD_IMAGES,
        )
        table.add_partition_key("Id", KeyAttributeType.STRING).add_sort_key(
            "CreatedAt", KeyAttributeType.NUMBER
        )

        cdk.CfnOutput(self, "TableArn", value=table.table_arn)
        cdk.CfnOutput(self, "TableName", value=table.table_name)
        cdk.CfnOutput(self, "TableStreamArn", value=table.table_stream_arn)
