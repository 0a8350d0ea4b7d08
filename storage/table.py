import logging
from typing import Optional

import aws_cdk.aws_dynamodb as dynamodb
import jsii
from constructs import Construct, IValidation

import constants
from storage.key_schema import KeyAttributeType, KeySchemaRegistry, KeyType

logger = logging.getLogger(__name__)


def _capacity_units(capacity: Optional[int], default: int) -> int:
    # Missing, zero and negative capacities use the default.
    if capacity is None or capacity <= 0:
        return default
    return capacity


@jsii.implements(IValidation)
class _KeySchemaValidation:
    def __init__(self, registry: KeySchemaRegistry):
        self._registry = registry

    def validate(self) -> list[str]:
        return self._registry.validate()


class Table(Construct):
    """Provides a DynamoDB table with provisioned throughput.

    Keys are added after construction with add_partition_key and add_sort_key.
    The stream view type is the library's dynamodb.StreamViewType.
    A table without a partition key fails validation during synthesis.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        scope: Construct,
        id_: str,
        *,
        read_capacity: Optional[int] = None,
        write_capacity: Optional[int] = None,
        table_name: Optional[str] = None,
        stream_specification: Optional[dynamodb.StreamViewType] = None,
    ):
        super().__init__(scope, id_)

        self._registry = KeySchemaRegistry()

        # Global secondary indexes would share the table's provisioned throughput.
        read_capacity_units = _capacity_units(
            read_capacity, constants.DEFAULT_READ_CAPACITY
        )
        write_capacity_units = _capacity_units(
            write_capacity, constants.DEFAULT_WRITE_CAPACITY
        )

        self._resource = dynamodb.CfnTable(
            self,
            "Resource",
            table_name=table_name,
            key_schema=self._registry.key_schema,
            attribute_definitions=self._registry.attribute_definitions,
            provisioned_throughput=dynamodb.CfnTable.ProvisionedThroughputProperty(
                read_capacity_units=read_capacity_units,
                write_capacity_units=write_capacity_units,
            ),
            stream_specification=(
                dynamodb.CfnTable.StreamSpecificationProperty(
                    stream_view_type=stream_specification.value
                )
                if stream_specification is not None
                else None
            ),
        )

        if table_name:
            self.node.add_metadata(constants.PHYSICAL_NAME_METADATA_KEY, table_name)

        self.node.add_validation(_KeySchemaValidation(self._registry))

        self.table_arn = self._resource.attr_arn
        self.table_name = self._resource.ref
        self.table_stream_arn = self._resource.attr_stream_arn

        logger.info(
            "Created table %s (read=%s, write=%s)",
            self.node.path,
            read_capacity_units,
            write_capacity_units,
        )

    def add_partition_key(self, name: str, type_: KeyAttributeType) -> "Table":
        self._add_key(name, type_, KeyType.PARTITION)
        return self

    def add_sort_key(self, name: str, type_: KeyAttributeType) -> "Table":
        self._add_key(name, type_, KeyType.SORT)
        return self

    def validate(self) -> list[str]:
        return self._registry.validate()

    def _add_key(self, name: str, type_: KeyAttributeType, key_type: KeyType) -> None:
        self._registry.set_key(name, type_, key_type)
        # The resource holds copies of the registry lists.
        self._resource.key_schema = self._registry.key_schema
        self._resource.attribute_definitions = self._registry.attribute_definitions
