import enum
import logging
from typing import Optional

import aws_cdk.aws_dynamodb as dynamodb

from storage import errors

logger = logging.getLogger(__name__)

PARTITION_KEY_REQUIRED_MESSAGE = "a partition key must be specified"


class KeyAttributeType(enum.Enum):
    BINARY = "B"
    NUMBER = "N"
    STRING = "S"


class KeyType(enum.Enum):
    PARTITION = "HASH"
    SORT = "RANGE"


class KeySchemaRegistry:
    """Tracks the attribute definitions and key schema of a single table.

    Entries are stored in the shape CloudFormation expects, in declaration order.
    """

    def __init__(self) -> None:
        self._key_schema: list[dynamodb.CfnTable.KeySchemaProperty] = []
        self._attribute_definitions: list[
            dynamodb.CfnTable.AttributeDefinitionProperty
        ] = []

    @property
    def key_schema(self) -> list[dynamodb.CfnTable.KeySchemaProperty]:
        return list(self._key_schema)

    @property
    def attribute_definitions(
        self,
    ) -> list[dynamodb.CfnTable.AttributeDefinitionProperty]:
        return list(self._attribute_definitions)

    def declare_attribute(self, name: str, type_: KeyAttributeType) -> None:
        if self._check_attribute(name, type_):
            return

        logger.debug("Declaring attribute %s as %s", name, type_.value)
        self._attribute_definitions.append(
            dynamodb.CfnTable.AttributeDefinitionProperty(
                attribute_name=name, attribute_type=type_.value
            )
        )

    def set_key(self, name: str, type_: KeyAttributeType, key_type: KeyType) -> None:
        # Both checks run before anything is recorded.
        self._check_attribute(name, type_)

        existing_key = self.find_key(key_type)
        if existing_key is not None:
            raise errors.DuplicateKeyRole(
                name, key_type.value, existing_key.attribute_name
            )

        self.declare_attribute(name, type_)

        logger.debug("Setting %s as the %s key", name, key_type.value)
        self._key_schema.append(
            dynamodb.CfnTable.KeySchemaProperty(
                attribute_name=name, key_type=key_type.value
            )
        )

    def find_key(
        self, key_type: KeyType
    ) -> Optional[dynamodb.CfnTable.KeySchemaProperty]:
        return next(
            (key for key in self._key_schema if key.key_type == key_type.value), None
        )

    def find_attribute(
        self, name: str
    ) -> Optional[dynamodb.CfnTable.AttributeDefinitionProperty]:
        return next(
            (
                definition
                for definition in self._attribute_definitions
                if definition.attribute_name == name
            ),
            None,
        )

    def _check_attribute(self, name: str, type_: KeyAttributeType) -> bool:
        """Returns whether the attribute is already declared with this type."""
        existing_definition = self.find_attribute(name)
        if existing_definition is None:
            return False
        if existing_definition.attribute_type != type_.value:
            raise errors.ConflictingAttributeType(
                name, type_.value, existing_definition.attribute_type
            )
        return True

    def validate(self) -> list[str]:
        """Returns validation messages; an empty list means the schema is usable."""
        messages = []
        if self.find_key(KeyType.PARTITION) is None:
            messages.append(PARTITION_KEY_REQUIRED_MESSAGE)
        return messages
