class TableConfigurationError(ValueError):
    """Raised when a table construct is configured inconsistently."""


class DuplicateKeyRole(TableConfigurationError):
    """A second attribute was assigned a key role that is already taken."""

    def __init__(self, attribute_name: str, key_type: str, existing_attribute_name: str):
        super().__init__(
            f"Unable to set {attribute_name} as a {key_type} key, "
            f"because {existing_attribute_name} is a {key_type} key"
        )
        self.attribute_name = attribute_name
        self.key_type = key_type
        self.existing_attribute_name = existing_attribute_name


class ConflictingAttributeType(TableConfigurationError):
    """An attribute was redeclared with a different scalar type."""

    def __init__(self, attribute_name: str, attribute_type: str, existing_attribute_type: str):
        super().__init__(
            f"Unable to specify {attribute_name} as {attribute_type} "
            f"because it was already defined as {existing_attribute_type}"
        )
        self.attribute_name = attribute_name
        self.attribute_type = attribute_type
        self.existing_attribute_type = existing_attribute_type
