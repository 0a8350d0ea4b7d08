APP_NAME = "DynamoDBTable"

DEFAULT_READ_CAPACITY = 5
DEFAULT_WRITE_CAPACITY = 5

# Tree metadata recorded when a table is given an explicit physical name.
PHYSICAL_NAME_METADATA_KEY = "aws:cdk:hasPhysicalName"
