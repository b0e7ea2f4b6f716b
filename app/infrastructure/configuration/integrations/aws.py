"""AWS integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class AwsSettings(IntegrationSettings):
    """AWS configuration settings.

    Environment Variables:
        AWS_REGION: AWS region for DynamoDB (default: us-east-1)
        AWS_DYNAMODB_ENDPOINT_URL: Endpoint override for dynamodb-local/LocalStack
        AWS_DYNAMODB_ROLE_ARN: Optional role assumed for DynamoDB access
    """

    AWS_REGION: str = Field(default="us-east-1", alias="AWS_REGION")
    DYNAMODB_ENDPOINT_URL: str | None = Field(
        default=None, alias="AWS_DYNAMODB_ENDPOINT_URL"
    )
    DYNAMODB_ROLE_ARN: str | None = Field(default=None, alias="AWS_DYNAMODB_ROLE_ARN")
