from typing import Optional

import boto3
import botocore.session
from botocore.config import Config as BotoConfig
from botocore.credentials import CredentialResolver
from loguru import logger

from awslocal.core.credential_provider import AwsLocalCredentialProvider

AWS_LOCAL_ENDPOINT = "http://localhost:4566"
AWS_LOCAL_DEFAULT_REGION = "us-east-1"


class AwsLocalClientFactory:
    """Builds boto3 clients that talk to LocalStack.

    The underlying session resolves credentials from the given provider only,
    so nothing from the environment or ~/.aws leaks into local runs.
    """

    def __init__(
        self,
        credential_provider: AwsLocalCredentialProvider,
        endpoint: str,
        region: str,
        client_config: Optional[BotoConfig] = None,
    ):
        self._endpoint = endpoint
        self._region = region
        self._client_config = client_config

        core_session = botocore.session.Session()
        core_session.register_component(
            "credential_provider", CredentialResolver(providers=[credential_provider])
        )
        self._session = boto3.Session(
            botocore_session=core_session, region_name=region
        )

    @classmethod
    def default(cls) -> "AwsLocalClientFactory":
        return cls(
            AwsLocalCredentialProvider.default(),
            AWS_LOCAL_ENDPOINT,
            AWS_LOCAL_DEFAULT_REGION,
        )

    @property
    def session(self) -> boto3.Session:
        return self._session

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def region(self) -> str:
        return self._region

    def client(self, service_name: str):
        logger.debug(f"Creating {service_name} client for {self._endpoint}")
        return self._session.client(
            service_name,
            endpoint_url=self._endpoint,
            config=self._client_config,
        )

    def sqs(self):
        return self.client("sqs")
