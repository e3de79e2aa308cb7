import dataclasses

from botocore.credentials import CredentialProvider, Credentials
from loguru import logger

from awslocal.exceptions.credentials_exceptions import (
    AwsLocalCredentialsEmptyException,
)
from awslocal.models.credentials_model import CredentialsModel

AWS_LOCAL_CREDENTIALS_NAME = "AwsLocalCredentials"
AWS_LOCAL_ACCOUNT_ID = "000000000000"
AWS_LOCAL_ACCESS_KEY = "test"
AWS_LOCAL_SECRET = "test"


class AwsLocalCredentialProvider(CredentialProvider):
    """Static credentials for LocalStack.

    Always hands out the same key, secret and account id. The credentials
    never expire, so botocore can cache them for the lifetime of a session.
    """

    METHOD = "awslocal"
    CANONICAL_NAME = AWS_LOCAL_CREDENTIALS_NAME

    def __init__(
        self, key: str, secret: str, account_id: str, source: str = ""
    ) -> None:
        super().__init__()
        self._value = CredentialsModel(
            access_key_id=key,
            secret_access_key=secret,
            account_id=account_id,
            session_token="",
            can_expire=False,
            source=source,
        )

    @classmethod
    def default(cls) -> "AwsLocalCredentialProvider":
        return cls(AWS_LOCAL_ACCESS_KEY, AWS_LOCAL_SECRET, AWS_LOCAL_ACCOUNT_ID)

    def retrieve(self) -> CredentialsModel:
        value = self._value
        if value.is_empty:
            raise AwsLocalCredentialsEmptyException(
                CredentialsModel(source=AWS_LOCAL_CREDENTIALS_NAME)
            )

        if not value.source:
            value = dataclasses.replace(value, source=AWS_LOCAL_CREDENTIALS_NAME)

        return value

    def is_expired(self) -> bool:
        return False

    def load(self) -> Credentials:
        credentials = self.retrieve()
        logger.debug(
            f"Loaded {credentials.source} credentials for account {credentials.account_id}"
        )
        return credentials.to_botocore(self.METHOD)
