from awslocal.models.credentials_model import CredentialsModel

AWS_LOCAL_CREDENTIALS_EMPTY = "awslocal credentials are empty"


class AwsLocalCredentialsEmptyException(Exception):
    """Raised when the access key or the secret key is empty"""

    def __init__(self, credentials: CredentialsModel):
        self.credentials: CredentialsModel = credentials
        super().__init__(AWS_LOCAL_CREDENTIALS_EMPTY)
