from dataclasses import dataclass

from botocore.credentials import Credentials


@dataclass(frozen=True)
class CredentialsModel:
    access_key_id: str = ""
    secret_access_key: str = ""
    account_id: str = ""
    session_token: str = ""
    can_expire: bool = False
    source: str = ""

    @property
    def is_empty(self) -> bool:
        return self.access_key_id == "" or self.secret_access_key == ""

    def to_botocore(self, method: str) -> Credentials:
        return Credentials(
            access_key=self.access_key_id,
            secret_key=self.secret_access_key,
            token=self.session_token or None,
            method=method,
            account_id=self.account_id or None,
        )
