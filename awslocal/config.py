import os
import re
from os import _Environ
from typing import Optional
from urllib.parse import urlparse

from dotenv import dotenv_values

from awslocal.core.client_factory import AWS_LOCAL_DEFAULT_REGION, AWS_LOCAL_ENDPOINT
from awslocal.core.credential_provider import (
    AWS_LOCAL_ACCESS_KEY,
    AWS_LOCAL_ACCOUNT_ID,
    AWS_LOCAL_SECRET,
)
from awslocal.exceptions.config_exceptions import ConfigTypeException, ConfigValueException

MAX_WAIT_TIME_SECONDS = 20
REGION_PATTERN = re.compile(r"^[a-zA-Z0-9](?:[a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])?$")


class Config:
    def __init__(self, config_file: Optional[str] = None):
        if config_file:
            raw: dict[str, str | None] = dotenv_values(config_file)
        else:
            raw: _Environ[str] = os.environ

        self.verbose: bool = self._flag(raw, "VERBOSE")
        self.endpoint: str = self._require_url(raw, "AWSLOCAL_ENDPOINT", AWS_LOCAL_ENDPOINT)
        self.region: str = self._require_region(
            raw, "AWSLOCAL_REGION", AWS_LOCAL_DEFAULT_REGION
        )
        self.access_key: str = self._value(raw, "AWSLOCAL_ACCESS_KEY", AWS_LOCAL_ACCESS_KEY)
        self.secret: str = self._value(raw, "AWSLOCAL_SECRET", AWS_LOCAL_SECRET)
        self.account_id: str = self._value(raw, "AWSLOCAL_ACCOUNT_ID", AWS_LOCAL_ACCOUNT_ID)
        self.queue_name: str = self._require(raw, "AWSLOCAL_QUEUE_NAME", "test-queue")
        self.message_body: str = self._value(
            raw, "AWSLOCAL_MESSAGE_BODY", "Hello, world!"
        )
        self.wait_time_seconds: int = self._require_int(
            raw, "AWSLOCAL_WAIT_TIME_SECONDS", 0, MAX_WAIT_TIME_SECONDS
        )

    def _value(self, config: dict | _Environ[str], key: str, default: str) -> str:
        value = config.get(key)
        if value is None:
            return default
        return value

    def _require(self, config: dict | _Environ[str], key: str, default: str) -> str:
        value = self._value(config, key, default)
        if not value:
            raise ConfigValueException(f"{key} must not be empty")
        return value

    def _require_url(self, config: dict | _Environ[str], key: str, default: str) -> str:
        value = self._require(config, key, default)
        try:
            parsed = urlparse(value)
        except ValueError:
            raise ConfigTypeException(f"{key} must be an http(s) URL")

        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigTypeException(f"{key} must be an http(s) URL")
        return value

    def _require_region(self, config: dict | _Environ[str], key: str, default: str) -> str:
        value = self._require(config, key, default)
        if not REGION_PATTERN.match(value):
            raise ConfigValueException(f"{key} is not a valid region name")
        return value

    def _require_int(
        self, config: dict | _Environ[str], key: str, minimum: int, maximum: int
    ) -> int:
        value = self._value(config, key, str(minimum))
        try:
            number = int(value)
        except ValueError:
            raise ConfigTypeException(f"{key} must be integer")

        if not minimum <= number <= maximum:
            raise ConfigTypeException(f"{key} must be between {minimum} and {maximum}")
        return number

    def _flag(self, config: dict | _Environ[str], key: str) -> bool:
        value = config.get(key) or ""
        return value.strip().lower() in ("1", "true", "yes", "on")
