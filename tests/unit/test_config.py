import unittest
from unittest.mock import patch

from awslocal.config import Config
from awslocal.exceptions.config_exceptions import ConfigValueException, ConfigTypeException


class ConfigTest(unittest.TestCase):

    @patch.dict("os.environ", {}, clear=True)
    def test_config_defaults(self):
        config = Config()

        assert config.endpoint == "http://localhost:4566"
        assert config.region == "us-east-1"
        assert config.access_key == "test"
        assert config.secret == "test"
        assert config.account_id == "000000000000"
        assert config.queue_name == "test-queue"
        assert config.message_body == "Hello, world!"
        assert config.wait_time_seconds == 0
        assert config.verbose is False

    @patch.dict(
        "os.environ",
        {
            "AWSLOCAL_ENDPOINT": "https://localstack.internal:4566",
            "AWSLOCAL_REGION": "eu-north-1",
            "AWSLOCAL_ACCESS_KEY": "key",
            "AWSLOCAL_SECRET": "secret",
            "AWSLOCAL_ACCOUNT_ID": "123456789012",
            "AWSLOCAL_QUEUE_NAME": "orders",
            "AWSLOCAL_MESSAGE_BODY": "ping",
            "AWSLOCAL_WAIT_TIME_SECONDS": "10",
            "VERBOSE": "true",
        },
        clear=True,
    )
    def test_config_load_success(self):
        config = Config()

        assert config.endpoint == "https://localstack.internal:4566"
        assert config.region == "eu-north-1"
        assert config.access_key == "key"
        assert config.secret == "secret"
        assert config.account_id == "123456789012"
        assert config.queue_name == "orders"
        assert config.message_body == "ping"
        assert config.wait_time_seconds == 10
        assert config.verbose is True

    @patch("awslocal.config.dotenv_values")
    def test_config_from_file(self, mock_dotenv):
        mock_dotenv.return_value = {"AWSLOCAL_QUEUE_NAME": "from-file"}

        config = Config("/etc/awslocal/.config.env")

        mock_dotenv.assert_called_once_with("/etc/awslocal/.config.env")
        assert config.queue_name == "from-file"
        assert config.region == "us-east-1"

    @patch.dict("os.environ", {"AWSLOCAL_ACCESS_KEY": ""}, clear=True)
    def test_empty_credentials_are_accepted(self):
        config = Config()

        assert config.access_key == ""

    @patch.dict("os.environ", {"AWSLOCAL_QUEUE_NAME": ""}, clear=True)
    def test_empty_queue_name(self):
        with self.assertRaises(ConfigValueException) as ctx:
            Config()

        assert "AWSLOCAL_QUEUE_NAME" in str(ctx.exception)

    @patch.dict("os.environ", {"AWSLOCAL_ENDPOINT": "localhost:4566"}, clear=True)
    def test_invalid_endpoint(self):
        with self.assertRaises(ConfigTypeException) as ctx:
            Config()

        assert "URL" in str(ctx.exception)

    @patch.dict("os.environ", {"AWSLOCAL_WAIT_TIME_SECONDS": "soon"}, clear=True)
    def test_invalid_wait_time_type(self):
        with self.assertRaises(ConfigTypeException) as ctx:
            Config()

        assert "must be integer" in str(ctx.exception)

    @patch.dict("os.environ", {"AWSLOCAL_WAIT_TIME_SECONDS": "21"}, clear=True)
    def test_wait_time_out_of_range(self):
        self.assertRaises(ConfigTypeException, Config)

    @patch.dict("os.environ", {"AWSLOCAL_ENDPOINT": "http://[localstack:4566"}, clear=True)
    def test_malformed_endpoint(self):
        with self.assertRaises(ConfigTypeException) as ctx:
            Config()

        assert "AWSLOCAL_ENDPOINT" in str(ctx.exception)

    @patch.dict("os.environ", {"AWSLOCAL_REGION": "us east 1"}, clear=True)
    def test_invalid_region(self):
        with self.assertRaises(ConfigValueException) as ctx:
            Config()

        assert "AWSLOCAL_REGION" in str(ctx.exception)
