import argparse
import sys
from typing import Optional

from botocore.exceptions import BotoCoreError
from loguru import logger

from awslocal.config import Config
from awslocal.containers import ApplicationContainer
from awslocal.exceptions.config_exceptions import ConfigException
from awslocal.exceptions.credentials_exceptions import (
    AwsLocalCredentialsEmptyException,
)
from awslocal.exceptions.queue_exceptions import QueueException
from awslocal.models.queue_demo_result import QueueDemoResult


def main(config_path: Optional[str] = None) -> int:
    container = ApplicationContainer()
    if config_path:
        container.config_path.override(config_path)

    try:
        config: Config = container.config()
        if config.verbose:
            logger.remove()
            logger.add(sys.stdout, level="DEBUG")
    except ConfigException as e:
        logger.error(f"Configuration error: {e}")
        return 1

    try:
        result: QueueDemoResult = container.queue_demo().run()
    except AwsLocalCredentialsEmptyException as e:
        logger.error(f"Credentials error: {e}")
        return 1
    except QueueException as e:
        logger.error(f"Queue error: {e}")
        return 1
    except BotoCoreError as e:
        logger.error(f"Client error: {e}")
        return 1

    print("Queue URL:", result.queue_url)
    print("Message ID:", result.message_id)
    for body in result.received_bodies:
        print("Message Body:", body)

    return 0


def run():
    parser = argparse.ArgumentParser(
        description="Round-trip a message through an SQS queue on LocalStack"
    )
    parser.add_argument(
        "config",
        help="The .config.env configuration file",
        type=str,
        default=None,
        nargs="?",
    )
    args = parser.parse_args()

    env_file: Optional[str] = args.config

    sys.exit(main(env_file))


if __name__ == "__main__":
    run()
