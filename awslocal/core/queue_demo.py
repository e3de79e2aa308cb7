from typing import List

from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger

from awslocal.exceptions.queue_exceptions import (
    QueueCreateException,
    QueueDeleteException,
    QueueException,
    QueueReceiveException,
    QueueSendException,
)
from awslocal.models.queue_demo_result import QueueDemoResult


class QueueDemo:
    def __init__(
        self,
        sqs_client,
        queue_name: str = "test-queue",
        message_body: str = "Hello, world!",
        wait_time_seconds: int = 0,
    ):
        self.sqs = sqs_client
        self.queue_name = queue_name
        self.message_body = message_body
        self.wait_time_seconds = wait_time_seconds

    def run(self) -> QueueDemoResult:
        """Create a queue, round-trip one message through it, delete it."""
        queue_url = self.create_queue()

        try:
            message_id = self.send_message(queue_url)
            bodies = self.receive_messages(queue_url)
        except QueueException:
            self._cleanup(queue_url)
            raise

        self.delete_queue(queue_url)
        return QueueDemoResult(queue_url, message_id, bodies)

    def create_queue(self) -> str:
        try:
            response = self.sqs.create_queue(QueueName=self.queue_name)
        except (BotoCoreError, ClientError) as e:
            raise QueueCreateException(e) from e

        queue_url = response["QueueUrl"]
        logger.info(f"Created queue {self.queue_name}: {queue_url}")
        return queue_url

    def send_message(self, queue_url: str) -> str:
        try:
            response = self.sqs.send_message(
                QueueUrl=queue_url, MessageBody=self.message_body
            )
        except (BotoCoreError, ClientError) as e:
            raise QueueSendException(e) from e

        message_id = response["MessageId"]
        logger.info(f"Sent message {message_id}")
        return message_id

    def receive_messages(self, queue_url: str) -> List[str]:
        try:
            response = self.sqs.receive_message(
                QueueUrl=queue_url, WaitTimeSeconds=self.wait_time_seconds
            )
        except (BotoCoreError, ClientError) as e:
            raise QueueReceiveException(e) from e

        bodies = [message["Body"] for message in response.get("Messages", [])]
        logger.info(f"Received {len(bodies)} message(s)")
        return bodies

    def delete_queue(self, queue_url: str) -> None:
        try:
            self.sqs.delete_queue(QueueUrl=queue_url)
        except (BotoCoreError, ClientError) as e:
            raise QueueDeleteException(e) from e

        logger.info(f"Deleted queue {queue_url}")

    def _cleanup(self, queue_url: str) -> None:
        try:
            self.delete_queue(queue_url)
        except QueueDeleteException as e:
            logger.warning(f"Could not delete queue {queue_url}: {e}")
