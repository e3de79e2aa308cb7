from dependency_injector import containers, providers

from awslocal.config import Config
from awslocal.core.client_factory import AwsLocalClientFactory
from awslocal.core.credential_provider import AwsLocalCredentialProvider
from awslocal.core.queue_demo import QueueDemo


class ApplicationContainer(containers.DeclarativeContainer):
    config_path = providers.Object(None)

    config = providers.Singleton(Config, config_file=config_path)

    credential_provider = providers.Singleton(
        AwsLocalCredentialProvider,
        key=config.provided.access_key,
        secret=config.provided.secret,
        account_id=config.provided.account_id,
    )

    client_factory = providers.Singleton(
        AwsLocalClientFactory,
        credential_provider=credential_provider,
        endpoint=config.provided.endpoint,
        region=config.provided.region,
    )

    sqs_client = client_factory.provided.sqs.call()

    queue_demo = providers.Factory(
        QueueDemo,
        sqs_client=sqs_client,
        queue_name=config.provided.queue_name,
        message_body=config.provided.message_body,
        wait_time_seconds=config.provided.wait_time_seconds,
    )
