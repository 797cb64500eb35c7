import json
import logging

from .clients import AppStoreClient, SecretsManagerClient
from .dispatch import ClientException, ServiceUnavailableException, handler
from .logging import LogLevelContext, handler_logging
from .models import AppStoreManager
from .models.appstore import exceptions as appstore_exceptions

logger = logging.getLogger()

clients = {
    'appstore': AppStoreClient(),
    'secretsmanager': SecretsManagerClient(),
}

managers = {}
appstore_manager = managers.get('appstore') or AppStoreManager(clients, managers=managers)


@handler_logging
@handler
def verify_receipt(event, context):
    try:
        body = json.loads(event.get('body') or '{}')
    except ValueError as err:
        raise ClientException(f'Request body is not valid json: {err}') from err
    receipt_data = body.get('receiptData') if isinstance(body, dict) else None
    if not receipt_data:
        raise ClientException('Body field `receiptData` is required')

    try:
        subscription = appstore_manager.get_subscription(receipt_data)
    except (appstore_exceptions.Retryable, appstore_exceptions.TransportError) as err:
        raise ServiceUnavailableException(str(err)) from err
    except (
        appstore_exceptions.ContentInvalid,
        appstore_exceptions.MalformedShape,
        appstore_exceptions.UnrecognizedStatus,
        appstore_exceptions.WrongEnvironment,
    ) as err:
        raise ClientException(str(err)) from err

    with LogLevelContext(logger, logging.INFO):
        logger.info(
            f'AppStore receipt verified for original transaction `{subscription["originalTransactionId"]}`',
            extra={'status': subscription['status']},
        )
    return subscription
