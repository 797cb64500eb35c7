# https://developer.apple.com/documentation/appstorereceipts/responsebody
import json
import logging

from superscriber.lib import datetime as apple_datetime

from . import exceptions
from .enums import ReceiptStatus
from .receipt import decode_legacy_receipt_info, decode_modern_receipt_infos

logger = logging.getLogger()


class VerifyEnvelope:
    "The top level of a verifyReceipt response, with the receipt info sub-documents left undecoded"

    def __init__(self, status, cancelled_at=None, latest_receipt_info=None, latest_expired_receipt_info=None):
        self.status = status
        self.cancelled_at = cancelled_at
        self.latest_receipt_info = latest_receipt_info
        self.latest_expired_receipt_info = latest_expired_receipt_info

    @classmethod
    def decode(cls, data):
        try:
            body = json.loads(data)
        except (TypeError, ValueError) as err:
            raise exceptions.MalformedEnvelope(str(err)) from err
        if not isinstance(body, dict):
            raise exceptions.MalformedEnvelope(f'Expected an object, got `{type(body).__name__}`')

        status = body.get('status')
        if not isinstance(status, int) or isinstance(status, bool):
            raise exceptions.MalformedEnvelope(f'Expected an integer status, got `{status!r}`')

        try:
            cancelled_at = apple_datetime.parse_apple(body.get('cancellation_date'))
        except ValueError as err:
            raise exceptions.MalformedEnvelope(str(err)) from err

        return cls(
            status,
            cancelled_at=cancelled_at,
            latest_receipt_info=body.get('latest_receipt_info'),
            latest_expired_receipt_info=body.get('latest_expired_receipt_info'),
        )

    @property
    def receipt_info(self):
        "The sub-document that is authoritative for this response"
        if self.status == ReceiptStatus.SUBSCRIPTION_EXPIRED or self.latest_expired_receipt_info:
            return self.latest_expired_receipt_info
        return self.latest_receipt_info


def parse_verify_response(data):
    """
    Parse the raw body of a verifyReceipt response into a ReceiptRecord.

    Raises one of the AppStoreException subclasses if no receipt could be found.
    """
    try:
        envelope = VerifyEnvelope.decode(data)
    except exceptions.MalformedEnvelope as err:
        logger.warning(f'Unable to decode AppStore response: {err}')
        raise

    # probe the generic shape before committing to one of the decoders
    receipt_info = envelope.receipt_info
    try:
        if isinstance(receipt_info, dict) and receipt_info:
            return decode_legacy_receipt_info(receipt_info, fallback_cancelled_at=envelope.cancelled_at)
        if isinstance(receipt_info, list) and receipt_info:
            return decode_modern_receipt_infos(receipt_info, fallback_cancelled_at=envelope.cancelled_at)
    except exceptions.MalformedShape as err:
        logger.warning(f'Unable to decode AppStore receipt info: {err.reason}', extra={'status': envelope.status})
        raise exceptions.MalformedShape(err.reason, status=envelope.status) from err

    raise status_exception(envelope.status)


def status_exception(status):
    "Map a status that came back without any receipt info to the exception to raise"
    if status == ReceiptStatus.RECEIPT_FROM_TEST:
        return exceptions.WrongEnvironment(status)
    if status in (ReceiptStatus.UNREADABLE, ReceiptStatus.UNREACHABLE):
        return exceptions.Retryable(status)
    if status in (ReceiptStatus.RECEIPT_MALFORMED, ReceiptStatus.NOT_AUTHENTICATED):
        return exceptions.ContentInvalid(status)
    if status == ReceiptStatus.MISMATCHED_SECRET:
        logger.warning('Tried to verify receipt with wrong shared secret', extra={'status': status})
        return exceptions.ConfigurationError('AppStore rejected the shared secret', status=status)
    if status == ReceiptStatus.VALID:
        return exceptions.MalformedShape('Response has a valid status but no receipt info', status=status)
    return exceptions.UnrecognizedStatus(status)
