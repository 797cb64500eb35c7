# https://developer.apple.com/documentation/appstorereceipts/requestbody
# https://developer.apple.com/documentation/appstorereceipts/responsebody/latest_receipt_info
import json

from superscriber.lib import datetime as apple_datetime

from .enums import ReceiptStyle
from .exceptions import MalformedShape


def parse_string_bool(value):
    "Apple sends booleans as the strings 'true' and 'false'"
    if value is None:
        return False
    if value == 'true':
        return True
    if value == 'false':
        return False
    raise ValueError(f'Expected stringified boolean, got `{value!r}`')


def serialize_string_bool(value):
    return 'true' if value else 'false'


class VerifyRequest:
    def __init__(self, receipt_data, password, exclude_old_transactions=True):
        self._receipt_data = receipt_data
        self._password = password
        self._exclude_old_transactions = exclude_old_transactions

    @property
    def receipt_data(self):
        return self._receipt_data

    @property
    def password(self):
        return self._password

    @property
    def exclude_old_transactions(self):
        return self._exclude_old_transactions

    def encode(self):
        "Returns bytes, which may be sent any number of times"
        body = {
            'receipt-data': self.receipt_data,
            'password': self.password,
            'exclude-old-transactions': serialize_string_bool(self.exclude_old_transactions),
        }
        return json.dumps(body).encode('utf-8')

    @classmethod
    def decode(cls, data):
        body = json.loads(data)
        return cls(
            receipt_data=body['receipt-data'],
            password=body['password'],
            exclude_old_transactions=parse_string_bool(body.get('exclude-old-transactions')),
        )


class ReceiptRecord:
    """
    The normalized form of a single receipt info object.

    Both receipt styles decode to this one class, `style` records which decode path produced it.
    """

    def __init__(self, style, receipt_info, expires_date_field, fallback_cancelled_at=None):
        if not isinstance(receipt_info, dict):
            raise MalformedShape(f'Expected a receipt info object, got `{type(receipt_info).__name__}`')
        self.style = style
        self.item = receipt_info
        try:
            self.product_id = receipt_info.get('product_id')
            self.transaction_id = receipt_info.get('transaction_id')
            self.original_transaction_id = receipt_info.get('original_transaction_id')
            self.quantity = receipt_info.get('quantity')
            self.is_trial_period = parse_string_bool(receipt_info.get('is_trial_period'))
            self.purchased_at = apple_datetime.parse_apple(receipt_info.get('purchase_date'))
            self.original_purchased_at = apple_datetime.parse_apple(receipt_info.get('original_purchase_date'))
            self.expires_at = apple_datetime.parse_apple(receipt_info.get(expires_date_field))
            cancelled_at = apple_datetime.parse_apple(receipt_info.get('cancellation_date'))
            self.cancelled_at = cancelled_at or fallback_cancelled_at
        except ValueError as err:
            raise MalformedShape(str(err)) from err

    def __repr__(self):
        return (
            f'ReceiptRecord(style={self.style!r}, product_id={self.product_id!r}, '
            f'original_transaction_id={self.original_transaction_id!r}, expires_at={self.expires_at!r})'
        )


def decode_legacy_receipt_info(receipt_info, fallback_cancelled_at=None):
    return ReceiptRecord(
        ReceiptStyle.LEGACY, receipt_info, 'expires_date_formatted', fallback_cancelled_at=fallback_cancelled_at
    )


def decode_modern_receipt_infos(receipt_infos, fallback_cancelled_at=None):
    "Decode the whole renewal history, the last element is the current one"
    if not receipt_infos:
        raise MalformedShape('Receipt info list is empty')
    records = [
        ReceiptRecord(ReceiptStyle.MODERN, info, 'expires_date', fallback_cancelled_at=fallback_cancelled_at)
        for info in receipt_infos
    ]
    return records[-1]
