import pendulum

from superscriber.lib import datetime as apple_datetime

from .enums import AppStoreSubscriptionStatus
from .exceptions import ConfigurationError


class AppStoreManager:
    def __init__(self, clients, managers=None):
        managers = managers or {}
        managers['appstore'] = self

        self.clients = clients
        if 'appstore' in clients:
            self.appstore_client = clients['appstore']
        if 'secretsmanager' in clients:
            self.appstore_params_getter = clients['secretsmanager'].get_appstore_params

    @property
    def shared_secret(self):
        if not hasattr(self, '_shared_secret'):
            if not hasattr(self, 'appstore_params_getter'):
                raise ConfigurationError('No source configured for the AppStore shared secret')
            self._shared_secret = self.appstore_params_getter().get('sharedSecret')
        return self._shared_secret

    def verify_receipt(self, receipt_data):
        # purposely letting any app store client exceptions propogate up to top level so backend alerts fire
        return self.appstore_client.verify_receipt(self.shared_secret, receipt_data)

    def determine_status(self, record, now):
        if record.cancelled_at and record.cancelled_at <= now:
            return AppStoreSubscriptionStatus.CANCELLED
        if record.expires_at and record.expires_at <= now:
            return AppStoreSubscriptionStatus.EXPIRED
        return AppStoreSubscriptionStatus.ACTIVE

    def get_subscription(self, receipt_data, now=None):
        "Verify the receipt and pull out the fields our api clients care about"
        now = now or pendulum.now('utc')
        record = self.verify_receipt(receipt_data)
        return {
            'productId': record.product_id,
            'originalTransactionId': record.original_transaction_id,
            'transactionId': record.transaction_id,
            'isTrialPeriod': record.is_trial_period,
            'purchasedAt': apple_datetime.serialize(record.purchased_at),
            'expiresAt': apple_datetime.serialize(record.expires_at),
            'cancelledAt': apple_datetime.serialize(record.cancelled_at),
            'status': self.determine_status(record, now),
            'receiptStyle': record.style,
        }
