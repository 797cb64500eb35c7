import json
import os
from unittest import mock

import moto
import pytest

from superscriber import clients

# boto3 clients are built at import time of the handlers module, they need a region and fake credentials
os.environ.setdefault('AWS_DEFAULT_REGION', 'us-east-1')
os.environ.setdefault('AWS_ACCESS_KEY_ID', 'testing')
os.environ.setdefault('AWS_SECRET_ACCESS_KEY', 'testing')

appstore_params_name = 'KeyForAppStore'
shared_secret = 'the-shared-secret'


@pytest.fixture
def appstore_client():
    yield clients.AppStoreClient()


@pytest.fixture
def secretsmanager_client():
    with moto.mock_aws():
        yield clients.SecretsManagerClient(appstore_params_name=appstore_params_name)


@pytest.fixture
def appstore_params(secretsmanager_client):
    value = {'sharedSecret': shared_secret, 'bundleId': 'app.superscriber.ios'}
    secretsmanager_client.boto_client.create_secret(Name=appstore_params_name, SecretString=json.dumps(value))
    yield value


@pytest.fixture
def mock_appstore_client():
    yield mock.Mock(clients.AppStoreClient())


# an actual real receipt info from the sandbox, ids changed
@pytest.fixture
def modern_receipt_info():
    yield {
        'quantity': '1',
        'product_id': 'diamond.monthly',
        'transaction_id': '1000000642847321',
        'original_transaction_id': '1000000642847321',
        'purchase_date': '2020-03-09 17:06:38 Etc/GMT',
        'purchase_date_ms': '1583773598000',
        'original_purchase_date': '2020-03-09 17:06:39 Etc/GMT',
        'original_purchase_date_ms': '1583773599000',
        'expires_date': '2020-03-09 17:11:38 Etc/GMT',
        'expires_date_ms': '1583773898000',
        'web_order_line_item_id': '1000000050960298',
        'is_trial_period': 'false',
        'is_in_intro_offer_period': 'false',
        'subscription_group_identifier': '20600000',
    }


@pytest.fixture
def legacy_receipt_info():
    yield {
        'quantity': '1',
        'product_id': 'diamond.monthly',
        'transaction_id': '1000000087912345',
        'original_transaction_id': '1000000087900001',
        'purchase_date': '2013-08-01 07:00:00 Etc/GMT',
        'original_purchase_date': '2013-07-01 07:00:00 Etc/GMT',
        'expires_date': '1378018800000',
        'expires_date_formatted': '2013-09-01 07:00:00 Etc/GMT',
        'is_trial_period': 'true',
        'bid': 'app.superscriber.ios',
    }
