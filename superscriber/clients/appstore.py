# https://developer.apple.com/documentation/appstorereceipts/verifyreceipt
import logging
import os

import requests

from superscriber.models.appstore.exceptions import ConfigurationError, TransportError, WrongEnvironment
from superscriber.models.appstore.parser import parse_verify_response
from superscriber.models.appstore.receipt import VerifyRequest

logger = logging.getLogger()

URL_PRODUCTION = 'https://buy.itunes.apple.com/verifyReceipt'
URL_SANDBOX = 'https://sandbox.itunes.apple.com/verifyReceipt'
TIMEOUT_SECONDS = float(os.environ.get('APPSTORE_VERIFY_TIMEOUT') or 20)


class AppStoreClient:
    def __init__(self, url_production=URL_PRODUCTION, url_sandbox=URL_SANDBOX, timeout=TIMEOUT_SECONDS):
        self.url_production = url_production
        self.url_sandbox = url_sandbox
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers = {'Content-Type': 'application/json'}

    def __enter__(self):
        return self

    def __exit__(self, et, ev, tb):
        self.close()

    def close(self):
        self.session.close()

    def verify_receipt(self, secret, receipt_data):
        "Returns a ReceiptRecord, raises an AppStoreException subclass on failure"
        if not secret:
            raise ConfigurationError('AppStore shared secret should have been set')

        # encoded once, so the sandbox gets exactly the same bytes as production did
        req_body = VerifyRequest(receipt_data, secret, exclude_old_transactions=True).encode()

        # per Apple recommendation, we first attempt to validate with production
        # and then attempt with sandbox only upon receiving a 21007 status code from production
        # https://developer.apple.com/documentation/appstorereceipts/verifyreceipt#discussion
        try:
            return parse_verify_response(self.do_appstore_post(self.url_production, req_body))
        except WrongEnvironment:
            logger.info('AppStore production says receipt is from sandbox, retrying with sandbox')
        return parse_verify_response(self.do_appstore_post(self.url_sandbox, req_body))

    def do_appstore_post(self, url, req_body):
        "Returns the raw response body"
        try:
            with self.session.post(url, data=req_body, timeout=self.timeout) as resp:
                resp.raise_for_status()
                return resp.content
        except requests.exceptions.RequestException as err:
            logger.warning(f'AppStore verifyReceipt request failed: {err}', extra={'url': url})
            raise TransportError(url, err) from err


def verify_receipt(secret, receipt_data):
    with AppStoreClient() as client:
        return client.verify_receipt(secret, receipt_data)
