import pytest

from superscriber.models.appstore import exceptions
from superscriber.models.appstore.enums import ReceiptStatus, StatusSeverity, message_of, severity_of


def test_severities():
    assert severity_of(ReceiptStatus.VALID) == StatusSeverity.VALID
    assert severity_of(ReceiptStatus.UNREADABLE) == StatusSeverity.RETRY_HINT
    assert severity_of(ReceiptStatus.UNREACHABLE) == StatusSeverity.RETRY_HINT
    assert severity_of(ReceiptStatus.RECEIPT_MALFORMED) == StatusSeverity.FATAL_CONTENT_ERROR
    assert severity_of(ReceiptStatus.NOT_AUTHENTICATED) == StatusSeverity.FATAL_CONTENT_ERROR
    assert severity_of(ReceiptStatus.MISMATCHED_SECRET) == StatusSeverity.FATAL_CONFIG_ERROR
    assert severity_of(ReceiptStatus.SUBSCRIPTION_EXPIRED) == StatusSeverity.EXPIRED_BUT_PARSEABLE
    assert severity_of(ReceiptStatus.RECEIPT_FROM_TEST) == StatusSeverity.WRONG_ENVIRONMENT
    assert severity_of(ReceiptStatus.RECEIPT_FROM_PROD) == StatusSeverity.UNRECOGNIZED
    assert severity_of(12345) == StatusSeverity.UNRECOGNIZED


def test_messages():
    assert message_of(ReceiptStatus.VALID) == ''
    assert message_of(12345) == ''
    for status in ReceiptStatus._ALL:
        if status != ReceiptStatus.VALID:
            assert message_of(status)


@pytest.mark.parametrize(
    'exception_class',
    [
        exceptions.WrongEnvironment,
        exceptions.Retryable,
        exceptions.ContentInvalid,
        exceptions.UnrecognizedStatus,
    ],
)
def test_status_exceptions(exception_class):
    err = exception_class(21005)
    assert isinstance(err, exceptions.AppStoreException)
    assert err.status == 21005
    assert str(err) == 'AppStore responded with status `21005`: The receipt server is not currently available.'

    err = exception_class(21199)
    assert str(err) == 'AppStore responded with status `21199`'


def test_transport_error():
    err = exceptions.TransportError('https://the.url', 'connection refused')
    assert isinstance(err, exceptions.AppStoreException)
    assert err.url == 'https://the.url'
    assert str(err) == 'Unable to reach AppStore `https://the.url`: connection refused'


def test_configuration_error():
    err = exceptions.ConfigurationError('no secret')
    assert err.status is None
    assert str(err) == 'no secret'
