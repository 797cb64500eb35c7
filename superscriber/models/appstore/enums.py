# https://developer.apple.com/documentation/appstorereceipts/status
class ReceiptStatus:
    VALID = 0
    UNREADABLE = 21000
    RECEIPT_MALFORMED = 21002
    NOT_AUTHENTICATED = 21003
    MISMATCHED_SECRET = 21004
    UNREACHABLE = 21005
    SUBSCRIPTION_EXPIRED = 21006
    RECEIPT_FROM_TEST = 21007
    RECEIPT_FROM_PROD = 21008
    UNAUTHORIZED = 21010

    _ALL = (
        VALID,
        UNREADABLE,
        RECEIPT_MALFORMED,
        NOT_AUTHENTICATED,
        MISMATCHED_SECRET,
        UNREACHABLE,
        SUBSCRIPTION_EXPIRED,
        RECEIPT_FROM_TEST,
        RECEIPT_FROM_PROD,
        UNAUTHORIZED,
    )


class StatusSeverity:
    VALID = 'VALID'
    RETRY_HINT = 'RETRY_HINT'
    FATAL_CONFIG_ERROR = 'FATAL_CONFIG_ERROR'
    FATAL_CONTENT_ERROR = 'FATAL_CONTENT_ERROR'
    WRONG_ENVIRONMENT = 'WRONG_ENVIRONMENT'
    EXPIRED_BUT_PARSEABLE = 'EXPIRED_BUT_PARSEABLE'
    UNRECOGNIZED = 'UNRECOGNIZED'

    _ALL = (
        VALID,
        RETRY_HINT,
        FATAL_CONFIG_ERROR,
        FATAL_CONTENT_ERROR,
        WRONG_ENVIRONMENT,
        EXPIRED_BUT_PARSEABLE,
        UNRECOGNIZED,
    )


STATUS_SEVERITIES = {
    ReceiptStatus.VALID: StatusSeverity.VALID,
    ReceiptStatus.UNREADABLE: StatusSeverity.RETRY_HINT,
    ReceiptStatus.RECEIPT_MALFORMED: StatusSeverity.FATAL_CONTENT_ERROR,
    ReceiptStatus.NOT_AUTHENTICATED: StatusSeverity.FATAL_CONTENT_ERROR,
    ReceiptStatus.MISMATCHED_SECRET: StatusSeverity.FATAL_CONFIG_ERROR,
    ReceiptStatus.UNREACHABLE: StatusSeverity.RETRY_HINT,
    ReceiptStatus.SUBSCRIPTION_EXPIRED: StatusSeverity.EXPIRED_BUT_PARSEABLE,
    ReceiptStatus.RECEIPT_FROM_TEST: StatusSeverity.WRONG_ENVIRONMENT,
}

STATUS_MESSAGES = {
    ReceiptStatus.UNREADABLE: 'The App Store could not read the JSON object you provided.',
    ReceiptStatus.RECEIPT_MALFORMED: 'The data in the receipt-data property was malformed or missing.',
    ReceiptStatus.NOT_AUTHENTICATED: 'The receipt could not be authenticated.',
    ReceiptStatus.MISMATCHED_SECRET: (
        'The shared secret you provided does not match the shared secret on file for your account.'
    ),
    ReceiptStatus.UNREACHABLE: 'The receipt server is not currently available.',
    ReceiptStatus.SUBSCRIPTION_EXPIRED: 'This receipt is valid but the subscription has expired.',
    ReceiptStatus.RECEIPT_FROM_TEST: (
        'This receipt is from the test environment, but it was sent to the production environment for '
        'verification. Send it to the test environment instead.'
    ),
    ReceiptStatus.RECEIPT_FROM_PROD: (
        'This receipt is from the production environment, but it was sent to the test environment for '
        'verification. Send it to the production environment instead.'
    ),
    ReceiptStatus.UNAUTHORIZED: (
        'This receipt could not be authorized. Treat this the same as if a purchase was never made.'
    ),
}


def severity_of(status):
    return STATUS_SEVERITIES.get(status, StatusSeverity.UNRECOGNIZED)


def message_of(status):
    return STATUS_MESSAGES.get(status, '')


class ReceiptStyle:
    # iOS 6 style receipts: a single object, expiration under `expires_date_formatted`
    LEGACY = 'LEGACY'
    # iOS 7+ style receipts: a list of objects, expiration under `expires_date`
    MODERN = 'MODERN'

    _ALL = (LEGACY, MODERN)


class AppStoreSubscriptionStatus:
    # Note: we do not have a grace period configured at this time
    ACTIVE = 'ACTIVE'
    EXPIRED = 'EXPIRED'
    CANCELLED = 'CANCELLED'

    _ALL = (ACTIVE, EXPIRED, CANCELLED)
