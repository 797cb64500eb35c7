from .enums import message_of


class AppStoreException(Exception):
    pass


class StatusException(AppStoreException):
    "An error reported by apple through the `status` field of the response"

    def __init__(self, status):
        self.status = status
        super().__init__(status)

    def __str__(self):
        message = message_of(self.status)
        return f'AppStore responded with status `{self.status}`' + (f': {message}' if message else '')


class ConfigurationError(AppStoreException):
    def __init__(self, message, status=None):
        self.message = message
        self.status = status
        super().__init__(message)

    def __str__(self):
        return self.message


class TransportError(AppStoreException):
    def __init__(self, url, reason):
        self.url = url
        self.reason = reason
        super().__init__(url, reason)

    def __str__(self):
        return f'Unable to reach AppStore `{self.url}`: {self.reason}'


class MalformedEnvelope(AppStoreException):
    def __init__(self, reason):
        self.reason = reason
        super().__init__(reason)

    def __str__(self):
        return f'AppStore response is not a verifyReceipt envelope: {self.reason}'


class MalformedShape(AppStoreException):
    def __init__(self, reason, status=None):
        self.reason = reason
        self.status = status
        super().__init__(reason, status)

    def __str__(self):
        return f'AppStore receipt info could not be decoded (status `{self.status}`): {self.reason}'


class WrongEnvironment(StatusException):
    pass


class Retryable(StatusException):
    pass


class ContentInvalid(StatusException):
    pass


class UnrecognizedStatus(StatusException):
    pass
