__all__ = [
    'verify_receipt',
]
from .clients.appstore import verify_receipt
