__all__ = [
    'AppStoreManager',
]

from .appstore.manager import AppStoreManager
