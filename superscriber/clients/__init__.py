__all__ = [
    'AppStoreClient',
    'SecretsManagerClient',
]
from .appstore import AppStoreClient
from .secretsmanager import SecretsManagerClient
