"""Domain ports package."""

from .configuration import IConfigurationProvider, IConfigurationStore
from .secret_store import ISecretStore

__all__ = ["IConfigurationProvider", "IConfigurationStore", "ISecretStore"]
