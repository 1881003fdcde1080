from .base import Base, metadata
from .edusharing import Edusharing, PluginSetting

__all__ = [
    'Base',
    'metadata',
    'Edusharing',
    'PluginSetting',
]
