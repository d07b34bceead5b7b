from ._config import Config, config_context, get_config, set_config
from ._main import Pipeable

__all__ = [
    "Config",
    "Pipeable",
    "config_context",
    "get_config",
    "set_config",
]
