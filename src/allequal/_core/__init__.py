from ._config import Config, get_config
from ._errors import ArgumentNoneError, check_not_none
from ._main import CommonBase, Pipeable

__all__ = [
    "ArgumentNoneError",
    "CommonBase",
    "Config",
    "Pipeable",
    "check_not_none",
    "get_config",
]
