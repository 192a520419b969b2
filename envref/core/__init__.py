"""envref core: settings and result types"""

from envref.core.result import Err, Ok, Pass, Result, fold
from envref.core.settings import Settings, get_settings, reload_settings

__all__ = [
    "Err",
    "Ok",
    "Pass",
    "Result",
    "fold",
    "Settings",
    "get_settings",
    "reload_settings",
]
