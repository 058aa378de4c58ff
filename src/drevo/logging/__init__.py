"""
Logging package for ``drevo``.

Use ``get_logger("<module>")`` in modules to inherit shared handlers and write to a
module-specific log file (``logs/drevo_<module>.log``).
"""

from .logger import (
    get_logger,
    log_error,
    log_info,
    log_warning,
    module_log_filename,
)

__all__ = [
    "get_logger",
    "log_error",
    "log_info",
    "log_warning",
    "module_log_filename",
]
