"""
stackref helper utilities.
"""
from stackref.helpers.logging_helper import (
    configure_logging,
    configure_from_config,
    log_resolution_summary,
)

__all__ = [
    'configure_logging',
    'configure_from_config',
    'log_resolution_summary',
]
