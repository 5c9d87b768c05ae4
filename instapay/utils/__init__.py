"""
Utils Package
Utility functions and helpers
"""

from instapay.utils.logger import get_logger, configure_app_logging
from instapay.utils.authorization import callback_token_required

__all__ = [
    'get_logger',
    'configure_app_logging',
    'callback_token_required',
]
