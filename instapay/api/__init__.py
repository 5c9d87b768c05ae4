"""
API Blueprints Package
"""

from instapay.api.callbacks import callbacks_bp

__all__ = [
    'callbacks_bp',
]
