"""
Schemas Package
Marshmallow schemas for callback payloads
"""

from instapay.schemas.transaction_schema import (
    AccountSchema,
    NormalizedTransactionSchema
)

__all__ = [
    'AccountSchema',
    'NormalizedTransactionSchema'
]
