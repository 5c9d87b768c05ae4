from instapay.models.transaction import (
    Account,
    NormalizedTransaction,
    Valid,
    Invalid,
    ValidationResult,
    CheckResult,
    InwardResult,
)
from instapay.models.callback import TokenIssued, Accepted, Rejected, Error, CallbackResponse

__all__ = [
    'Account',
    'NormalizedTransaction',
    'Valid',
    'Invalid',
    'ValidationResult',
    'CheckResult',
    'InwardResult',
    'TokenIssued',
    'Accepted',
    'Rejected',
    'Error',
    'CallbackResponse',
]
