"""
Inward Transaction Models
Transient value objects built per inbound callback; nothing here is persisted
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union


Code = Union[Enum, str]


def code_value(code: Optional[Code]) -> Optional[str]:
    """Render a reason/status code as its plain wire string"""
    if isinstance(code, Enum):
        return code.value
    return code


@dataclass(frozen=True)
class Account:
    """Creditor or debtor account as found in the payload"""

    account_number: Optional[str] = None
    account_type: Optional[str] = None
    bank_code: Optional[str] = None
    account_name: Optional[str] = None
    bank_name: Optional[str] = None


@dataclass(frozen=True)
class NormalizedTransaction:
    """Transaction fields extracted from any supported payload shape"""

    instruction_id: str
    amount: Decimal
    currency: str
    creditor_account: Optional[Account] = None
    debtor_account: Optional[Account] = None

    def to_dict(self) -> Dict[str, Any]:
        from instapay.schemas import NormalizedTransactionSchema
        return NormalizedTransactionSchema().dump(self)


@dataclass(frozen=True)
class Valid:
    transaction: NormalizedTransaction

    valid = True


@dataclass(frozen=True)
class Invalid:
    reason_code: Code
    reason_description: str

    valid = False


ValidationResult = Union[Valid, Invalid]


@dataclass(frozen=True)
class CheckResult:
    """
    Outcome reported by the account validator and balance checker

    Collaborators may return this directly or a mapping with the keys
    valid, reason_code and reason_description.
    """

    valid: bool
    reason_code: Optional[Code] = None
    reason_description: Optional[str] = None

    @classmethod
    def coerce(cls, value: Any) -> 'CheckResult':
        if value is None:
            return cls(valid=False)
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(
                valid=bool(value.get('valid')),
                reason_code=value.get('reason_code'),
                reason_description=value.get('reason_description'),
            )
        if isinstance(value, bool):
            return cls(valid=value)
        raise TypeError(f'Unsupported check result: {type(value).__name__}')


@dataclass(frozen=True)
class InwardResult:
    """Accept/reject decision for one inward transaction"""

    reject: bool
    status: Optional[str] = None
    instruction_id: Optional[str] = None
    data: Any = None
    reason_code: Optional[Code] = None
    reason_description: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def accepted(cls, instruction_id: str, data: Any = None) -> 'InwardResult':
        return cls(reject=False, status='accepted', instruction_id=instruction_id, data=data)

    @classmethod
    def rejected(cls, reason_code: Code, reason_description: str,
                 message: Optional[str] = None) -> 'InwardResult':
        return cls(
            reject=True,
            reason_code=reason_code,
            reason_description=reason_description,
            message=message
        )

    def to_dict(self) -> Dict[str, Any]:
        if self.reject:
            result = {
                'reject': True,
                'reason_code': code_value(self.reason_code),
                'reason_description': self.reason_description,
            }
            if self.message:
                result['message'] = self.message
            return result

        result = {
            'reject': False,
            'status': self.status,
            'instruction_id': self.instruction_id,
        }
        if self.data is not None:
            result['data'] = self.data
        return result
