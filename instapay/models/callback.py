"""
Callback Response Envelopes
One variant per flow outcome, each rendering the gateway's wire format
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from instapay.constants import ResponseCode, TransactionStatus
from instapay.models.transaction import Code, code_value


@dataclass(frozen=True)
class TokenIssued:
    token: str
    expiry: int

    def to_envelope(self) -> Dict[str, Any]:
        return {
            'code': ResponseCode.SUCCESS.value,
            'status': 'Success',
            'token': self.token,
            'data': {
                'message': 'Approved',
            },
        }


@dataclass(frozen=True)
class Accepted:
    data: Any
    code: Code = TransactionStatus.ACTC
    status: str = TransactionStatus.ACCEPTED.value

    def to_envelope(self) -> Dict[str, Any]:
        return {
            'code': code_value(self.code),
            'status': self.status,
            'data': self.data,
        }


@dataclass(frozen=True)
class Rejected:
    reason_code: Code
    reason_description: str
    message: Optional[str] = None

    def to_envelope(self) -> Dict[str, Any]:
        envelope = {
            'code': TransactionStatus.RJCT.value,
            'status': 'Rejected',
            'reason_code': code_value(self.reason_code),
            'reason_description': self.reason_description,
        }
        if self.message is not None:
            envelope['message'] = self.message
        return envelope


@dataclass(frozen=True)
class Error:
    code: Code
    message: str

    def to_envelope(self) -> Dict[str, Any]:
        return {
            'code': code_value(self.code),
            'status': 'Error',
            'message': self.message,
        }


CallbackResponse = Union[TokenIssued, Accepted, Rejected, Error]
