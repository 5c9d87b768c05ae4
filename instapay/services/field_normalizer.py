"""
Field Normalizer
Extracts transaction fields from the payload shapes the gateway sends:
flat custom JSON, ISO20022-style nested documents and the flattened
partner-callback format.

Each field is resolved from an ordered table of key paths. The first path
holding a non-null value wins; later paths are never consulted.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from instapay.constants import CURRENCY_PHP
from instapay.models import Account


Path = Tuple[str, ...]

INSTRUCTION_ID_PATHS: Sequence[Path] = (
    ('instruction_id',),
    ('InstructionId',),
    ('InstrId',),
    ('data', 'instruction_id'),
    ('data', 'InstrId'),
    ('GrpHdr', 'MsgId'),
)

AMOUNT_PATHS: Sequence[Path] = (
    ('amount',),
    ('TtlIntrBkSttlmAmt',),
    ('InstdAmt', '_value'),
    ('data', 'amount'),
    ('data', 'TtlIntrBkSttlmAmt'),
    ('CdtTrfTxInf', 'InstdAmt', '_value'),
)

CURRENCY_PATHS: Sequence[Path] = (
    ('currency',),
    ('InstdAmt', '_Ccy'),
    ('data', 'currency'),
    ('CdtTrfTxInf', 'InstdAmt', '_Ccy'),
)

CREDITOR_ACCOUNT_PATHS: Sequence[Path] = (
    ('creditor_account',),
    ('creditorAccount',),
    ('data', 'creditor_account'),
    ('CdtTrfTxInf', 'CdtrAcct'),
)

DEBTOR_ACCOUNT_PATHS: Sequence[Path] = (
    ('debtor_account',),
    ('debtorAccount',),
    ('data', 'debtor_account'),
    ('CdtTrfTxInf', 'DbtrAcct'),
)

# Fields of a nested account object, relative to the account itself
ACCOUNT_FIELD_PATHS: Dict[str, Sequence[Path]] = {
    'account_number': (('account_number',), ('Id', 'Othr', 'Id'), ('Id', '_Id')),
    'account_type': (('account_type',), ('Tp', 'Cd')),
    'bank_code': (('bank_code',), ('bankCode',)),
    'account_name': (('account_name',), ('Nm',)),
    'bank_name': (('bank_name',),),
}

# Partner-callback format; the first entry is the field that must be present
FLAT_CREDITOR_FIELDS: Dict[str, Path] = {
    'account_number': ('data', 'CdtrAcctId'),
    'account_name': ('data', 'CdtrNm'),
}

FLAT_DEBTOR_FIELDS: Dict[str, Path] = {
    'account_number': ('data', 'DBtrAcctId'),
    'account_name': ('data', 'DbtrNm'),
    'bank_code': ('data', 'DBtrAgrBICFI'),
}


def lookup(payload: Any, path: Path) -> Any:
    """Walk a key path through nested mappings, None if any step is missing"""
    node = payload
    for key in path:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
        if node is None:
            return None
    return node


def first_present(payload: Any, paths: Sequence[Path]) -> Any:
    """Value of the first path that resolves to a non-null value"""
    for path in paths:
        value = lookup(payload, path)
        if value is not None:
            return value
    return None


def _text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (str, int)):
        return str(value)
    return None


def parse_amount(value: Any) -> Optional[Decimal]:
    """
    Parse a payload amount into a Decimal

    Args:
        value: Raw value from the payload

    Returns:
        Decimal amount, or None for non-numeric and non-finite values
    """
    if value is None or isinstance(value, bool):
        return None

    try:
        if isinstance(value, float):
            amount = Decimal(str(value))
        elif isinstance(value, (int, Decimal, str)):
            amount = Decimal(value)
        else:
            return None
    except (InvalidOperation, ValueError):
        return None

    if not amount.is_finite():
        return None

    return amount


def extract_instruction_id(payload: Mapping[str, Any],
                           paths: Sequence[Path] = INSTRUCTION_ID_PATHS) -> Optional[str]:
    return _text(first_present(payload, paths))


def extract_amount(payload: Mapping[str, Any]) -> Optional[Decimal]:
    return parse_amount(first_present(payload, AMOUNT_PATHS))


def extract_currency(payload: Mapping[str, Any]) -> str:
    currency = first_present(payload, CURRENCY_PATHS)
    if currency is None:
        return CURRENCY_PHP
    return str(currency)


def _nested_account(payload: Mapping[str, Any], paths: Sequence[Path]) -> Optional[Account]:
    account = first_present(payload, paths)
    if not account or not isinstance(account, Mapping):
        return None

    return Account(**{
        field: _text(first_present(account, field_paths))
        for field, field_paths in ACCOUNT_FIELD_PATHS.items()
    })


def _flat_account(payload: Mapping[str, Any], fields: Dict[str, Path]) -> Optional[Account]:
    if lookup(payload, fields['account_number']) is None:
        return None

    return Account(**{
        field: _text(lookup(payload, path))
        for field, path in fields.items()
    })


def extract_creditor_account(payload: Mapping[str, Any]) -> Optional[Account]:
    return (
        _nested_account(payload, CREDITOR_ACCOUNT_PATHS)
        or _flat_account(payload, FLAT_CREDITOR_FIELDS)
    )


def extract_debtor_account(payload: Mapping[str, Any]) -> Optional[Account]:
    return (
        _nested_account(payload, DEBTOR_ACCOUNT_PATHS)
        or _flat_account(payload, FLAT_DEBTOR_FIELDS)
    )
