"""
Inward Transaction Service
Validates inward (cash-in) transactions and hands accepted ones to the
business transaction processor
"""

from decimal import Decimal
from typing import Any, Callable, Mapping, Optional

from instapay.constants import CURRENCY_PHP, ReasonCode
from instapay.models.transaction import code_value
from instapay.models import (
    Account,
    CheckResult,
    Invalid,
    InwardResult,
    NormalizedTransaction,
    Valid,
    ValidationResult,
)
from instapay.services.field_normalizer import (
    extract_amount,
    extract_creditor_account,
    extract_currency,
    extract_debtor_account,
    extract_instruction_id,
)
from instapay.utils.logger import get_logger

logger = get_logger(__name__)


# Collaborator contracts
DuplicateChecker = Callable[[str], bool]
AccountValidator = Callable[[Account], Any]
BalanceChecker = Callable[[str, Decimal], Any]
TransactionProcessor = Callable[[NormalizedTransaction], Any]


class InwardTransactionHandler:
    """
    Inward transaction validation chain

    Collaborators are optional and fixed at construction. A missing
    collaborator means its check is skipped.

    Args:
        duplicate_checker: instruction_id -> True when already seen
        account_validator: Account -> CheckResult (or mapping)
        balance_checker: (account_number, amount) -> CheckResult (or mapping)
        transaction_processor: NormalizedTransaction -> any result; may raise
    """

    def __init__(
            self,
            duplicate_checker: Optional[DuplicateChecker] = None,
            account_validator: Optional[AccountValidator] = None,
            balance_checker: Optional[BalanceChecker] = None,
            transaction_processor: Optional[TransactionProcessor] = None
    ):
        self.duplicate_checker = duplicate_checker
        self.account_validator = account_validator
        self.balance_checker = balance_checker
        self.transaction_processor = transaction_processor

    def validate_transaction(self, payload: Mapping[str, Any]) -> ValidationResult:
        """
        Run the validation chain, stopping at the first failing check

        Args:
            payload: Inward transaction payload from the gateway

        Returns:
            Valid with the normalized transaction, or Invalid with a reason code
        """
        instruction_id = extract_instruction_id(payload)
        amount = extract_amount(payload)
        currency = extract_currency(payload)
        creditor_account = extract_creditor_account(payload)
        debtor_account = extract_debtor_account(payload)

        # Reported under AM12 by the gateway, there is no dedicated code
        if not instruction_id:
            return Invalid(ReasonCode.AM12, 'InvalidAmount - Missing instruction_id')

        if amount is None or amount <= 0:
            return Invalid(ReasonCode.AM12, ReasonCode.AM12.description)

        if creditor_account is None or creditor_account.account_number is None:
            return Invalid(ReasonCode.AC01, ReasonCode.AC01.description)

        if self.duplicate_checker is not None:
            if self.duplicate_checker(instruction_id):
                return Invalid(ReasonCode.DU03, ReasonCode.DU03.description)

        try:
            validation = self._validate_claimed(
                instruction_id, amount, currency, creditor_account, debtor_account
            )
        except Exception:
            self._release(instruction_id)
            raise

        if isinstance(validation, Invalid):
            self._release(instruction_id)
        return validation

    def _validate_claimed(self, instruction_id, amount, currency, creditor_account, debtor_account):
        if self.account_validator is not None:
            check = CheckResult.coerce(self.account_validator(creditor_account))
            if not check.valid:
                return Invalid(
                    check.reason_code or ReasonCode.AC01,
                    check.reason_description or ReasonCode.AC01.description
                )

        if currency and currency != CURRENCY_PHP:
            return Invalid(ReasonCode.AM11, ReasonCode.AM11.description)

        if self.balance_checker is not None:
            check = CheckResult.coerce(self.balance_checker(creditor_account.account_number, amount))
            if not check.valid:
                return Invalid(
                    check.reason_code or ReasonCode.AM02,
                    check.reason_description or ReasonCode.AM02.description
                )

        return Valid(NormalizedTransaction(
            instruction_id=instruction_id,
            amount=amount,
            currency=currency,
            creditor_account=creditor_account,
            debtor_account=debtor_account
        ))

    def _release(self, instruction_id: str):
        """Give back a duplicate-check claim so a redelivery is evaluated again"""
        release = getattr(self.duplicate_checker, 'release', None)
        if release is not None:
            release(instruction_id)

    def process_transaction(self, payload: Mapping[str, Any]) -> InwardResult:
        """
        Validate and process an inward transaction

        A processor failure rejects the transaction with DS04 instead of
        raising.
        """
        validation = self.validate_transaction(payload)

        if isinstance(validation, Invalid):
            logger.info(
                f'Inward transaction rejected: {code_value(validation.reason_code)} '
                f'- {validation.reason_description}'
            )
            return InwardResult.rejected(validation.reason_code, validation.reason_description)

        transaction = validation.transaction

        if self.transaction_processor is None:
            logger.info(f'Inward transaction {transaction.instruction_id} accepted (no processor)')
            return InwardResult.accepted(transaction.instruction_id)

        try:
            result = self.transaction_processor(transaction)
        except Exception as e:
            logger.error(f'Transaction processor failed for {transaction.instruction_id}: {str(e)}')
            self._release(transaction.instruction_id)
            return InwardResult.rejected(
                ReasonCode.DS04,
                ReasonCode.DS04.description,
                message=str(e)
            )

        logger.info(f'Inward transaction {transaction.instruction_id} accepted')
        return InwardResult.accepted(transaction.instruction_id, data=result)
