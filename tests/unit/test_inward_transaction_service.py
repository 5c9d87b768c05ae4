"""
Unit Tests for the Inward Transaction Service
"""

from decimal import Decimal
from unittest.mock import Mock

import pytest

from instapay.constants import ReasonCode
from instapay.models import Account, CheckResult, Invalid, InwardResult, Valid
from instapay.services.inward_transaction_service import InwardTransactionHandler


def _collaborators():
    duplicate_checker = Mock(return_value=False)
    account_validator = Mock(return_value=CheckResult(valid=True))
    balance_checker = Mock(return_value={'valid': True})
    return duplicate_checker, account_validator, balance_checker


class TestValidateTransaction:
    """Ordered validation chain"""

    def test_valid_without_collaborators(self, flat_payload):
        result = InwardTransactionHandler().validate_transaction(flat_payload)

        assert isinstance(result, Valid)
        assert result.transaction.instruction_id == 'I1'
        assert result.transaction.amount == Decimal('100')
        assert result.transaction.currency == 'PHP'
        assert result.transaction.creditor_account.account_number == 'A1'
        assert result.transaction.debtor_account.account_number == 'D1'

    def test_missing_instruction_id(self):
        result = InwardTransactionHandler().validate_transaction({'amount': 100})

        assert result == Invalid(ReasonCode.AM12, 'InvalidAmount - Missing instruction_id')

    def test_missing_instruction_id_checked_before_amount(self):
        result = InwardTransactionHandler().validate_transaction({'amount': 0})

        assert result.reason_code == 'AM12'
        assert result.reason_description == 'InvalidAmount - Missing instruction_id'

    @pytest.mark.parametrize('amount', [None, 0, '0.00', -5, 'abc'])
    def test_invalid_amount_rejected_before_collaborators(self, flat_payload, amount):
        duplicate_checker, account_validator, balance_checker = _collaborators()
        handler = InwardTransactionHandler(
            duplicate_checker=duplicate_checker,
            account_validator=account_validator,
            balance_checker=balance_checker
        )
        flat_payload['amount'] = amount

        result = handler.validate_transaction(flat_payload)

        assert result == Invalid(ReasonCode.AM12, 'InvalidAmount')
        duplicate_checker.assert_not_called()
        account_validator.assert_not_called()
        balance_checker.assert_not_called()

    def test_missing_creditor_account(self):
        result = InwardTransactionHandler().validate_transaction({'instruction_id': 'I1', 'amount': 10})

        assert result == Invalid(ReasonCode.AC01, 'IncorrectAccountNumber')

    def test_creditor_account_without_number(self):
        payload = {'instruction_id': 'I1', 'amount': 10, 'creditor_account': {'account_name': 'X'}}

        result = InwardTransactionHandler().validate_transaction(payload)

        assert result.reason_code == ReasonCode.AC01

    def test_duplicate_short_circuits(self, flat_payload):
        duplicate_checker, account_validator, balance_checker = _collaborators()
        duplicate_checker.return_value = True
        handler = InwardTransactionHandler(
            duplicate_checker=duplicate_checker,
            account_validator=account_validator,
            balance_checker=balance_checker
        )

        result = handler.validate_transaction(flat_payload)

        assert result == Invalid(ReasonCode.DU03, 'DuplicateTransaction')
        duplicate_checker.assert_called_once_with('I1')
        account_validator.assert_not_called()
        balance_checker.assert_not_called()

    def test_account_validator_reason_is_used(self, flat_payload):
        handler = InwardTransactionHandler(
            account_validator=Mock(return_value=CheckResult(False, ReasonCode.AC04, 'ClosedAccountNumber'))
        )

        result = handler.validate_transaction(flat_payload)

        assert result == Invalid(ReasonCode.AC04, 'ClosedAccountNumber')

    def test_account_validator_default_reason(self, flat_payload):
        account_validator = Mock(return_value={'valid': False})
        handler = InwardTransactionHandler(account_validator=account_validator)

        result = handler.validate_transaction(flat_payload)

        assert result == Invalid(ReasonCode.AC01, 'IncorrectAccountNumber')
        account_validator.assert_called_once()
        assert isinstance(account_validator.call_args.args[0], Account)

    def test_currency_checked_after_account_validation(self, flat_payload):
        flat_payload['currency'] = 'USD'
        account_validator = Mock(return_value={'valid': False, 'reason_code': 'AC03'})
        handler = InwardTransactionHandler(account_validator=account_validator)

        result = handler.validate_transaction(flat_payload)

        assert result.reason_code == 'AC03'

    def test_unsupported_currency(self, flat_payload):
        flat_payload['currency'] = 'USD'
        balance_checker = Mock(return_value={'valid': True})
        handler = InwardTransactionHandler(balance_checker=balance_checker)

        result = handler.validate_transaction(flat_payload)

        assert result == Invalid(ReasonCode.AM11, 'InvalidTransactionCurrency')
        balance_checker.assert_not_called()

    def test_empty_currency_is_not_checked(self, flat_payload):
        flat_payload['currency'] = ''
        handler = InwardTransactionHandler()

        result = handler.validate_transaction(flat_payload)

        assert isinstance(result, Valid)

    def test_account_validator_returning_nothing(self, flat_payload):
        handler = InwardTransactionHandler(account_validator=Mock(return_value=None))

        result = handler.validate_transaction(flat_payload)

        assert result == Invalid(ReasonCode.AC01, 'IncorrectAccountNumber')

    def test_balance_checker_default_reason(self, flat_payload):
        balance_checker = Mock(return_value={'valid': False})
        handler = InwardTransactionHandler(balance_checker=balance_checker)

        result = handler.validate_transaction(flat_payload)

        assert result == Invalid(ReasonCode.AM02, 'NotAllowedAmount')
        balance_checker.assert_called_once_with('A1', Decimal('100'))

    def test_balance_checker_reason_is_used(self, flat_payload):
        handler = InwardTransactionHandler(
            balance_checker=Mock(return_value={
                'valid': False,
                'reason_code': 'AM04',
                'reason_description': 'InsufficientFunds',
            })
        )

        result = handler.validate_transaction(flat_payload)

        assert result == Invalid('AM04', 'InsufficientFunds')

    def test_all_collaborators_pass(self, iso_payload):
        duplicate_checker, account_validator, balance_checker = _collaborators()
        handler = InwardTransactionHandler(
            duplicate_checker=duplicate_checker,
            account_validator=account_validator,
            balance_checker=balance_checker
        )

        result = handler.validate_transaction(iso_payload)

        assert isinstance(result, Valid)
        assert result.transaction.instruction_id == 'MSG-20261019-0001'
        duplicate_checker.assert_called_once_with('MSG-20261019-0001')
        balance_checker.assert_called_once_with('001234567890', Decimal('2500.50'))

    def test_partner_callback_shape(self, partner_callback_payload):
        result = InwardTransactionHandler().validate_transaction(partner_callback_payload)

        assert isinstance(result, Valid)
        assert result.transaction.creditor_account == Account(account_number='A2', account_name='Juan')

    def test_payload_is_not_mutated(self, flat_payload):
        snapshot = repr(flat_payload)

        InwardTransactionHandler().validate_transaction(flat_payload)

        assert repr(flat_payload) == snapshot


class TestProcessTransaction:
    """Processor invocation"""

    def test_accepted_without_processor(self):
        payload = {'instruction_id': 'I1', 'amount': 100, 'creditor_account': {'account_number': 'A1'}}

        result = InwardTransactionHandler().process_transaction(payload)

        assert result == InwardResult.accepted('I1')
        assert result.to_dict() == {'reject': False, 'status': 'accepted', 'instruction_id': 'I1'}

    def test_rejected_on_validation_failure(self):
        result = InwardTransactionHandler().process_transaction({'amount': 0})

        assert result.reject is True
        assert result.to_dict()['reason_code'] == 'AM12'

    def test_processor_result_is_returned(self, flat_payload):
        processor = Mock(return_value={'reference': 'CR-001'})
        handler = InwardTransactionHandler(transaction_processor=processor)

        result = handler.process_transaction(flat_payload)

        assert result.reject is False
        assert result.status == 'accepted'
        assert result.instruction_id == 'I1'
        assert result.data == {'reference': 'CR-001'}
        transaction = processor.call_args.args[0]
        assert transaction.amount == Decimal('100')
        assert transaction.to_dict()['amount'] == '100'

    def test_processor_failure_rejects(self, flat_payload):
        processor = Mock(side_effect=RuntimeError('core banking unavailable'))
        handler = InwardTransactionHandler(transaction_processor=processor)

        result = handler.process_transaction(flat_payload)

        assert result == InwardResult.rejected(
            ReasonCode.DS04,
            'OrderRejected',
            message='core banking unavailable'
        )

    def test_processor_not_called_when_invalid(self):
        processor = Mock()
        handler = InwardTransactionHandler(transaction_processor=processor)

        handler.process_transaction({'instruction_id': 'I1', 'amount': -1})

        processor.assert_not_called()


class TestCheckResult:

    def test_coerce_mapping(self):
        check = CheckResult.coerce({'valid': False, 'reason_code': 'AC04'})
        assert check == CheckResult(valid=False, reason_code='AC04')

    def test_coerce_bool(self):
        assert CheckResult.coerce(True) == CheckResult(valid=True)

    def test_coerce_unsupported(self):
        with pytest.raises(TypeError):
            CheckResult.coerce('yes')

    def test_coerce_none(self):
        assert CheckResult.coerce(None) == CheckResult(valid=False)
