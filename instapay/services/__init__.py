from instapay.services.callback_service import CallbackConfig, CallbackDispatcher
from instapay.services.duplicate_checker import RedisDuplicateChecker
from instapay.services.inward_transaction_service import InwardTransactionHandler
from instapay.services.token_service import TokenService

__all__ = [
    'CallbackConfig',
    'CallbackDispatcher',
    'RedisDuplicateChecker',
    'InwardTransactionHandler',
    'TokenService',
]
