from marshmallow import Schema, fields


class AccountSchema(Schema):
    """Creditor/debtor account"""
    account_number = fields.Str(allow_none=True)
    account_type = fields.Str(allow_none=True)
    bank_code = fields.Str(allow_none=True)
    account_name = fields.Str(allow_none=True)
    bank_name = fields.Str(allow_none=True)


class NormalizedTransactionSchema(Schema):
    """Validated inward transaction handed to business processors"""
    instruction_id = fields.Str(dump_only=True)
    amount = fields.Decimal(as_string=True, dump_only=True)
    currency = fields.Str(dump_only=True)
    creditor_account = fields.Nested(AccountSchema, allow_none=True, dump_only=True)
    debtor_account = fields.Nested(AccountSchema, allow_none=True, dump_only=True)
