from instapay.errors.exceptions import (
    AppError,
    InstapayError,
    ConfigurationError,
    UnknownEndpointError,
    Unauthorized,
)

__all__= [
    'AppError',
    'InstapayError',
    'ConfigurationError',
    'UnknownEndpointError',
    'Unauthorized',
]
