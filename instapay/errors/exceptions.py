class AppError(Exception):
    status_code = 500
    error = "Application error"

    def __init__(self, message, status_code=None, error_data=None):
        super().__init__(message)
        if status_code:
            self.status_code = status_code
        self.message = message
        self.error_data = error_data or {}


class InstapayError(AppError):
    status_code = 500
    error = "Instapay error"


class ConfigurationError(InstapayError):
    """Raised when a required collaborator or signing capability is missing"""
    status_code = 500
    error = "Configuration error"


class UnknownEndpointError(InstapayError):
    status_code = 404
    error = "Unknown callback endpoint"

    def __init__(self, endpoint):
        super().__init__(
            f'Unknown callback endpoint: {endpoint}',
            error_data={'endpoint': endpoint}
        )
        self.endpoint = endpoint


class Unauthorized(AppError):
    status_code = 401
    error = "Unauthorized"
