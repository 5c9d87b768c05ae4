import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default='false'):
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


class Config:
    """Base configuration"""
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')

    # Shared secret for the GetToken handshake (HS256)
    CALLBACK_SECRET_KEY = os.getenv('CALLBACK_SECRET_KEY', 'dev-callback-secret')
    CALLBACK_TOKEN_TTL = int(os.getenv('CALLBACK_TOKEN_TTL', 3600))
    CALLBACK_REQUIRE_TOKEN = _env_bool('CALLBACK_REQUIRE_TOKEN')

    REDIS_URL = os.getenv('REDIS_URL', 'redis://localhost:6379/0')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    CALLBACK_SECRET_KEY = os.getenv('CALLBACK_SECRET_KEY')
    CALLBACK_REQUIRE_TOKEN = _env_bool('CALLBACK_REQUIRE_TOKEN', 'true')


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    CALLBACK_SECRET_KEY = 'test-callback-secret'
    CALLBACK_REQUIRE_TOKEN = False


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
