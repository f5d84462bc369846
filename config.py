import os
from datetime import timedelta


def _float_or_none(value):
    if value in (None, ''):
        return None
    return float(value)


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # JSON Settings
    JSON_AS_ASCII = False

    # EmailJS Settings (public identifiers, not secrets)
    EMAILJS_API_URL = os.environ.get('EMAILJS_API_URL', 'https://api.emailjs.com/api/v1.0/email/send')
    EMAILJS_SERVICE_ID = os.environ.get('EMAILJS_SERVICE_ID', 'service_portfolio')
    EMAILJS_TEMPLATE_ID = os.environ.get('EMAILJS_TEMPLATE_ID', 'template_contact')
    EMAILJS_PUBLIC_KEY = os.environ.get('EMAILJS_PUBLIC_KEY', 'portfolio-public-key')
    # None means requests' own default (no timeout)
    EMAILJS_TIMEOUT = _float_or_none(os.environ.get('EMAILJS_TIMEOUT'))

    # Contact Form Settings
    CONTACT_BANNER_SECONDS = float(os.environ.get('CONTACT_BANNER_SECONDS', '5'))
    CONTACT_MAX_FLOWS = int(os.environ.get('CONTACT_MAX_FLOWS', '1000'))
    CONTACT_FLOW_IDLE_SECONDS = float(os.environ.get('CONTACT_FLOW_IDLE_SECONDS', '3600'))

    # Static Assets
    RESUME_DIRECTORY = 'static/resume'
    RESUME_FILENAME = os.environ.get('RESUME_FILENAME', 'resume.pdf')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    EMAILJS_API_URL = 'https://emailjs.test/api/v1.0/email/send'
    EMAILJS_SERVICE_ID = 'service_test'
    EMAILJS_TEMPLATE_ID = 'template_test'
    EMAILJS_PUBLIC_KEY = 'public_test'
    EMAILJS_TIMEOUT = None
    CONTACT_BANNER_SECONDS = 5.0


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
