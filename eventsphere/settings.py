"""
Django settings for eventsphere project.
"""

import os
from pathlib import Path
import dj_database_url
from dotenv import load_dotenv

# Load environment variables from .env (for local dev)
load_dotenv()

# =====================
# PATHS
# =====================
BASE_DIR = Path(__file__).resolve().parent.parent

# =====================
# SECURITY & DEBUG
# =====================
SECRET_KEY = os.getenv('SECRET_KEY', 'django-insecure-your-secret-key-here')

# DEBUG is False by default unless explicitly set to True
DEBUG = os.getenv("DEBUG", "False").lower() == "true"

ALLOWED_HOSTS = [
    'event-fe.onrender.com',
    'localhost',
    '127.0.0.1',
]

# Add Render's dynamic hostname if available
RENDER_EXTERNAL_HOSTNAME = os.getenv("RENDER_EXTERNAL_HOSTNAME")
if RENDER_EXTERNAL_HOSTNAME:
    ALLOWED_HOSTS.append(RENDER_EXTERNAL_HOSTNAME)

# =====================
# APPLICATIONS
# =====================
INSTALLED_APPS = [
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Your apps
    'apps',
    'apps.login_page',
    'apps.dashboard',
    'apps.events_page',
    'apps.hosts_page',
    'apps.amenities_page',
    'apps.categories_page',
    'apps.bookings_page',
    'apps.payments',
]

# =====================
# MIDDLEWARE
# =====================
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',  # for static files on Render
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'apps.dashboard.middleware.AuthGateMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'eventsphere.urls'

# =====================
# TEMPLATES
# =====================
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.messages.context_processors.messages',
                'apps.dashboard.context_processors.navigation',
            ],
            'debug': DEBUG,  # auto-disable in production
        },
    },
]

WSGI_APPLICATION = 'eventsphere.wsgi.application'

# =====================
# DATABASE
# =====================
# Only used when SESSION_ENGINE points at the database backend; all event
# data lives behind the remote API.
DATABASES = {
    "default": dj_database_url.config(
        default=os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
        conn_max_age=60,
        ssl_require=os.getenv("DATABASE_SSL_REQUIRE", "False").lower() == "true",
    )
}

# =====================
# INTERNATIONALIZATION
# =====================
LANGUAGE_CODE = 'en-us'
TIME_ZONE = os.getenv('TIME_ZONE', 'Asia/Singapore')
USE_I18N = True
USE_TZ = True

# =====================
# STATIC FILES
# =====================
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'
STORAGES = {
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage",
    },
}

# =====================
# AUTH & LOGIN
# =====================
LOGIN_URL = '/login/'
LOGIN_REDIRECT_URL = '/'
LOGOUT_REDIRECT_URL = '/login/'

# Session key the signed-in user record is persisted under
DASHBOARD_SESSION_KEY = 'user'

# Fixed credentials checked before delegating to the backend host login
DASHBOARD_STATIC_CREDENTIALS = [
    {'email': 'admin@gmail.com', 'password': 'admin@123', 'id': 'admin-1', 'role': 'admin'},
    {'email': 'host@gmail.com', 'password': 'host@123', 'id': 'host-1', 'role': 'host'},
]

# Paths rendered without the sidebar layout and without the auth gate
DASHBOARD_PUBLIC_PREFIXES = [
    '/tickets/',
    '/activate/',
    '/payment-success/',
    '/api/hitpay-create-session/',
    STATIC_URL,
]

# =====================
# BACKEND API
# =====================
API_ENVIRONMENTS = {
    'development': {
        'API_BASE_URL': 'http://192.168.7.20:8000',
        'DESCRIPTION': 'Local Development Environment',
    },
    'production': {
        'API_BASE_URL': 'https://backend-rxua.onrender.com',
        'DESCRIPTION': 'Production Environment',
    },
    'custom': {
        'API_BASE_URL': 'https://backend-rxua.onrender.com',
        'DESCRIPTION': 'Alternative Production Environment',
    },
}
ACTIVE_ENVIRONMENT = os.getenv('ACTIVE_ENVIRONMENT', 'production')

# An explicit URL wins over the environment table
API_BASE_URL = os.getenv('API_BASE_URL') or API_ENVIRONMENTS[ACTIVE_ENVIRONMENT]['API_BASE_URL']

# Seconds; unset means requests waits indefinitely
API_TIMEOUT = float(os.getenv('API_TIMEOUT')) if os.getenv('API_TIMEOUT') else None

# =====================
# HITPAY
# =====================
HITPAY_API_URL = os.getenv('HITPAY_API_URL', 'https://api.sandbox.hit-pay.com/v1/payment-requests')
HITPAY_API_KEY = os.getenv('HITPAY_API_KEY')
HITPAY_CURRENCY = os.getenv('HITPAY_CURRENCY', 'SGD')

if not HITPAY_API_KEY:
    print("⚠️ WARNING: HITPAY_API_KEY missing in environment variables.")

# =====================
# SESSION SECURITY & CONFIGURATION (6 HOURS)
# =====================
SESSION_ENGINE = os.getenv('SESSION_ENGINE', 'django.contrib.sessions.backends.signed_cookies')
SESSION_SERIALIZER = 'django.contrib.sessions.serializers.JSONSerializer'
SESSION_COOKIE_HTTPONLY = True      # JS can't read session cookies
SESSION_COOKIE_SAMESITE = 'Lax'     # Protects against CSRF
SESSION_COOKIE_AGE = 6 * 60 * 60    # 6 hours
SESSION_SAVE_EVERY_REQUEST = True

MESSAGE_STORAGE = 'django.contrib.messages.storage.cookie.CookieStorage'

# Secure cookies only in production
if not DEBUG:
    SESSION_COOKIE_SECURE = True
    CSRF_COOKIE_SECURE = True

# =====================
# LOGGING
# =====================
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '[{asctime}] {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': os.getenv('LOG_LEVEL', 'INFO'),
        },
    },
}

# =====================
# DEFAULT PRIMARY KEY
# =====================
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
