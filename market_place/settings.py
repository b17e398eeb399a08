from pathlib import Path
import os

BASE_DIR = Path(__file__).resolve().parent.parent

# ---------------------------------------------------
# Security
# ---------------------------------------------------
SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'django-insecure-k2#n5v!x0q8r@m1p$e7t^w3z&c6y+b4h(d9j)s_u-f%g*a')
DEBUG = os.getenv('DJANGO_DEBUG', 'True') == 'True'
ALLOWED_HOSTS = ['*']

# ---------------------------------------------------
# Remote data service
# ---------------------------------------------------
MARKETPLACE_API_URL = os.getenv('MARKETPLACE_API_URL', 'http://localhost:3030').rstrip('/')
MARKETPLACE_REQUEST_TIMEOUT = float(os.getenv('MARKETPLACE_REQUEST_TIMEOUT', '10'))
MARKETPLACE_MAX_IMAGE_SIZE = int(os.getenv('MARKETPLACE_MAX_IMAGE_SIZE', str(5 * 1024 * 1024)))

# Re-check the stored token against /users/me on every request.
# Off by default: each page view would cost one extra round trip.
MARKETPLACE_REVALIDATE_SESSION = os.getenv('MARKETPLACE_REVALIDATE_SESSION', 'False') == 'True'

# Storage file used by management commands (no browser there)
MARKETPLACE_SEED_STATE_FILE = Path(
    os.getenv('MARKETPLACE_SEED_STATE_FILE', str(BASE_DIR / '.marketplace_state.json'))
)

# ---------------------------------------------------
# Installed apps
# ---------------------------------------------------
INSTALLED_APPS = [
    'rest_framework',
    'marketplace',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'django.contrib.humanize',
]

# ---------------------------------------------------
# Middleware
# ---------------------------------------------------
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'marketplace.middleware.MarketplaceSessionMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'market_place.urls'

# ---------------------------------------------------
# Templates
# ---------------------------------------------------
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / "marketplace" / "templates"],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.template.context_processors.static',
                'django.contrib.messages.context_processors.messages',
                'marketplace.context_processors.navbar_counters',
            ],
            'builtins': ['django.templatetags.static'],
        },
    },
]

WSGI_APPLICATION = 'market_place.wsgi.application'

# ---------------------------------------------------
# Database
# ---------------------------------------------------
# Nothing is stored server side: listings, comments and accounts live on the
# remote data service, per-browser state lives in the signed session cookie.
DATABASES = {}

# ---------------------------------------------------
# Sessions ("local storage")
# ---------------------------------------------------
SESSION_ENGINE = 'django.contrib.sessions.backends.signed_cookies'
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_AGE = 60 * 60 * 24 * 30
MESSAGE_STORAGE = 'django.contrib.messages.storage.cookie.CookieStorage'

# ---------------------------------------------------
# Internationalization
# ---------------------------------------------------
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# ---------------------------------------------------
# Static
# ---------------------------------------------------
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'


# ---------------------------------------------------
# Login/logout redirects
# ---------------------------------------------------
LOGIN_URL = '/login/'
LOGIN_REDIRECT_URL = '/catalog/'
LOGOUT_REDIRECT_URL = '/'

# ---------------------------------------------------
# Logging
# ---------------------------------------------------
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '[{levelname}] {asctime} {name}: {message}',
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
        'marketplace': {
            'handlers': ['console'],
            'level': os.getenv('MARKETPLACE_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
    },
}

# ---------------------------------------------------
# REST framework (favorites JSON endpoint)
# ---------------------------------------------------
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': (
        'marketplace.api_permissions.MarketplaceSessionAuthentication',
    ),
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.AllowAny',
    ),
    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
    ),
    'UNAUTHENTICATED_USER': None,
}
