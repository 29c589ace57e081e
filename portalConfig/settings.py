"""
Django settings for the HLC admission portal backend.

Values are read from the environment; a local .env file is loaded first.
"""

import os
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')


def env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def env_list(name, default=''):
    return [item.strip() for item in os.getenv(name, default).split(',') if item.strip()]


SECRET_KEY = os.getenv('SECRET_KEY', 'django-insecure-change-me-in-production')

DEBUG = env_bool('DEBUG', True)

ALLOWED_HOSTS = env_list('ALLOWED_HOSTS', 'localhost,127.0.0.1')


# Application definition

INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'django_filters',
    'admissions',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'portalConfig.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'portalConfig.wsgi.application'


# Database

DATABASES = {
    'default': {
        'ENGINE': os.getenv('DB_ENGINE', 'django.db.backends.sqlite3'),
        'NAME': os.getenv('DB_NAME', str(BASE_DIR / 'db.sqlite3')),
        'USER': os.getenv('DB_USER', ''),
        'PASSWORD': os.getenv('DB_PASSWORD', ''),
        'HOST': os.getenv('DB_HOST', ''),
        'PORT': os.getenv('DB_PORT', ''),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# Password validation

AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]


# Internationalization

LANGUAGE_CODE = 'en-us'
TIME_ZONE = os.getenv('TIME_ZONE', 'Asia/Karachi')
USE_I18N = True
USE_TZ = True


# Static & media files

STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

MEDIA_URL = '/uploads/'
MEDIA_ROOT = Path(os.getenv('MEDIA_ROOT', str(BASE_DIR / 'media')))


# REST framework

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework_simplejwt.authentication.JWTAuthentication',
        'rest_framework.authentication.SessionAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'DEFAULT_FILTER_BACKENDS': [
        'django_filters.rest_framework.DjangoFilterBackend',
    ],
}

SIMPLE_JWT = {
    'ACCESS_TOKEN_LIFETIME': timedelta(hours=1),
    'REFRESH_TOKEN_LIFETIME': timedelta(days=7),
}


# Email

EMAIL_BACKEND = os.getenv('EMAIL_BACKEND', 'django.core.mail.backends.smtp.EmailBackend')
EMAIL_HOST = os.getenv('EMAIL_HOST', 'localhost')
EMAIL_PORT = int(os.getenv('EMAIL_PORT', '587'))
EMAIL_HOST_USER = os.getenv('EMAIL_HOST_USER', '')
EMAIL_HOST_PASSWORD = os.getenv('EMAIL_HOST_PASSWORD', '')
EMAIL_USE_TLS = env_bool('EMAIL_USE_TLS', True)
EMAIL_TIMEOUT = int(os.getenv('EMAIL_TIMEOUT', '20'))
DEFAULT_FROM_EMAIL = os.getenv('DEFAULT_FROM_EMAIL', EMAIL_HOST_USER or 'admissions@hlc.edu')
ADMIN_EMAIL = os.getenv('ADMIN_EMAIL', '')
CONTACT_EMAIL = os.getenv('CONTACT_EMAIL', 'admissions@hlc.edu')
CONTACT_PHONE = os.getenv('CONTACT_PHONE', '+92-XXX-XXXXXXX')


# Admission portal

COLLEGE_NAME = os.getenv('COLLEGE_NAME', 'Hyderabad Law College')
PORTAL_NAME = os.getenv('PORTAL_NAME', 'HLC Admission Portal')

APPLICATION_ID_PREFIX = os.getenv('APPLICATION_ID_PREFIX', 'HLC')
APPLICATION_ID_MAX_ATTEMPTS = int(os.getenv('APPLICATION_ID_MAX_ATTEMPTS', '10'))

UPLOAD_MAX_BYTES = int(os.getenv('UPLOAD_MAX_BYTES', str(5 * 1024 * 1024)))
FILE_UPLOAD_PERMISSIONS = 0o644


# PDF generation

PDF_OUTPUT_DIR = Path(os.getenv('PDF_OUTPUT_DIR', str(BASE_DIR / 'pdfs')))

# Skip the HTML renderers and write the plain text PDF only
FORCE_FALLBACK_PDF = env_bool('FORCE_FALLBACK_PDF', False)

PDF_RENDER_TIMEOUT_MS = int(os.getenv('PDF_RENDER_TIMEOUT_MS', '30000'))
PDF_BROWSER_EXECUTABLE = os.getenv('PDF_BROWSER_EXECUTABLE') or None
PDF_BROWSER_ARGS = env_list(
    'PDF_BROWSER_ARGS',
    '--disable-gpu,--disable-dev-shm-usage,--no-first-run',
)

# Minimum byte sizes for accepting a renderer's output
PDF_CONVERTER_MIN_BYTES = int(os.getenv('PDF_CONVERTER_MIN_BYTES', '5000'))
PDF_BROWSER_MIN_BYTES = int(os.getenv('PDF_BROWSER_MIN_BYTES', '1000'))

# TrueType fonts for the plain text PDF; Helvetica (Latin only) when unset
PDF_TEXT_FONT_PATH = os.getenv('PDF_TEXT_FONT_PATH') or None
PDF_TEXT_BOLD_FONT_PATH = os.getenv('PDF_TEXT_BOLD_FONT_PATH') or None

PDF_MAX_IMAGE_BYTES = int(os.getenv('PDF_MAX_IMAGE_BYTES', str(5 * 1024 * 1024)))
PDF_LOGO_PATHS = env_list('PDF_LOGO_PATHS') or [
    str(BASE_DIR / 'public' / 'hlc-logo.png'),
    str(BASE_DIR / 'public' / 'assets' / 'hlc-logo.png'),
    str(BASE_DIR / 'static' / 'hlc-logo.png'),
]


# Logging

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'admissions': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
