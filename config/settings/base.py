"""
Base Django settings for the reqlog host project.
All environment variables are read via python-decouple.
"""
from pathlib import Path

from decouple import Csv, config

from reqlog.logconfig import build_logging_dict, configure_structlog

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# ---------------------------------------------------------------------------
# Security – loaded from environment; production requires a real key
# ---------------------------------------------------------------------------
SECRET_KEY = config("SECRET_KEY", default="django-insecure-reqlog-dev-only")

ALLOWED_HOSTS = config("ALLOWED_HOSTS", default="localhost,127.0.0.1,testserver", cast=Csv())

DEBUG = False

# ---------------------------------------------------------------------------
# Application definition
# ---------------------------------------------------------------------------
INSTALLED_APPS = []

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"

WSGI_APPLICATION = "config.wsgi.application"
ASGI_APPLICATION = "config.asgi.application"

# No database: the host project only serves liveness checks
DATABASES = {}

# ---------------------------------------------------------------------------
# Internationalisation
# ---------------------------------------------------------------------------
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

# ---------------------------------------------------------------------------
# Request logging
# ---------------------------------------------------------------------------
REQLOG_APP_NAME = config("REQLOG_APP_NAME", default="reqlog")
REQLOG_REQUEST_ID_HEADER = config("REQLOG_REQUEST_ID_HEADER", default="")
REQLOG_LOGGER_NAME = config("REQLOG_LOGGER_NAME", default="reqlog")

# ---------------------------------------------------------------------------
# Structured logging via structlog
# ---------------------------------------------------------------------------
LOG_LEVEL = config("LOG_LEVEL", default="INFO")
LOG_JSON = config("LOG_JSON", default=True, cast=bool)

LOGGING = build_logging_dict(LOG_LEVEL, LOG_JSON)

configure_structlog()
