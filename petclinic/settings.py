"""
Django settings for the pet clinic project.

Common development values are read from a `.env` file so that the
project can be configured without modifying source code. In production
you should set environment variables rather than relying on the `.env`
file.
"""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv  # type: ignore

# -----------------------------------------------------------------------------
# Base & .env loading
# -----------------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent
env_path = BASE_DIR / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# -----------------------------------------------------------------------------
# Core flags & security baseline
# -----------------------------------------------------------------------------
ENV = os.getenv("ENV", "dev")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}

# Allow selected hosts (comma separated). Default for local dev only.
ALLOWED_HOSTS: list[str] = [
    h.strip() for h in os.getenv("ALLOWED_HOSTS", "127.0.0.1,localhost,testserver").split(",") if h.strip()
]

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv("SECRET_KEY") or "replace-me-with-a-secure-secret-key"

if ENV == "prod":
    if DEBUG:
        raise RuntimeError("DEBUG must be 0 in prod")
    if "*" in ALLOWED_HOSTS:
        raise RuntimeError("ALLOWED_HOSTS cannot contain * in prod")
    if SECRET_KEY == "replace-me-with-a-secure-secret-key":
        raise RuntimeError("SECRET_KEY must be set securely in prod")

# -----------------------------------------------------------------------------
# Applications
# -----------------------------------------------------------------------------
INSTALLED_APPS = [
    "django_prometheus",
    "corsheaders",
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # Third-party apps
    "rest_framework",
    "drf_yasg",
    # Local apps
    "clinic",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    "django_prometheus.middleware.PrometheusBeforeMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django_prometheus.middleware.PrometheusAfterMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "clinic.middleware.ResourceNotFoundMiddleware",
]

ROOT_URLCONF = "petclinic.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "petclinic.wsgi.application"

# -----------------------------------------------------------------------------
# Database configuration
# Priority:
#   1) Explicit MySQL env vars (MYSQL_* or DB_* aliases)
#   2) DATABASE_URL (parsed by dj_database_url)
#   3) SQLite fallback
# -----------------------------------------------------------------------------
DB_CONN_MAX_AGE = int(os.getenv("DB_CONN_MAX_AGE", "120"))

# Support both MYSQL_* and DB_* names for convenience
mysql_name = os.getenv("MYSQL_NAME") or os.getenv("DB_NAME")
mysql_user = os.getenv("MYSQL_USER") or os.getenv("DB_USER")
mysql_password = os.getenv("MYSQL_PASSWORD") or os.getenv("DB_PASSWORD")
mysql_host = os.getenv("MYSQL_HOST") or os.getenv("DB_HOST", "localhost")
mysql_port = os.getenv("MYSQL_PORT") or os.getenv("DB_PORT", "3306")

if mysql_name and mysql_user:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.mysql",
            "NAME": mysql_name,
            "USER": mysql_user,
            "PASSWORD": mysql_password or "",
            "HOST": mysql_host,
            "PORT": str(mysql_port),
            "CONN_MAX_AGE": DB_CONN_MAX_AGE,
            "OPTIONS": {
                "charset": "utf8mb4",
                "init_command": "SET sql_mode='STRICT_TRANS_TABLES'",
            },
        }
    }
else:
    database_url = os.getenv("DATABASE_URL", "").strip()
    if database_url:
        import dj_database_url  # type: ignore

        DATABASES = {
            "default": dj_database_url.parse(
                database_url,
                conn_max_age=DB_CONN_MAX_AGE,
            )
        }
    else:
        # Default SQLite for local development
        DATABASES = {
            "default": {
                "ENGINE": "django.db.backends.sqlite3",
                "NAME": (BASE_DIR / "db.sqlite3").as_posix(),
            }
        }

# -----------------------------------------------------------------------------
# Password validation (admin site users)
# -----------------------------------------------------------------------------
AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

# -----------------------------------------------------------------------------
# Internationalization & static
# -----------------------------------------------------------------------------
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedStaticFilesStorage"},
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# -----------------------------------------------------------------------------
# Messages (flash attributes survive one redirect in the session)
# -----------------------------------------------------------------------------
MESSAGE_STORAGE = "django.contrib.messages.storage.session.SessionStorage"

# -----------------------------------------------------------------------------
# DRF
# -----------------------------------------------------------------------------
REST_FRAMEWORK = {
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
    # Use the unified API exception handler
    "EXCEPTION_HANDLER": "clinic.exceptions.api_exception_handler",
}

# Avoid automatic slash appending to URLs (routes use no trailing slash)
APPEND_SLASH = False

# -----------------------------------------------------------------------------
# Swagger / OpenAPI
# -----------------------------------------------------------------------------
SWAGGER_SETTINGS = {
    "DEFAULT_INFO": "petclinic.urls.api_info",
    "USE_SESSION_AUTH": False,
}

# -----------------------------------------------------------------------------
# CORS (safe-by-default: none)
# -----------------------------------------------------------------------------
CORS_ALLOWED_ORIGINS = [
    h.strip() for h in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",") if h.strip()
]
CORS_ALLOW_CREDENTIALS = True

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "clinic": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
    },
}

# -----------------------------------------------------------------------------
# Security & proxy headers (enable in prod behind TLS)
# -----------------------------------------------------------------------------
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
USE_X_FORWARDED_HOST = True
if ENV == "prod":
    SECURE_HSTS_SECONDS = int(os.getenv("SECURE_HSTS_SECONDS", "3600"))
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True
    SECURE_HSTS_PRELOAD = False
    SESSION_COOKIE_SECURE = True
    CSRF_COOKIE_SECURE = True
    SECURE_SSL_REDIRECT = os.getenv("SECURE_SSL_REDIRECT", "1").lower() in {"1", "true", "yes"}
