"""Database connection settings derived from the environment."""

from __future__ import annotations

import os
from typing import Mapping
from urllib.parse import parse_qs, unquote, urlsplit

from django.core.exceptions import ImproperlyConfigured

AZURE_POSTGRES_SUFFIX = ".postgres.database.azure.com"
DEFAULT_POSTGRES_PORT = 5432
POSTGRES_ENGINE = "django.db.backends.postgresql"


def normalize_database_url(url: str) -> str:
    """Normalize driver-qualified URLs to a plain ``postgresql://`` URL.

    Accepts ``postgres://`` (Heroku style), ``postgresql://`` and
    SQLAlchemy style prefixes such as ``postgresql+psycopg://``.
    """
    url = url.strip()
    scheme, sep, rest = url.partition("://")
    if not sep:
        raise ImproperlyConfigured(f"DATABASE_URL is not a URL: {url!r}")
    base_scheme = scheme.split("+", 1)[0].lower()
    if base_scheme not in ("postgres", "postgresql"):
        raise ImproperlyConfigured(f"Unsupported DATABASE_URL scheme: {scheme!r}")
    return "postgresql://" + rest


def database_config_from_url(url: str) -> dict:
    """Build a Django ``DATABASES['default']`` entry from a URL."""
    parts = urlsplit(normalize_database_url(url))
    name = unquote(parts.path.lstrip("/"))
    if not name:
        raise ImproperlyConfigured("DATABASE_URL must include a database name")

    config = {
        "ENGINE": POSTGRES_ENGINE,
        "NAME": name,
        "USER": unquote(parts.username or ""),
        "PASSWORD": unquote(parts.password or ""),
        "HOST": parts.hostname or "",
        "PORT": parts.port or DEFAULT_POSTGRES_PORT,
    }
    options = {key: values[-1] for key, values in parse_qs(parts.query).items()}
    if options:
        config["OPTIONS"] = options
    return config


def _require(env: Mapping[str, str], name: str) -> str:
    value = env.get(name)
    if not value:
        raise ImproperlyConfigured(f"The {name} environment variable must be set in production")
    return value


def azure_host(host: str) -> str:
    """Expand a bare Azure server name into its fully qualified host."""
    if "." in host or host in ("localhost",):
        return host
    return host + AZURE_POSTGRES_SUFFIX


def database_config_from_env(env: Mapping[str, str] | None = None) -> dict:
    """Resolve the production database from ``DATABASE_URL`` or ``DB*`` variables."""
    env = os.environ if env is None else env

    url = env.get("DATABASE_URL")
    if url:
        return database_config_from_url(url)

    return {
        "ENGINE": POSTGRES_ENGINE,
        "NAME": _require(env, "DBNAME"),
        "HOST": azure_host(_require(env, "DBHOST")),
        "USER": _require(env, "DBUSER"),
        "PASSWORD": _require(env, "DBPASS"),
        "PORT": int(env.get("DBPORT") or DEFAULT_POSTGRES_PORT),
        "OPTIONS": {"sslmode": env.get("DBSSLMODE") or "require"},
    }
