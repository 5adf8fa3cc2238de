"""Settings for the test suite: development settings with a fixed, non-secret key."""

import os

os.environ.setdefault('SECRET_KEY', 'insecure-test-only-key')

from .settings import *  # noqa: E402,F401,F403
