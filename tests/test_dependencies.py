"""
Guard the dependency set: the shelter site should stay a small Django app.
"""
import re
import sys
import tomllib
from pathlib import Path

import pytest

PYPROJECT = Path(__file__).resolve().parent.parent / 'pyproject.toml'

APPROVED_PACKAGES = {
    'django', 'python-dotenv', 'pillow', 'psycopg', 'gunicorn',
    'pytest', 'pytest-django', 'pytest-cov',
}


def _package_name(requirement):
    return re.split(r'[\[<>=!~;\s]', requirement.strip(), maxsplit=1)[0].lower()


def test_only_approved_dependencies():
    with PYPROJECT.open('rb') as fh:
        project = tomllib.load(fh)['project']

    requirements = list(project['dependencies'])
    for extra in project.get('optional-dependencies', {}).values():
        requirements.extend(extra)

    for requirement in requirements:
        name = _package_name(requirement)
        if name not in APPROVED_PACKAGES:
            pytest.fail(f"Unapproved package '{name}' found in pyproject.toml")


@pytest.mark.django_db
def test_no_unwanted_heavy_imports(client):
    prohibited_modules = ['torch', 'tensorflow', 'transformers', 'pandas', 'sklearn', 'cv2']

    # Exercise the URLconf, views and templates
    client.get('/')

    for module in prohibited_modules:
        if module in sys.modules:
            pytest.fail(f"Prohibited module '{module}' was imported")
