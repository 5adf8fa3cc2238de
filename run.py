"""Production entry point.

Applies pending migrations, creates the shared cache table, collects
static files, then replaces this process with gunicorn serving
``config.wsgi``. Suitable as the Azure App Service startup command
(``python run.py``).
"""

import logging
import os
import shlex
import shutil

from dotenv import load_dotenv

from config import configure_settings_module

logger = logging.getLogger(__name__)


def prepare():
    import django
    from django.core.management import call_command

    django.setup()
    call_command('migrate', interactive=False)
    call_command('createcachetable')
    call_command('collectstatic', interactive=False, verbosity=0)


def gunicorn_command(env=None):
    env = os.environ if env is None else env
    return [
        'gunicorn',
        '--workers', env.get('GUNICORN_WORKERS', '2'),
        '--bind', f"0.0.0.0:{env.get('PORT', '8000')}",
        '--access-logfile', '-',
        'config.wsgi',
    ]


def main():
    load_dotenv()
    configure_settings_module()
    prepare()

    command = gunicorn_command()
    executable = shutil.which(command[0])
    if executable is None:
        raise SystemExit("gunicorn is not installed; install the project with `pip install -e .`")
    logger.info("Starting %s", shlex.join(command))
    os.execv(executable, command)


if __name__ == '__main__':
    main()
