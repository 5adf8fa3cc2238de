"""
Cached dog counts for the shelter list.

Entries are keyed by a version token that is replaced whenever a dog is
saved or deleted, so a write makes every older entry unreachable instead
of having to find and delete it. The token lives in the default cache,
which is database backed and therefore shared by every worker process
and by management commands.
"""

from __future__ import annotations

import logging
import uuid
from typing import Dict

from django.conf import settings
from django.core.cache import cache
from django.db import transaction
from django.db.models import Count

from .models import Shelter

logger = logging.getLogger(__name__)

DOG_VERSION_KEY = 'shelters:dog_version'


def _new_version() -> str:
    return uuid.uuid4().hex


def get_dog_version(backend=None) -> str:
    backend = backend or cache
    return backend.get_or_set(DOG_VERSION_KEY, _new_version, None)


def bump_dog_version(backend=None) -> str:
    backend = backend or cache
    version = _new_version()
    backend.set(DOG_VERSION_KEY, version, None)
    logger.debug("Dog cache version bumped to %s", version)
    return version


def invalidate_dog_counts(backend=None) -> None:
    """Invalidate now and again once the surrounding transaction commits.

    The second bump discards counts that another connection cached from
    pre-commit data under the first token.
    """
    bump_dog_version(backend)
    transaction.on_commit(lambda: bump_dog_version(backend))


def shelter_dog_counts(backend=None) -> Dict[int, int]:
    """Return ``{shelter_id: dog_count}`` for every shelter that has dogs."""
    backend = backend or cache
    key = f'shelters:dog_counts:{get_dog_version(backend)}'
    counts = backend.get(key)
    if counts is None:
        rows = Shelter.objects.annotate(dog_count=Count('dogs')).values_list('id', 'dog_count')
        counts = {shelter_id: count for shelter_id, count in rows if count}
        backend.set(key, counts, settings.SHELTER_CACHE_TTL)
    return counts
