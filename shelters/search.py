from __future__ import annotations

from functools import reduce
import operator

from django.db.models import Q

SEARCH_FIELDS = (
    'name__icontains',
    'description__icontains',
    'shelter__name__icontains',
    'shelter__location__icontains',
)


def search_tokens(query: str | None) -> list[str]:
    if not query:
        return []
    return [t.strip().lower() for t in query.split() if t.strip()]


def build_dog_search_filter(query: str | None) -> Q:
    """Return a filter requiring every query token to match some dog field.

    A token matches when it appears (case-insensitively) in the dog's name
    or description, or in its shelter's name or location. An empty query
    yields an empty ``Q()`` which matches every dog.
    """
    combined = Q()
    for token in search_tokens(query):
        combined &= reduce(operator.or_, (Q(**{field: token}) for field in SEARCH_FIELDS))
    return combined
