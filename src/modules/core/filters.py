"""Shared django-filter helper used by repository ``list()`` methods."""

from __future__ import annotations

from typing import Any, Mapping, Type

import django_filters
from django.core.exceptions import ValidationError
from django.db import models


def apply_filterset(
    filterset_class: Type[django_filters.FilterSet],
    filters: Mapping[str, Any],
    queryset: models.QuerySet,
) -> models.QuerySet:
    """Narrow *queryset* with *filters* parsed by *filterset_class*.

    Raises:
        ValidationError: with a ``{param: [messages]}`` dict when a
            filter value cannot be parsed.
    """
    filterset = filterset_class(data=filters, queryset=queryset)
    if not filterset.is_valid():
        errors = filterset.errors.get_json_data()
        raise ValidationError(
            {
                field: [error["message"] for error in messages]
                for field, messages in errors.items()
            }
        )
    return filterset.qs
