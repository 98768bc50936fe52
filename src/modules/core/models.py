"""Base abstract model shared by the inventory modules.

Provides ``BaseModel``: auto-increment primary key plus ``created_at`` /
``updated_at`` timestamp bookkeeping.  ``created_at`` is stamped once on
insert; ``updated_at`` is refreshed on every save.
"""

from __future__ import annotations

from django.db import models


class BaseModel(models.Model):
    """Abstract base with integer PK and timestamp bookkeeping."""

    id = models.BigAutoField(primary_key=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)
