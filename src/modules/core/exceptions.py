"""Domain error taxonomy shared by every module.

Services raise subclasses of these; only the API layer
(``modules.core.exception_handler``) turns them into HTTP responses.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for business-rule failures."""


class EntityNotFound(DomainError):
    """A referenced product or order does not exist."""


class InvalidState(DomainError):
    """The operation conflicts with the current state (e.g. stock)."""
