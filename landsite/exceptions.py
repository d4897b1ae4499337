"""Application-level exception types.

``SlugConflictError`` is raised when the store kept rejecting a resolved slug
because of concurrent writers; the global handler maps it to 409.  Request
validation problems are left to pydantic and come back as 422 field lists.
"""

from __future__ import annotations


class SlugConflictError(Exception):
    """Raised when a unique slug could not be stored after several attempts."""

    def __init__(self, slug: str, attempts: int) -> None:
        super().__init__(f"Slug {slug!r} still conflicts after {attempts} attempts")
        self.slug = slug
        self.attempts = attempts
