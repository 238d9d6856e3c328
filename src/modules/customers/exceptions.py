"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class CustomerAlreadyExists(Exception):
    """A customer with the same email address is already registered."""


class CustomerNotFound(Exception):
    """The requested customer does not exist."""
