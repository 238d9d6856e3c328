"""Unit of work: the transaction boundary used by application services.

Services open ``unit_of_work.atomic()`` around every read-validate-write
sequence.  Anything raised inside the block rolls back all writes made in
it; the exception itself propagates unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from django.db import transaction


class IUnitOfWork(ABC):
    """Transaction scope contract, independent of the storage engine."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Return a context manager that commits on success, rolls back on error."""


class DjangoUnitOfWork(IUnitOfWork):
    """Unit of work backed by ``django.db.transaction.atomic``.

    Nested scopes become savepoints, so repositories that declare their own
    ``@transaction.atomic`` writes join the outer transaction.
    """

    def __init__(self, using: str | None = None) -> None:
        self._using = using

    def atomic(self) -> AbstractContextManager:
        return transaction.atomic(using=self._using)
