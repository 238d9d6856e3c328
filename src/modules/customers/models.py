"""Customer model.

Only the attributes the ordering flow needs are modelled: a display name
and a unique email address used to detect duplicate registrations.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    """Customer aggregate root.

    ``email`` is normalised to lowercase on save so look-ups are
    case-insensitive in practice.
    """

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)

    class Meta:
        db_table = "customers"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="customers_created_idx"),
        ]

    def save(self, *args, **kwargs) -> None:
        if self.email:
            self.email = self.email.strip().lower()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.name
