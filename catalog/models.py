import uuid

from django.db import models
from django.utils import timezone

NAME_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000

BUDGET = 'Budget'
MID_RANGE = 'Mid-Range'
PREMIUM = 'Premium'
LUXURY = 'Luxury'
PRICE_CATEGORIES = (BUDGET, MID_RANGE, PREMIUM, LUXURY)


class Product(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=NAME_MAX_LENGTH)
    description = models.CharField(max_length=DESCRIPTION_MAX_LENGTH, null=True, blank=True)
    price = models.DecimalField(max_digits=8, decimal_places=2)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(null=True, blank=True, db_index=True)

    class Meta:
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name='catalog_product_price_non_negative',
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.id})"
