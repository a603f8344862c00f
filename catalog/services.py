from decimal import Decimal

from django.core.exceptions import ValidationError

from catalog.exceptions import ProductNotFound, ProductValidationError
from catalog.models import Product
from catalog.validation import validate_product


def create_product(name, description=None, price=None):
    """Validate and persist a new product. It stays unsynced until the next sync pass."""
    errors = validate_product(name, description, price)
    if errors:
        raise ProductValidationError(errors)

    if isinstance(price, float):
        price = str(price)
    return Product.objects.create(
        name=name.strip(),
        description=description,
        price=Decimal(price),
    )


def get_product(product_id):
    try:
        return Product.objects.get(pk=product_id)
    except (Product.DoesNotExist, ValidationError):
        raise ProductNotFound(product_id) from None
