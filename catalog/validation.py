from decimal import Decimal, InvalidOperation

from catalog.models import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH, PRICE_CATEGORIES

MAX_PRICE = Decimal('999999.99')


def parse_decimal(value):
    if isinstance(value, bool):
        raise InvalidOperation(value)
    if isinstance(value, float):
        value = str(value)
    return Decimal(value)


def validate_product(name, description, price):
    """Returns a list of (field, message) pairs; empty when the product is valid."""
    errors = []

    if name is not None and not isinstance(name, str):
        errors.append(('name', 'name_invalid'))
    elif not name or not name.strip():
        errors.append(('name', 'name_required'))
    elif len(name.strip()) > NAME_MAX_LENGTH:
        errors.append(('name', 'name_max_length'))

    if description is not None and not isinstance(description, str):
        errors.append(('description', 'description_invalid'))
    elif description and len(description) > DESCRIPTION_MAX_LENGTH:
        errors.append(('description', 'description_max_length'))

    if price is None:
        errors.append(('price', 'price_required'))
    else:
        try:
            amount = parse_decimal(price)
        except (InvalidOperation, TypeError, ValueError):
            errors.append(('price', 'price_invalid'))
        else:
            if not amount.is_finite():
                errors.append(('price', 'price_invalid'))
            elif amount <= 0:
                errors.append(('price', 'price_must_be_positive'))
            elif amount > MAX_PRICE:
                errors.append(('price', 'price_max_exceeded'))

    return errors


def validate_price_category(category):
    if not category or not isinstance(category, str) or not category.strip():
        return [('price_category', 'price_category_required')]
    if category.strip().lower() not in {c.lower() for c in PRICE_CATEGORIES}:
        return [('price_category', 'price_category_invalid')]
    return []


def validate_report_filter(min_price):
    if min_price is None:
        return []
    try:
        amount = parse_decimal(min_price)
    except (InvalidOperation, TypeError, ValueError):
        return [('min_price', 'min_price_invalid')]
    if not amount.is_finite():
        return [('min_price', 'min_price_invalid')]
    if amount < 0:
        return [('min_price', 'min_price_must_be_non_negative')]
    return []
