import logging
from decimal import ROUND_HALF_EVEN, Decimal

from django.utils import timezone

logger = logging.getLogger(__name__)

PRICE_BUMP_THRESHOLD = Decimal('10.00')
PRICE_BUMP_FACTOR = Decimal('1.05')
PRICE_QUANTUM = Decimal('0.01')
MIN_PRICE = Decimal('0.00')


def adjust_price(price):
    """Bump prices under the threshold by 5%, rounded half-to-even to cents.

    Negative prices are clamped to zero.
    """
    if price < MIN_PRICE:
        return MIN_PRICE
    if price < PRICE_BUMP_THRESHOLD:
        return (price * PRICE_BUMP_FACTOR).quantize(PRICE_QUANTUM, rounding=ROUND_HALF_EVEN)
    return price


def apply_sync_policy(product, now=None, log=None):
    log = log or logger

    new_price = adjust_price(product.price)
    if new_price != product.price:
        log.debug("Price adjusted for '%s': %s -> %s", product.name, product.price, new_price)
        product.price = new_price

    if product.description:
        product.description = product.description.strip()

    product.updated_at = now or timezone.now()
    return product
