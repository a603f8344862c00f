"""Read-side product queries: price categories, the category report and the summary view."""
from dataclasses import dataclass
from decimal import Decimal

from django.db.models import Avg, CharField, Case, Count, Max, Min, Value, When
from django.utils import timezone

from catalog.exceptions import ProductValidationError
from catalog.models import BUDGET, LUXURY, MID_RANGE, PREMIUM, PRICE_CATEGORIES, Product
from catalog.validation import parse_decimal, validate_price_category, validate_report_filter

# Upper bounds (exclusive); anything at or above the last bound is Luxury.
CATEGORY_BOUNDS = (
    (Decimal('50.00'), BUDGET),
    (Decimal('200.00'), MID_RANGE),
    (Decimal('1000.00'), PREMIUM),
)

AVERAGE_QUANTUM = Decimal('0.01')


@dataclass(frozen=True)
class ProductSummary:
    id: object
    name: str
    price: Decimal
    price_category: str
    days_since_created: int


def price_category_expression():
    return Case(
        *[When(price__lt=bound, then=Value(name)) for bound, name in CATEGORY_BOUNDS],
        default=Value(LUXURY),
        output_field=CharField(),
    )


def _canonical_category(category):
    wanted = category.strip().lower()
    return next(c for c in PRICE_CATEGORIES if c.lower() == wanted)


def _with_category():
    return Product.objects.annotate(price_category=price_category_expression())


def get_products_by_category(category):
    errors = validate_price_category(category)
    if errors:
        raise ProductValidationError(errors)

    return list(
        _with_category()
        .filter(price_category=_canonical_category(category))
        .order_by('name')
    )


def get_product_report(min_price=None):
    """Products at or above ``min_price`` plus per-category statistics.

    Returns ``{'products': [...], 'statistics': [...]}``; each statistics row
    has ``price_category``, ``total_products``, ``average_price``,
    ``min_price`` and ``max_price``.
    """
    errors = validate_report_filter(min_price)
    if errors:
        raise ProductValidationError(errors)

    queryset = _with_category()
    if min_price is not None:
        queryset = queryset.filter(price__gte=parse_decimal(min_price))

    statistics = []
    rows = (
        queryset.order_by()
        .values('price_category')
        .annotate(
            total_products=Count('id'),
            average_price=Avg('price'),
            min_price=Min('price'),
            max_price=Max('price'),
        )
    )
    for row in rows:
        statistics.append({
            **row,
            'average_price': Decimal(str(row['average_price'])).quantize(AVERAGE_QUANTUM),
        })
    statistics.sort(key=lambda row: PRICE_CATEGORIES.index(row['price_category']))

    return {
        'products': list(queryset.order_by('price', 'name')),
        'statistics': statistics,
    }


def get_product_summaries(now=None):
    now = now or timezone.now()
    return [
        ProductSummary(
            id=product.id,
            name=product.name,
            price=product.price,
            price_category=product.price_category,
            days_since_created=(now - product.created_at).days,
        )
        for product in _with_category().order_by('name')
    ]
