import logging

from django.db import connections, transaction
from django.db.models import Q

from catalog.exceptions import SyncCancelled
from catalog.models import Product

from .base import BaseRecordStore

logger = logging.getLogger(__name__)

SYNC_FIELDS = ['price', 'description', 'updated_at']


def _check_cancelled(cancel_event, step):
    if cancel_event is not None and cancel_event.is_set():
        raise SyncCancelled(f"Sync cancelled before {step}")


class DjangoProductStore(BaseRecordStore):
    def __init__(self, using='default'):
        self.using = using
        self._staged = {}
        # Connection failures surface here, before any sync pass starts.
        connections[using].ensure_connection()

    def fetch_stale(self, older_than, cancel_event=None) -> list:
        _check_cancelled(cancel_event, 'fetch')
        queryset = Product.objects.using(self.using).filter(
            Q(updated_at__isnull=True) | Q(updated_at__lt=older_than)
        )
        return list(queryset)

    def update(self, product) -> None:
        self._staged[product.pk] = product

    def commit(self, cancel_event=None) -> int:
        _check_cancelled(cancel_event, 'commit')
        if not self._staged:
            return 0

        products = list(self._staged.values())
        with transaction.atomic(using=self.using):
            written = Product.objects.using(self.using).bulk_update(products, SYNC_FIELDS)

        self._staged.clear()
        logger.debug("Committed %d staged products", written)
        return written
