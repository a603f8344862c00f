from django.conf import settings
from django.utils.module_loading import import_string

from .base import BaseRecordStore

DEFAULT_STORE_CLASS = 'catalog.stores.django_store.DjangoProductStore'


def build_store() -> BaseRecordStore:
    store_class = import_string(getattr(settings, 'SYNC_STORE_CLASS', DEFAULT_STORE_CLASS))
    return store_class()


__all__ = ['BaseRecordStore', 'build_store']
