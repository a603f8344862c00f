import logging
import uuid
from contextlib import contextmanager

from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)

LOCK_PREFIX = 'catalog:job-lock:'


@contextmanager
def job_lock(name, timeout=None):
    """Hold a named lock in the Django cache for the duration of the block.

    Yields ``True`` when the lock was acquired and ``False`` when another
    holder has it. The timeout only bounds a lock left behind by a killed
    worker; a normal exit always releases it.
    """
    if timeout is None:
        timeout = getattr(settings, 'SYNC_LOCK_TIMEOUT', 3600)

    key = LOCK_PREFIX + name
    token = uuid.uuid4().hex
    acquired = cache.add(key, token, timeout)
    if not acquired:
        logger.info("Lock %s is held elsewhere", name)
    try:
        yield acquired
    finally:
        if acquired and cache.get(key) == token:
            cache.delete(key)
