import logging

from celery import shared_task

from catalog.locks import job_lock
from catalog.resilience import RetryPolicy
from catalog.stores import build_store
from catalog.sync import SyncOrchestrator

logger = logging.getLogger(__name__)

SYNC_JOB_NAME = 'sync-products'


def run_sync_once(cancel_event=None):
    store = build_store()
    return SyncOrchestrator(store).run(cancel_event)


@shared_task(bind=True)
def sync_products(self):
    with job_lock(SYNC_JOB_NAME) as acquired:
        if not acquired:
            logger.info("Product sync already running, skipping this tick")
            return None

        logger.info("Product sync job %s started", self.request.id)
        try:
            result = RetryPolicy.from_settings().execute(run_sync_once)
        except Exception as exc:
            logger.error("Product sync job failed: %s", exc)
            raise

    if result.success:
        logger.info("Product sync job completed, %d products synced", result.records_synced)
    else:
        logger.warning("Product sync job completed with errors: %s", result.error)
    return result.as_dict()
