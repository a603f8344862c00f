import logging
from dataclasses import asdict, dataclass
from datetime import timedelta

from django.conf import settings
from django.utils import timezone

from catalog.exceptions import SyncCancelled
from catalog.policy import apply_sync_policy

DEFAULT_STALE_AFTER_MINUTES = 60


@dataclass(frozen=True)
class SyncResult:
    success: bool
    records_synced: int = 0
    error: str | None = None

    @classmethod
    def ok(cls, records_synced):
        return cls(success=True, records_synced=records_synced)

    @classmethod
    def failed(cls, error):
        return cls(success=False, records_synced=0, error=error)

    def as_dict(self):
        return asdict(self)


class SyncOrchestrator:
    """One fetch -> transform -> commit pass over stale products.

    Store failures are reported through the returned ``SyncResult`` and never
    raised; only ``SyncCancelled`` escapes.
    """

    def __init__(self, store, policy=apply_sync_policy, logger=None, clock=timezone.now,
                 stale_after=None):
        self.store = store
        self.policy = policy
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.clock = clock
        if stale_after is None:
            stale_after = timedelta(
                minutes=getattr(settings, 'SYNC_STALE_AFTER_MINUTES', DEFAULT_STALE_AFTER_MINUTES),
            )
        self.stale_after = stale_after

    def run(self, cancel_event=None) -> SyncResult:
        self.logger.info("Starting product sync")

        try:
            cutoff = self.clock() - self.stale_after
            products = self.store.fetch_stale(cutoff, cancel_event)
            self.logger.info("Retrieved %d products for sync", len(products))

            if not products:
                return SyncResult.ok(0)

            for product in products:
                if cancel_event is not None and cancel_event.is_set():
                    raise SyncCancelled("Sync cancelled mid-batch")
                self.policy(product, now=self.clock(), log=self.logger)
                self.store.update(product)

            self.store.commit(cancel_event)
        except SyncCancelled:
            self.logger.warning("Product sync cancelled")
            raise
        except Exception as exc:
            self.logger.exception("Product sync failed: %s", exc)
            return SyncResult.failed(str(exc))

        self.logger.info("Successfully synchronized %d products", len(products))
        return SyncResult.ok(len(products))
