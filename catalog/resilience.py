import logging
import random
import time

from django.conf import settings
from django.db import InterfaceError, OperationalError

# Network, timeout and broken-connection failures; anything else is not worth retrying.
TRANSIENT_ERRORS = (TimeoutError, ConnectionError, OperationalError, InterfaceError)

MAX_RETRY_ATTEMPTS = 3
RETRY_BASE_DELAY = 2.0
JITTER_RANGE = (0.8, 1.2)


class RetryPolicy:
    """Retry a callable on transient exceptions with jittered exponential backoff.

    ``max_retry_attempts`` counts retries, so the callable runs at most
    ``max_retry_attempts + 1`` times. Return values are never inspected: a
    failed ``SyncResult`` is handed back as is.
    """

    def __init__(self, max_retry_attempts=MAX_RETRY_ATTEMPTS, retry_delay_seconds=RETRY_BASE_DELAY,
                 retry_on=TRANSIENT_ERRORS, jitter=True, sleep=time.sleep, logger=None):
        self.max_retry_attempts = max_retry_attempts
        self.retry_delay_seconds = retry_delay_seconds
        self.retry_on = retry_on
        self.jitter = jitter
        self.sleep = sleep
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, **kwargs):
        kwargs.setdefault(
            'max_retry_attempts', getattr(settings, 'SYNC_MAX_RETRY_ATTEMPTS', MAX_RETRY_ATTEMPTS),
        )
        kwargs.setdefault(
            'retry_delay_seconds', getattr(settings, 'SYNC_RETRY_DELAY_SECONDS', RETRY_BASE_DELAY),
        )
        return cls(**kwargs)

    def backoff(self, attempt):
        delay = self.retry_delay_seconds * (2 ** attempt)
        if self.jitter:
            delay *= random.uniform(*JITTER_RANGE)
        return delay

    def execute(self, func, *args, **kwargs):
        attempt = 0
        while True:
            try:
                return func(*args, **kwargs)
            except self.retry_on as exc:
                if attempt >= self.max_retry_attempts:
                    self.logger.error(
                        "Giving up after %d attempts: %s", attempt + 1, exc,
                    )
                    raise
                delay = self.backoff(attempt)
                attempt += 1
                self.logger.warning(
                    "Retry %d/%d after %.2fs due to %s",
                    attempt, self.max_retry_attempts, delay, exc,
                )
                self.sleep(delay)
