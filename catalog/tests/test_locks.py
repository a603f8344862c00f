from django.core.cache import cache
from django.test import SimpleTestCase

from catalog.locks import LOCK_PREFIX, job_lock


class TestJobLock(SimpleTestCase):
    def tearDown(self):
        cache.clear()

    def test_acquires_free_lock(self):
        with job_lock('job') as acquired:
            self.assertTrue(acquired)
            self.assertIsNotNone(cache.get(LOCK_PREFIX + 'job'))

    def test_released_after_block(self):
        with job_lock('job'):
            pass
        self.assertIsNone(cache.get(LOCK_PREFIX + 'job'))

    def test_second_holder_rejected(self):
        with job_lock('job') as first:
            with job_lock('job') as second:
                self.assertTrue(first)
                self.assertFalse(second)
            # the rejected holder must not release someone else's lock
            self.assertIsNotNone(cache.get(LOCK_PREFIX + 'job'))

    def test_released_on_exception(self):
        with self.assertRaises(RuntimeError):
            with job_lock('job'):
                raise RuntimeError("boom")
        with job_lock('job') as acquired:
            self.assertTrue(acquired)

    def test_locks_are_per_name(self):
        with job_lock('a') as a, job_lock('b') as b:
            self.assertTrue(a)
            self.assertTrue(b)
