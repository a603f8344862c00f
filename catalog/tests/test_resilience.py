from unittest.mock import MagicMock, patch

from django.db import OperationalError
from django.test import SimpleTestCase, override_settings

from catalog.resilience import RetryPolicy
from catalog.sync import SyncResult


def _policy(**kwargs):
    kwargs.setdefault('sleep', MagicMock())
    kwargs.setdefault('jitter', False)
    return RetryPolicy(**kwargs)


class TestRetryPolicy(SimpleTestCase):
    def test_success_first_try(self):
        policy = _policy()
        func = MagicMock(return_value=SyncResult.ok(3))

        self.assertEqual(policy.execute(func), SyncResult.ok(3))
        func.assert_called_once()
        policy.sleep.assert_not_called()

    def test_retries_transient_then_succeeds(self):
        policy = _policy()
        func = MagicMock(side_effect=[TimeoutError("slow"), OperationalError("gone"), SyncResult.ok(1)])

        self.assertEqual(policy.execute(func), SyncResult.ok(1))
        self.assertEqual(func.call_count, 3)

    def test_exponential_backoff_delays(self):
        policy = _policy(retry_delay_seconds=2.0)
        func = MagicMock(side_effect=[ConnectionError(), ConnectionError(), ConnectionError(), SyncResult.ok(0)])

        policy.execute(func)

        delays = [c.args[0] for c in policy.sleep.call_args_list]
        self.assertEqual(delays, [2.0, 4.0, 8.0])

    def test_exhaustion_reraises_last_error(self):
        policy = _policy(max_retry_attempts=3)
        func = MagicMock(side_effect=TimeoutError("still down"))

        with self.assertRaisesRegex(TimeoutError, "still down"):
            policy.execute(func)

        self.assertEqual(func.call_count, 4)
        self.assertEqual(policy.sleep.call_count, 3)

    def test_non_transient_error_not_retried(self):
        policy = _policy()
        func = MagicMock(side_effect=ValueError("bug"))

        with self.assertRaises(ValueError):
            policy.execute(func)

        func.assert_called_once()
        policy.sleep.assert_not_called()

    def test_failed_result_not_retried(self):
        policy = _policy()
        func = MagicMock(return_value=SyncResult.failed("store down"))

        result = policy.execute(func)

        self.assertFalse(result.success)
        func.assert_called_once()

    def test_zero_retries(self):
        policy = _policy(max_retry_attempts=0)
        func = MagicMock(side_effect=TimeoutError())

        with self.assertRaises(TimeoutError):
            policy.execute(func)
        func.assert_called_once()

    def test_passes_arguments_through(self):
        func = MagicMock(return_value=SyncResult.ok(0))
        _policy().execute(func, 'a', key='b')
        func.assert_called_once_with('a', key='b')

    def test_jitter_stays_in_range(self):
        policy = RetryPolicy(retry_delay_seconds=2.0, jitter=True)
        with patch('catalog.resilience.random.uniform', return_value=1.2) as uniform:
            self.assertAlmostEqual(policy.backoff(1), 4.8)
        uniform.assert_called_once_with(0.8, 1.2)

    def test_retry_logged_as_warning(self):
        log = MagicMock()
        policy = _policy(logger=log)
        policy.execute(MagicMock(side_effect=[TimeoutError("t"), SyncResult.ok(0)]))
        log.warning.assert_called_once()

    @override_settings(SYNC_MAX_RETRY_ATTEMPTS=5, SYNC_RETRY_DELAY_SECONDS=0.5)
    def test_from_settings(self):
        policy = RetryPolicy.from_settings()
        self.assertEqual(policy.max_retry_attempts, 5)
        self.assertEqual(policy.retry_delay_seconds, 0.5)
