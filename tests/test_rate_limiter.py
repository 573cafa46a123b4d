"""Tests for the per-client upload rate limiter."""

from cv_import.core.rate_limiter import UploadRateLimiter


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_allows_up_to_limit():
    limiter = UploadRateLimiter(max_requests=2, window_seconds=60, clock=FakeClock())
    assert limiter.allow("10.0.0.1")
    assert limiter.allow("10.0.0.1")
    assert not limiter.allow("10.0.0.1")


def test_clients_are_independent():
    limiter = UploadRateLimiter(max_requests=1, window_seconds=60, clock=FakeClock())
    assert limiter.allow("a")
    assert limiter.allow("b")
    assert not limiter.allow("a")


def test_window_expiry_and_eviction():
    clock = FakeClock()
    limiter = UploadRateLimiter(max_requests=1, window_seconds=60, clock=clock)
    assert limiter.allow("a")
    assert not limiter.allow("a")

    clock.now += 61
    assert limiter.allow("b")
    # "a" had no hits left inside the window and was dropped
    assert limiter.tracked_clients() == 1
    assert limiter.allow("a")
