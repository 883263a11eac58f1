import threading

from notionify.rate_limiter import FixedWindowRateLimiter, RateLimitConfig


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_limiter(max_requests: int = 10, window: float = 60.0):
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(
        RateLimitConfig(window_seconds=window, max_requests=max_requests), clock=clock
    )
    return limiter, clock


def test_tenth_request_allowed_eleventh_denied() -> None:
    limiter, _ = make_limiter()

    decisions = [limiter.check("10.0.0.1") for _ in range(11)]

    assert all(decision.allowed for decision in decisions[:10])
    assert decisions[10].allowed is False
    assert decisions[10].error == "Rate limit exceeded. Please try again later."


def test_window_expiry_resets_count() -> None:
    limiter, clock = make_limiter(max_requests=2)
    limiter.check("client")
    limiter.check("client")
    assert not limiter.check("client").allowed

    clock.advance(60.001)

    assert limiter.check("client").allowed
    assert limiter.check("client").allowed
    assert not limiter.check("client").allowed


def test_window_boundary_is_inclusive() -> None:
    limiter, clock = make_limiter(max_requests=1)
    limiter.check("client")

    clock.advance(60.0)

    assert not limiter.check("client").allowed


def test_clients_are_counted_independently() -> None:
    limiter, _ = make_limiter(max_requests=1)

    assert limiter.check("a").allowed
    assert limiter.check("b").allowed
    assert not limiter.check("a").allowed
    assert len(limiter) == 2


def test_custom_message_is_returned() -> None:
    limiter = FixedWindowRateLimiter(
        RateLimitConfig(window_seconds=60, max_requests=0, message="Save rate limit exceeded.")
    )

    limiter.check("x")
    decision = limiter.check("x")

    assert decision.error == "Save rate limit exceeded."


def test_reset_clears_state() -> None:
    limiter, _ = make_limiter(max_requests=1)
    limiter.check("a")

    limiter.reset()

    assert limiter.check("a").allowed


def test_concurrent_checks_never_exceed_limit() -> None:
    limiter, _ = make_limiter(max_requests=25)
    results: list[bool] = []
    results_lock = threading.Lock()

    def worker() -> None:
        for _ in range(10):
            allowed = limiter.check("shared").allowed
            with results_lock:
                results.append(allowed)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results.count(True) == 25
    assert len(results) == 80
