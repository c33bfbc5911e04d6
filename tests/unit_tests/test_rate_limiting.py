from src.securities.rate_limiting import FixedWindowRateLimiter


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_requests_within_limit_are_allowed_and_counted() -> None:
    limiter = FixedWindowRateLimiter(max_requests=3, window_seconds=60, clock=FakeClock())

    decisions = [limiter.consume(key="10.0.0.1") for _ in range(3)]

    assert all(decision.allowed for decision in decisions)
    assert [decision.remaining for decision in decisions] == [2, 1, 0]


def test_request_over_limit_is_rejected_until_window_resets() -> None:
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(max_requests=2, window_seconds=60, clock=clock)
    limiter.consume(key="client")
    limiter.consume(key="client")

    clock.now += 20
    rejected = limiter.consume(key="client")
    assert not rejected.allowed
    assert rejected.remaining == 0
    assert rejected.reset_seconds == 40

    clock.now += 40
    assert limiter.consume(key="client").allowed


def test_clients_are_limited_independently() -> None:
    limiter = FixedWindowRateLimiter(max_requests=1, window_seconds=60, clock=FakeClock())

    assert limiter.consume(key="a").allowed
    assert not limiter.consume(key="a").allowed
    assert limiter.consume(key="b").allowed

    limiter.reset()
    assert limiter.consume(key="a").allowed
