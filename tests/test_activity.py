import threading

from client.activity import NetworkActivityIndicator


def test_counts_outstanding_requests():
    indicator = NetworkActivityIndicator()

    indicator.on_request_start()
    indicator.on_request_start()
    assert indicator.active_requests == 2
    assert indicator.is_active

    indicator.on_request_end()
    indicator.on_request_end()
    assert indicator.active_requests == 0
    assert not indicator.is_active


def test_notifies_only_on_transitions():
    changes: list[bool] = []
    indicator = NetworkActivityIndicator(on_change=changes.append)

    indicator.on_request_start()
    indicator.on_request_start()
    indicator.on_request_end()
    assert changes == [True]

    indicator.on_request_end()
    assert changes == [True, False]


def test_never_goes_negative():
    changes: list[bool] = []
    indicator = NetworkActivityIndicator(on_change=changes.append)

    indicator.on_request_end()

    assert indicator.active_requests == 0
    assert changes == []


def test_concurrent_updates():
    indicator = NetworkActivityIndicator()

    def worker() -> None:
        for _ in range(1000):
            indicator.on_request_start()
            indicator.on_request_end()

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert indicator.active_requests == 0


def test_overlapping_start_is_reported_after_idle():
    changes: list[bool] = []
    starter: list[threading.Thread] = []
    indicator = NetworkActivityIndicator()

    def on_change(is_active: bool) -> None:
        changes.append(is_active)
        if not is_active and not starter:
            # another request starts while the idle transition is being reported
            thread = threading.Thread(target=indicator.on_request_start)
            starter.append(thread)
            thread.start()
            thread.join(0.1)

    indicator.on_change = on_change
    indicator.on_request_start()
    indicator.on_request_end()
    starter[0].join(5)

    assert changes == [True, False, True]
    assert indicator.active_requests == 1
    assert indicator.is_active


def test_listener_may_read_the_indicator():
    seen: list[int] = []
    indicator = NetworkActivityIndicator()
    indicator.on_change = lambda is_active: seen.append(indicator.active_requests)

    indicator.on_request_start()
    indicator.on_request_end()

    assert seen == [1, 0]
