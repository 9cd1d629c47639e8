from tetrix.app import EventTimer


def test_not_triggered_before_interval():
    timer = EventTimer(0.2)
    assert timer.triggered(0.1) is False


def test_triggered_when_interval_reached():
    timer = EventTimer(0.2)
    assert timer.triggered(0.2) is True
    assert timer.last == 0.2


def test_resets_after_firing():
    timer = EventTimer(0.2)
    assert timer.triggered(0.25) is True
    assert timer.triggered(0.3) is False
    assert timer.triggered(0.45) is True


def test_failed_check_keeps_last_time():
    timer = EventTimer(1.0, last=5.0)
    assert timer.triggered(5.5) is False
    assert timer.last == 5.0
    assert timer.triggered(6.0) is True