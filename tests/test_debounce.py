from weather_lookup.api.debounce import Debouncer


def test_fires_once_after_quiet_period():
    d: Debouncer[str] = Debouncer(0.3)
    d.push("Pa", 0.0)

    assert d.poll(0.1) == (False, None)
    assert d.poll(0.3) == (True, "Pa")
    # vain yksi laukaisu per purske
    assert d.poll(5.0) == (False, None)


def test_burst_is_coalesced_into_last_value():
    d: Debouncer[str] = Debouncer(0.3)
    d.push("Pa", 0.0)
    d.push("Par", 0.2)
    d.push("Pari", 0.4)

    assert d.poll(0.6) == (False, None)
    assert d.poll(0.8) == (True, "Pari")


def test_cancel_drops_pending_value():
    d: Debouncer[str] = Debouncer(0.3)
    d.push("Pa", 0.0)
    d.cancel()

    assert d.poll(1.0) == (False, None)
