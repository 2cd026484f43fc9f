import pytest

from weather_lookup.api.ui_state import InvalidTransition, UIState, UIStateMachine


def test_starts_initial():
    assert UIStateMachine().state == UIState.INITIAL


@pytest.mark.parametrize(
    "method,expected",
    [
        ("show_weather", UIState.WEATHER),
        ("show_error", UIState.ERROR),
        ("show_no_results", UIState.NO_RESULTS),
    ],
)
def test_result_states_from_loading(method, expected):
    m = UIStateMachine()
    m.start_loading()
    getattr(m, method)()
    assert m.state == expected


@pytest.mark.parametrize("method", ["show_weather", "show_error", "show_no_results"])
def test_result_state_requires_loading(method):
    m = UIStateMachine()
    with pytest.raises(InvalidTransition):
        getattr(m, method)()


def test_new_search_allowed_from_any_state():
    m = UIStateMachine()
    for finish in (m.show_weather, m.show_error, m.show_no_results):
        m.start_loading()
        finish()
        m.start_loading()
        assert m.state == UIState.LOADING
