"""Subscription Toggle — tests for the pure two-state transition.

Tests cover:
    - existing subscription → UNSUBSCRIBE, absent → SUBSCRIBE
    - two transitions return to the starting state
    - toggle_response is the bare success envelope
"""

from tubehub.core.domain_types import ToggleAction
from tubehub.core.subscription_toggle import (
    TOGGLE_SUCCESS_MESSAGE,
    next_toggle_action,
    toggle_response,
)


def _apply(subscribed: bool) -> bool:
    return next_toggle_action(subscribed) == ToggleAction.SUBSCRIBE


def test_absent_subscription_subscribes():
    assert next_toggle_action(False) == ToggleAction.SUBSCRIBE


def test_existing_subscription_unsubscribes():
    assert next_toggle_action(True) == ToggleAction.UNSUBSCRIBE


def test_double_toggle_restores_state():
    for start in (True, False):
        first = _apply(start)
        second = _apply(first)
        assert first is not start
        assert second is start


def test_toggle_response_body():
    assert toggle_response() == {
        "status": "success",
        "message": "Subscription toggled successfully",
    }
    assert TOGGLE_SUCCESS_MESSAGE == "Subscription toggled successfully"


def test_toggle_response_is_a_fresh_dict():
    first = toggle_response()
    first["extra"] = True
    assert "extra" not in toggle_response()
