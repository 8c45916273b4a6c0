"""Subscription Toggle — explicit two-state transition for subscribe/unsubscribe.

Invariants:
    - next_toggle_action is PURE: existence in, action out, no re-reads
    - exists → UNSUBSCRIBE, absent → SUBSCRIBE (applying twice restores the state)
    - Shell performs the single read and the single write around this decision
    - The success body is identical for both directions
"""

from tubehub.core.domain_types import ToggleAction

TOGGLE_SUCCESS_MESSAGE: str = "Subscription toggled successfully"


def next_toggle_action(currently_subscribed: bool) -> ToggleAction:
    """Decide what a toggle does given the current subscription state."""
    if currently_subscribed:
        return ToggleAction.UNSUBSCRIBE
    return ToggleAction.SUBSCRIBE


def toggle_response() -> dict:
    return {"status": "success", "message": TOGGLE_SUCCESS_MESSAGE}
