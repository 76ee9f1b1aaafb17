"""Way lifecycle - which list a way sits in while the user builds a boundary.

Uses python-statemachine with the Way as model: the machine writes the
current state value into way.state.

States:
    UNAVAILABLE: Loaded from a click but not yet offered to the user
    AVAILABLE: Offered to the user, undecided
    ACCEPTED: Committed to the boundary (only these take part in assembly)
    REJECTED: Discarded by the user

Transitions:
    UNAVAILABLE -> AVAILABLE: make_available
    ACCEPTED/REJECTED -> AVAILABLE: make_available (dragged back to the list)
    AVAILABLE/REJECTED -> ACCEPTED: accept
    AVAILABLE/ACCEPTED -> REJECTED: reject

There is no way back to UNAVAILABLE.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from statemachine import State, StateMachine

if TYPE_CHECKING:
    from boundary_foundry.model.way import Way

logger = logging.getLogger(__name__)


class WayState:
    """State values stored in Way.state."""

    UNAVAILABLE = "unavailable"
    AVAILABLE = "available"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    ALL = (UNAVAILABLE, AVAILABLE, ACCEPTED, REJECTED)


# Event that moves a way into each target state
EVENT_FOR_TARGET = {
    WayState.AVAILABLE: "make_available",
    WayState.ACCEPTED: "accept",
    WayState.REJECTED: "reject",
}


class WayLifecycle(StateMachine):
    """State machine guarding the legal moves of a way between lists."""

    unavailable = State("Unavailable", value=WayState.UNAVAILABLE, initial=True)
    available = State("Available", value=WayState.AVAILABLE)
    accepted = State("Accepted", value=WayState.ACCEPTED)
    rejected = State("Rejected", value=WayState.REJECTED)

    make_available = unavailable.to(available) | accepted.to(available) | rejected.to(available)
    accept = available.to(accepted) | rejected.to(accepted)
    reject = available.to(rejected) | accepted.to(rejected)

    def __init__(self, way: Way) -> None:
        super().__init__(model=way, start_value=way.state)

    @property
    def way(self) -> Way:
        """Alias for model."""
        return self.model

    def after_transition(self, event: str, source: State, target: State) -> None:
        logger.info(f"[WAY {self.way.id}] {source.name} --({event})--> {target.name}")
