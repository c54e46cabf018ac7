"""Rotation rule: work one weekday, then rest until the rest quota is met."""
from __future__ import annotations

from typing import AbstractSet

from rotaplan.domain.calendar import WEEKEND
from rotaplan.domain.models import RotationState

REST_DAYS = 2


def advance(
    state: RotationState,
    weekday: int,
    *,
    rest_days: int = REST_DAYS,
    weekend: AbstractSet[int] = WEEKEND,
) -> bool:
    """Apply the rule to one day, mutating *state*. Returns True for a work day.

    A weekend day met while on duty is rest and leaves the counters alone.
    Off duty, every day is rest, whatever the weekday, and counts towards
    the quota; reaching ``rest_days`` puts the state back on duty.
    """
    if state.on_duty:
        if weekday in weekend:
            return False
        state.on_duty = False
        state.rest_streak = 0
        return True

    state.rest_streak += 1
    if state.rest_streak >= rest_days:
        state.on_duty = True
        state.rest_streak = 0
    return False


__all__ = ["REST_DAYS", "advance"]
