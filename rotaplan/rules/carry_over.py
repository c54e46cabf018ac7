"""Handing the rotation state over from one month to the next."""
from __future__ import annotations

from typing import Sequence

from rotaplan.domain.models import DayRecord, RotationState
from rotaplan.rules.rotor import REST_DAYS


def thread_state(final_state: RotationState) -> RotationState:
    return final_state.copy()


def infer_state(days: Sequence[DayRecord], *, rest_days: int = REST_DAYS) -> RotationState:
    """Rebuild the state from the month's tail, as older schedules did.

    The trailing run of rest days becomes the pending streak; once it reaches
    ``rest_days`` the state is back on duty and the streak starts over.
    """
    if not days:
        return RotationState()
    if days[-1].is_work_day:
        return RotationState(on_duty=False, rest_streak=0)

    trailing_rest = 0
    for record in reversed(days):
        if record.is_work_day:
            break
        trailing_rest += 1
    if trailing_rest >= rest_days:
        return RotationState(on_duty=True, rest_streak=0)
    return RotationState(on_duty=False, rest_streak=trailing_rest)


def carry_over(
    days: Sequence[DayRecord],
    final_state: RotationState,
    *,
    legacy: bool = False,
    rest_days: int = REST_DAYS,
) -> RotationState:
    if legacy:
        return infer_state(days, rest_days=rest_days)
    return thread_state(final_state)


__all__ = ["carry_over", "infer_state", "thread_state"]
