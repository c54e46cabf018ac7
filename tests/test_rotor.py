from datetime import date

from rotaplan.domain.models import DayRecord, RotationState
from rotaplan.rules.carry_over import carry_over, infer_state
from rotaplan.rules.rotor import advance


def test_weekday_on_duty_becomes_work_day():
    state = RotationState()
    assert advance(state, 3) is True
    assert state == RotationState(on_duty=False, rest_streak=0)


def test_weekend_on_duty_is_rest_and_keeps_counters():
    state = RotationState(on_duty=True, rest_streak=0)
    assert advance(state, 6) is False
    assert advance(state, 7) is False
    assert state == RotationState(on_duty=True, rest_streak=0)


def test_off_duty_counts_every_day_including_weekends():
    state = RotationState(on_duty=False, rest_streak=0)
    assert advance(state, 6) is False
    assert state.rest_streak == 1
    assert advance(state, 2) is False
    assert state == RotationState(on_duty=True, rest_streak=0)


def test_custom_rest_quota():
    state = RotationState(on_duty=False)
    for _ in range(2):
        advance(state, 1, rest_days=3)
    assert state == RotationState(on_duty=False, rest_streak=2)
    advance(state, 1, rest_days=3)
    assert state.on_duty is True


def _records(flags):
    return [
        DayRecord(day=i, date=date(2024, 4, i), is_work_day=flag, weekday=date(2024, 4, i).isoweekday())
        for i, flag in enumerate(flags, start=1)
    ]


def test_infer_state_after_work_day():
    assert infer_state(_records([False, True])) == RotationState(on_duty=False, rest_streak=0)


def test_infer_state_keeps_pending_streak():
    assert infer_state(_records([True, False])) == RotationState(on_duty=False, rest_streak=1)


def test_infer_state_after_two_rest_days():
    assert infer_state(_records([True, False, False])) == RotationState(on_duty=True, rest_streak=0)
    assert infer_state(_records([False] * 5)) == RotationState(on_duty=True, rest_streak=0)


def test_infer_state_with_larger_quota():
    assert infer_state(_records([True, False, False]), rest_days=3) == RotationState(False, 2)


def test_infer_state_empty():
    assert infer_state([]) == RotationState()


def test_carry_over_threads_a_copy():
    final = RotationState(on_duty=False, rest_streak=1)
    carried = carry_over(_records([True, False]), final)
    assert carried == final
    assert carried is not final
    assert carry_over(_records([True, False]), final, legacy=True) == RotationState(False, 1)
