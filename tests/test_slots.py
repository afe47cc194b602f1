"""Tests for slot usage in allequal classes."""

import allequal as ae


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(ae.Iter(iter(())))
    assert _check_slots(ae.Seq(()))
    assert _check_slots(ae.get_config())
