"""Tests for slot usage in pyoiter classes."""

import weakref

import pyoiter as po


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(po.Iter(()))
    assert _check_slots(po.Chain())
    assert _check_slots(po.Compress((), ()))
    assert _check_slots(po.Count())
    assert _check_slots(po.Cycle(()))
    assert _check_slots(po.Repeat(1))
    assert _check_slots(po.Starmap(pow, ()))
    assert _check_slots(po.TakeWhile(bool, ()))
    assert _check_slots(po.DropWhile(bool, ()))
    assert _check_slots(po.GroupBy(()))
    assert _check_slots(po.Islice((), 1))
    assert _check_slots(po.FilterFalse(None, ()))
    assert _check_slots(po.Accumulate(()))
    assert _check_slots(po.tee((), 1)[0])
    assert _check_slots(po.Product())
    assert _check_slots(po.Combinations((), 0))
    assert _check_slots(po.CombinationsWithReplacement((), 0))
    assert _check_slots(po.Permutations(()))
    assert _check_slots(po.ZipLongest())
    assert _check_slots(po.Pairwise(()))
    assert _check_slots(po.Some(42))
    assert _check_slots(po.NONE)
    assert _check_slots(po.get_config())


def test_grouper_supports_weakref() -> None:
    """Test groupers can be weakly referenced."""
    _, group = po.GroupBy("a").next().unwrap()
    assert weakref.ref(group)() is group
