import pytest

from lrukit.information import Information, TimedInformation, now


def test_now_is_monotonic():
    first = now()
    second = now()
    assert second >= first


def test_information_stores_value_and_order():
    info = Information(5, order="handle")
    assert info.value == 5
    assert info.order == "handle"


def test_information_order_defaults_to_none():
    assert Information("x").order is None


def test_information_equality_ignores_order():
    assert Information(1, order="a") == Information(1, order="b")


def test_information_inequality_on_value():
    assert not (Information(1) == Information(2))
    assert Information(1) != Information(2)


def test_information_is_mutable():
    info = Information(1)
    info.value = 7
    info.order = 3
    assert info.value == 7
    assert info.order == 3


def test_information_compared_with_other_type():
    assert (Information(1) == 1) is False


def test_information_unhashable():
    with pytest.raises(TypeError):
        hash(Information(1))


def test_timed_information_uses_given_time():
    info = TimedInformation("v", insertion_time=10.0)
    assert info.insertion_time == 10.0
    assert info.value == "v"


def test_timed_information_defaults_to_now():
    before = now()
    info = TimedInformation("v")
    after = now()
    assert before <= info.insertion_time <= after


def test_timed_information_equal_requires_same_time():
    assert TimedInformation(1, 5.0) == TimedInformation(1, 5.0, order="x")
    assert TimedInformation(1, 5.0) != TimedInformation(1, 6.0)
    assert TimedInformation(1, 5.0) != TimedInformation(2, 5.0)


def test_timed_information_time_is_read_only():
    info = TimedInformation(1, 5.0)
    with pytest.raises(AttributeError):
        info.insertion_time = 6.0  # type: ignore[misc]
    assert info.insertion_time == 5.0


def test_timed_information_is_information():
    info = TimedInformation(1, 5.0, order="h")
    assert isinstance(info, Information)
    assert info.order == "h"