import pytest

from creator_wheel.leaders import (
    INFINITY_LEADER, LEADERS, leader_for_day, leader_index, leader_name_for_day, monthly_leader,
)


@pytest.mark.parametrize("day,index", [
    (1, 0), (91, 0), (92, 1), (182, 1), (183, 2), (273, 2), (274, 3), (364, 3), (366, 3),
])
def test_quadrant_boundaries(day, index):
    assert leader_index(day) == index


def test_plateau_lengths():
    lengths = [0, 0, 0, 0]
    for day in range(1, 367):
        lengths[leader_index(day)] += 1
    assert lengths == [91, 91, 91, 93]


def test_leader_records():
    assert leader_for_day(1).name == "Malki'el"
    assert leader_for_day(100).representative == "Kohath"
    assert leader_for_day(200) is LEADERS[2]
    assert leader_for_day(300).color == "#3b82f6"


def test_out_of_range_days_clamp():
    assert leader_index(0) == 0
    assert leader_index(9999) == 3
    assert leader_index(None) == 0


def test_monthly_leader():
    assert monthly_leader(1)["tribe"] == "Yehudah"
    assert monthly_leader(12)["name"] == "Ki'el"
    assert monthly_leader(13)["month"] == 12
    assert monthly_leader(0)["month"] == 1


def test_monthly_leader_returns_copy():
    monthly_leader(1)["name"] = "changed"
    assert monthly_leader(1)["name"] == "Adnar'el"


def test_days_out_of_time_have_their_own_leader():
    assert leader_name_for_day(364) == "Nar'el"
    assert leader_name_for_day(365) == INFINITY_LEADER["name"]
    assert leader_name_for_day(366) == "Asfa'el"
