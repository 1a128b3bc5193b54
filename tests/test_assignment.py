from ridematch.domain.area_index import AreaIndex
from ridematch.domain.assignment import (
    allocate_seats,
    fill_same_area,
    seat_own_kids,
)
from ridematch.domain.distance_table import DistanceTable
from ridematch.domain.models import AllocationContext, Driver

DEPOT = "D"


def allocate(present, drivers, areas, table):
    return allocate_seats(present, drivers, AreaIndex(areas), DistanceTable(table), DEPOT)


def test_kid_driver_scenario():
    areas = {"A": ["k1"], "B": ["k2"]}
    table = {"D": {"A": 2, "B": 3}, "A": {"B": 5}, "B": {"A": 5}}
    ctx = allocate(["k1", "k2"], [Driver("k1", 2, is_parent=False)], areas, table)
    result = ctx.to_result()
    assert result.ride_assignments == {"k1": ["k2"]}
    assert result.unassigned_people == []


def test_parent_own_kid_goes_first():
    areas = {"A": ["Ido", "Noa"]}
    ctx = allocate(["Ido", "Noa"], [Driver("Noa", 2, is_parent=True)], areas, {})
    assert ctx.assignment["Noa"] == ["Noa", "Ido"]
    assert not ctx.remaining


def test_parent_without_seats_does_not_take_own_kid():
    areas = {"A": ["Noa"]}
    drivers = [Driver("Noa", 0, is_parent=True), Driver("Gil", 1, is_parent=True)]
    ctx = AllocationContext.start(["Noa"], drivers)
    seat_own_kids(ctx)
    assert ctx.assignment["Noa"] == []
    assert ctx.remaining == {"Noa"}
    ctx = allocate(["Noa"], drivers, {**areas, "G": ["Gil"]}, {"D": {"A": 1}})
    assert ctx.assignment == {"Noa": [], "Gil": ["Noa"]}


def test_kid_driver_never_rides_even_if_listed_after():
    areas = {"A": ["mom", "Kid", "x"]}
    drivers = [Driver("mom", 3, is_parent=True), Driver("Kid", 2, is_parent=False)]
    ctx = allocate(["Kid", "x"], drivers, areas, {"D": {"A": 1}})
    assert ctx.assignment == {"mom": ["x"], "Kid": []}
    assert ctx.to_result().unassigned_people == []


def test_same_area_fill_uses_input_order_and_capacity():
    areas = {"A": ["d", "k1", "k2", "k3"], "B": ["b1"]}
    ctx = AllocationContext.start(["b1", "k3", "k1", "k2"], [Driver("d", 2)])
    seat_own_kids(ctx)
    fill_same_area(ctx, AreaIndex(areas))
    assert ctx.assignment["d"] == ["k3", "k1"]
    assert ctx.remaining_in_order() == ["b1", "k2"]


def test_same_area_pass_runs_for_every_driver_before_nearest_neighbor():
    areas = {"X": ["d1"], "Y": ["d2", "y1"]}
    drivers = [Driver("d1", 1), Driver("d2", 1)]
    ctx = allocate(["y1"], drivers, areas, {"D": {"Y": 1}})
    assert ctx.assignment == {"d1": [], "d2": ["y1"]}


def test_nearest_neighbor_walks_from_last_pickup():
    areas = {"A": ["a"], "B": ["b"], "C": ["c"]}
    table = {"D": {"A": 1, "B": 2, "C": 5}, "A": {"B": 10, "C": 1}}
    ctx = allocate(["b", "c", "a"], [Driver("solo", 2)], areas, table)
    assert ctx.assignment["solo"] == ["a", "c"]
    assert ctx.to_result().unassigned_people == ["b"]


def test_nearest_neighbor_ties_go_to_earliest_present_kid():
    areas = {"A": ["a1", "a2"], "B": ["b"]}
    table = {"D": {"A": 4, "B": 4}}
    ctx = allocate(["b", "a2", "a1"], [Driver("solo", 1)], areas, table)
    assert ctx.assignment["solo"] == ["b"]
    assert ctx.to_result().unassigned_people == ["a2", "a1"]


def test_unreachable_kids_stay_unassigned():
    areas = {"A": ["a"], "Z": ["z"]}
    table = {"D": {"A": 1}}
    ctx = allocate(["ghost", "z", "a"], [Driver("solo", 3)], areas, table)
    assert ctx.assignment["solo"] == ["a"]
    assert ctx.to_result().unassigned_people == ["ghost", "z"]


def test_duplicate_present_names_are_counted_once():
    areas = {"A": ["a"]}
    ctx = allocate(["a", "a"], [Driver("solo", 2)], areas, {"D": {"A": 1}})
    assert ctx.assignment["solo"] == ["a"]
