from ridematch.domain.area_index import AreaIndex


def test_area_of_resolves_members():
    index = AreaIndex({"A": ["k1", "k2"], "B": ["k3"]})
    assert index.area_of("k1") == "A"
    assert index.area_of("k2") == "A"
    assert index.area_of("k3") == "B"
    assert index.area_of("nobody") is None


def test_first_declared_area_wins_for_duplicates():
    index = AreaIndex({"A": ["k1"], "B": ["k2", "k1"], "C": ["k1"]})
    assert index.area_of("k1") == "A"
    assert index.duplicates == [("k1", "A", "B"), ("k1", "A", "C")]


def test_index_is_independent_of_later_input_mutation():
    areas = {"A": ["k1"]}
    index = AreaIndex(areas)
    areas["A"].append("k2")
    areas["B"] = ["k1"]
    assert index.area_of("k2") is None
    assert index.area_of("k1") == "A"
    assert index.duplicates == []
