import copy
import logging

import pytest
from perfect_hash_store import (DescriptorError, FullMap, Grid, IndexOutOfRange, Map,
                                NotInvertibleError, UnorderedPairs, const)


# -- always-full ---------------------------------------------------------------
def test_grid_scenario_full(cuboid):
    m = FullMap(cuboid, default_factory=str)
    m.insert((0, 3, 7), "Hello ")
    m.insert((4, 19, 13), "lovely")
    m.insert((9, 8, 29), "World!")
    assert m.get((0, 3, 7)) == "Hello "
    assert m.get((2, 15, 2)) == ""
    assert m.get((9, 8, 29)) == "World!"
    assert m.get((7, 4, 23)) == ""
    assert len(m) == 6000

def test_full_map_in_place_mutation(pairs10):
    m = FullMap(pairs10, default_factory=str)
    m.insert((3, 7), "Hello")
    m[(7, 3)] += " "
    m[(2, 9)] = "World!"
    assert m[(3, 7)] == "Hello "
    assert m[(9, 2)] == "World!"
    assert m[(6, 6)] == ""

def test_full_map_iteration():
    m = FullMap(UnorderedPairs(3), default_factory=int)
    m.insert((0, 1), 42)
    m.insert((1, 2), 123)
    m.insert((1, 1), 0xCAFE)
    m[(1, 0)] = 5
    assert list(m.values()) == [0, 5, 0xCAFE, 0, 123, 0]
    assert list(m.items()) == [((0, 0), 0), ((0, 1), 5), ((1, 1), 0xCAFE),
                               ((0, 2), 0), ((1, 2), 123), ((2, 2), 0)]

def test_full_map_overwrite_returns_prior(pairs10):
    m = FullMap(pairs10)
    assert m.insert((1, 1), "a") is None
    assert m.insert((1, 1), "b") == "a"

def test_full_map_remove_resets_to_default(pairs10):
    m = FullMap(pairs10, default_factory=list)
    m[(0, 1)].append(1)
    assert m.remove((1, 0)) == [1]
    assert m.get((0, 1)) == []
    assert (0, 1) in m

def test_from_element_copies_each_slot(pairs10):
    m = FullMap.from_element(pairs10, [1337])
    m.insert((3, 7), [42])
    assert m.get((7, 3)) == [42]
    assert m.get((5, 5)) == [1337]
    m.get((1, 1)).append(0)
    assert m.get((2, 2)) == [1337]

def test_from_initial():
    m = FullMap.from_initial(UnorderedPairs(2), ["a", "b", "c"])
    assert list(m.items()) == [((0, 0), "a"), ((0, 1), "b"), ((1, 1), "c")]
    with pytest.raises(DescriptorError):
        FullMap.from_initial(UnorderedPairs(2), ["a", "b"])

def test_full_map_copy(pairs10):
    m = FullMap(pairs10, default_factory=str)
    m[(3, 7)] = "Hello "
    other = m.copy()
    assert other == m
    assert other.get((7, 3)) == "Hello "
    other[(3, 7)] = "Bye"
    assert m[(3, 7)] == "Hello "
    assert other.default_factory is str


# -- defensive -----------------------------------------------------------------
def test_grid_scenario_defensive(cuboid):
    m = Map(cuboid)
    m.insert((0, 3, 7), "Hello ")
    m.insert((4, 19, 13), "lovely")
    m.insert((9, 8, 29), "World!")
    assert m.get((0, 3, 7)) == "Hello "
    assert m.get((2, 15, 2)) is None
    assert m.get((2, 15, 2), "") == ""
    assert m.get((9, 8, 29)) == "World!"
    assert m.get((7, 4, 23), "") == ""
    assert len(m) == 3 and m.capacity == 6000

def test_overwrite_returns_prior(pairs10):
    m = Map(pairs10)
    assert m.insert((2, 5), "v1") is None
    assert m.insert((5, 2), "v2") == "v1"
    assert len(m) == 1

def test_remove_clears_presence(pairs10):
    m = Map(pairs10)
    m.insert((4, 4), 0)
    assert m.contains((4, 4))
    assert m.remove((4, 4)) == 0
    assert not m.contains((4, 4))
    assert m.get((4, 4)) is None
    assert m.remove((4, 4)) is None
    assert m.is_empty()

def test_disjoint_keys_are_independent():
    pairs = UnorderedPairs(5)
    m = Map(pairs)
    m.insert((1, 3), "x")
    for i in range(pairs.size()):
        key = pairs.invert(i)
        if key != (1, 3):
            assert key not in m

def test_items_cover_occupied_slots_in_index_order(pairs10):
    m = Map(pairs10)
    m[(9, 2)] = "c"
    m[(7, 3)] = "b"
    m[(0, 0)] = "a"
    expected = [((0, 0), "a"), ((3, 7), "b"), ((2, 9), "c")]
    assert list(m.items()) == expected
    assert list(m.items()) == expected
    assert list(m) == [k for k, _ in expected]
    assert list(m.values()) == ["a", "b", "c"]
    assert dict(m.items()) == {(0, 0): "a", (3, 7): "b", (2, 9): "c"}

def test_mapping_protocol(pairs10):
    m = Map(pairs10)
    with pytest.raises(KeyError):
        m[(1, 2)]
    with pytest.raises(KeyError):
        del m[(1, 2)]
    assert m.pop((1, 2), "none") == "none"
    assert m.setdefault((1, 2), []) == []
    m[(2, 1)].append(7)
    assert m.pop((1, 2)) == [7]
    m.update([((0, 1), 1), ((0, 2), 2)])
    del m[(1, 0)]
    assert list(m.items()) == [((0, 2), 2)]
    m.clear()
    assert len(m) == 0

def test_none_is_a_storable_value(pairs10):
    m = Map(pairs10)
    m.insert((1, 1), None)
    assert (1, 1) in m
    assert m[(1, 1)] is None
    assert len(m) == 1

def test_copy_and_equality(pairs10):
    m = Map(pairs10)
    m[(3, 3)] = "x"
    other = copy.copy(m)
    assert other == m
    assert other.descriptor is not m.descriptor
    other.remove((3, 3))
    assert (3, 3) in m and len(m) == 1 and len(other) == 0
    assert other != m
    assert m != FullMap(pairs10)

def test_repr():
    m = Map(UnorderedPairs(3))
    m[(1, 0)] = 5
    assert repr(m) == "Map(UnorderedPairs(3), {(0, 1): 5})"

def test_non_invertible_descriptor(forward_only):
    m = Map(forward_only)
    m.insert(2, "two")
    assert m.get(2) == "two"
    assert list(m.values()) == ["two"]
    with pytest.raises(NotInvertibleError):
        list(m.items())
    assert repr(m) == "Map(ForwardOnly(8), {2: 'two'})"


# -- bounds checking -------------------------------------------------------------
@pytest.mark.parametrize("cls", [Map, FullMap])
def test_out_of_range_index_is_rejected(cls):
    m = cls(Grid(2, 2))
    with pytest.raises(IndexOutOfRange):
        m.insert((0, 2), "x")
    with pytest.raises(IndexError):
        m.get((-1, 0))

def test_unchecked_map_leaves_bounds_to_the_list(forward_only):
    m = Map(forward_only, checked=False)
    with pytest.raises(IndexError) as exc:
        m.insert(9, "x")
    assert not isinstance(exc.value, IndexOutOfRange)
    m.insert(-1, "wrapped")
    assert m.get(7) == "wrapped"

def test_grid_coordinates_never_alias_another_slot():
    m = Map(Grid(2, 2))
    m.insert((0, 1), "a")
    with pytest.raises(IndexOutOfRange):
        m.insert((2, 0), "b")
    with pytest.raises(IndexOutOfRange):
        m.insert((1, -1), "b")
    assert m.get((0, 1)) == "a"
    assert len(m) == 1

def test_grid_coordinates_checked_even_when_unchecked():
    m = Map(Grid(2, 2), checked=False)
    with pytest.raises(IndexOutOfRange):
        m.insert((2, 0), "b")

def test_checked_default_comes_from_config(monkeypatch):
    assert Map(Grid(2)).checked is const.CHECKED
    monkeypatch.setattr(const, "CHECKED", False)
    assert Map(Grid(2)).checked is False
    assert FullMap(Grid(2)).checked is False
    assert Map(Grid(2), checked=True).checked is True

def test_zero_size_domain():
    m = Map(UnorderedPairs(0))
    assert len(m) == 0 and list(m.items()) == []
    with pytest.raises(IndexOutOfRange):
        m.insert((0, 0), 1)
    assert len(FullMap(UnorderedPairs(0))) == 0

def test_construction_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="perfect_hash_store")
    Map(Grid(4, 4))
    assert "16 slots" in caplog.text
