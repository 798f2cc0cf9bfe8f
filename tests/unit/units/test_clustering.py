"""
Tests for unit facet clustering.
"""

from catalog_search.units import cluster_units
from catalog_search.units.clustering import group_units


def test_equivalent_units_cluster_together():
    facets = cluster_units([("16 OZ", 2), ("1 LB", 3)])
    assert len(facets) == 1
    assert facets[0].value == "16 OZ/1 LB"
    assert facets[0].label == "1 LB"
    assert facets[0].count == 5


def test_different_measurements_never_cluster():
    groups = group_units([("16 OZ", 2), ("1 LT", 2), ("473 ML", 2)])
    assert [g.labels for g in groups] == [["16 OZ"], ["1 LT"], ["473 ML"]]


def test_singleton_clusters_dropped():
    """Test that a cluster with a total count of one is noise."""
    facets = cluster_units([("1 LT", 1), ("2 LT", 4), ("3 LT", 1)])
    assert [f.value for f in facets] == ["2 LT"]


def test_order_by_count_then_first_seen():
    facets = cluster_units([("1 LT", 2), ("2 LT", 5), ("3 LT", 2), ("1 GL", 5)])
    assert [f.label for f in facets] == ["2 LT", "1 GL", "1 LT", "3 LT"]


def test_label_counts_merge_equal_displays():
    """Test that raw strings with the same display sum their counts."""
    facets = cluster_units([("1 lt", 1), ("LT", 1), ("1000 ML", 1)])
    assert facets[0].value == "1 LT/1000 ML"
    assert facets[0].label == "1 LT"
    assert facets[0].count == 3


def test_label_ties_pick_first_seen():
    facets = cluster_units([("1000 ML", 2), ("1 LT", 2)])
    assert facets[0].label == "1000 ML"


def test_tolerance_is_measured_from_seed():
    """Test that greedy assignment compares against the first member's base."""
    groups = group_units([("100 GR", 1), ("100.4 GR", 1), ("100.8 GR", 1)])
    assert [g.labels for g in groups] == [["100 GR", "100.4 GR"], ["100.8 GR"]]


def test_unparseable_rows_skipped():
    facets = cluster_units([("caja", 10), (None, 3), ("1 LT", "x"), ("1 LT", "2")])
    assert [f.to_dict() for f in facets] == [{"label": "1 LT", "value": "1 LT", "count": 2}]


def test_empty_input():
    assert cluster_units([]) == []
