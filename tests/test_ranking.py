import pytest

from buildings_api.query import ranking
from conftest import make_building


def _ids(buildings):
    return [b.id for b in buildings]


def test_sort_by_name_is_case_insensitive_with_id_tie_break(buildings):
    ordered = ranking.sort_buildings(buildings, "name")

    assert _ids(ordered) == ["b01", "b05", "b02", "b03", "b04", "b06", "b07", "b08", "b09", "b10", "b11"]


def test_sort_by_city_groups_case_variants(buildings):
    ordered = ranking.sort_buildings(buildings, "city")

    assert _ids(ordered) == ["b10", "b02", "b08", "b05", "b04", "b01", "b03", "b06", "b09", "b11", "b07"]


def test_sort_by_construction_year_is_numeric(buildings):
    ordered = ranking.sort_buildings(buildings, "constructionYear")

    assert _ids(ordered) == ["b09", "b04", "b07", "b02", "b06", "b01", "b03", "b11", "b08", "b05", "b10"]


def test_sort_by_dpe_follows_scale_and_puts_unknown_grades_last(buildings):
    ordered = ranking.sort_buildings(buildings, "dpe")

    assert [b.dpe for b in ordered] == ["A", "A", "B", "B", "C", "D", "D", "E", "F", "G", "X"]
    assert _ids(ordered)[:4] == ["b01", "b10", "b03", "b08"]


def test_default_sort_is_by_id(buildings):
    ordered = ranking.sort_buildings(list(reversed(buildings)))

    assert _ids(ordered) == sorted(b.id for b in buildings)


def test_rating_sort_uses_scale_position_not_label():
    scale = ranking.RatingScale(["Z", "Y", "X"])
    records = [
        make_building("1", dpe="X"),
        make_building("2", dpe="Z"),
        make_building("3", dpe="Y"),
    ]

    ordered = ranking.sort_buildings(records, "dpe", scale)

    assert [b.dpe for b in ordered] == ["Z", "Y", "X"]
    assert [b.dpe for b in ordered] != sorted(b.dpe for b in records)


def test_compare_ties_break_on_id():
    a = make_building("a", name="Same")
    b = make_building("b", name="same")

    assert ranking.compare(a, b, "name") == -1
    assert ranking.compare(b, a, "name") == 1
    assert ranking.compare(a, a, "name") == 0


def test_compare_by_year_is_numeric_not_textual():
    older = make_building("z", construction_year=999)
    newer = make_building("a", construction_year=1000)

    assert ranking.compare(older, newer, "constructionYear") == -1


def test_sort_value_matches_cursor_representation():
    building = make_building("b1", name="Tour First", city="Courbevoie", dpe="C", construction_year=1974)

    assert ranking.sort_value(building, "name") == "tour first"
    assert ranking.sort_value(building, "city") == "courbevoie"
    assert ranking.sort_value(building, "dpe") == "C"
    assert ranking.sort_value(building, "constructionYear") == 1974
    assert ranking.sort_value(building, "id") == "b1"


def test_primary_rank_rejects_mismatched_types():
    assert ranking.primary_rank("1990", "constructionYear") is None
    assert ranking.primary_rank(True, "constructionYear") is None
    assert ranking.primary_rank(3, "name") is None
    assert ranking.primary_rank("B", "dpe") == 1
    assert ranking.primary_rank("Q", "dpe") == len(ranking.DPE_SCALE)


def test_rating_scale_rejects_bad_definitions():
    with pytest.raises(ValueError):
        ranking.RatingScale([])
    with pytest.raises(ValueError):
        ranking.RatingScale(["A", "A"])

    assert "C" in ranking.DPE_SCALE
    assert "H" not in ranking.DPE_SCALE
    assert ranking.DPE_SCALE.ordinal("G") == 6
    assert ranking.DPE_SCALE.ordinal("H") is None
