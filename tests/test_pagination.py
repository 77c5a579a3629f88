import pytest

from cobalt.errors import ConfigError
from cobalt.pagination import DateIndex, Include, Pagination, SortOrder


def test_empty_has_nothing_set():
    empty = Pagination.empty()
    assert empty == Pagination()
    assert empty.to_dict() == {}


def test_with_defaults():
    defaults = Pagination.with_defaults()
    assert defaults.include is Include.NONE
    assert defaults.per_page == 10
    assert defaults.permalink_suffix == "{{num}}/"
    assert defaults.order is SortOrder.DESC
    assert defaults.sort_by == ["published_date"]
    assert defaults.date_index == [DateIndex.YEAR, DateIndex.MONTH]


def test_merge_prefers_self():
    merged = Pagination(per_page=5).merge(Pagination.with_defaults())
    assert merged.per_page == 5
    assert merged.include is Include.NONE
    assert merged.sort_by == Pagination.with_defaults().sort_by


def test_merge_into_empty_is_other():
    defaults = Pagination.with_defaults()
    assert Pagination.empty().merge(defaults) == defaults
    assert defaults.merge(Pagination.empty()) == defaults


def test_merge_does_not_share_lists():
    defaults = Pagination.with_defaults()
    merged = Pagination.empty().merge(defaults)
    merged.sort_by.append("title")
    assert defaults.sort_by == ["published_date"]


def test_round_trip_defaults():
    defaults = Pagination.with_defaults()
    assert Pagination.from_dict(defaults.to_dict()) == defaults


def test_from_dict_values():
    pagination = Pagination.from_dict(
        {"per_page": 5, "order": "Asc", "include": "Tags", "date_index": ["Day"]}
    )
    assert pagination.per_page == 5
    assert pagination.order is SortOrder.ASC
    assert pagination.include is Include.TAGS
    assert pagination.date_index == [DateIndex.DAY]


def test_unknown_variant_maps_to_unknown():
    pagination = Pagination.from_dict({"order": "Sideways", "include": "Everything"})
    assert pagination.order is SortOrder.UNKNOWN
    assert pagination.include is Include.UNKNOWN


def test_from_none_is_empty():
    assert Pagination.from_dict(None) == Pagination.empty()


@pytest.mark.parametrize(
    "data",
    [
        {"per_page": "ten"},
        {"per_page": True},
        {"per_page": 2**40},
        {"order": 3},
        {"sort_by": "title"},
        {"permalink_suffix": 1},
    ],
)
def test_from_dict_rejects_bad_values(data):
    with pytest.raises(ConfigError):
        Pagination.from_dict(data)


def test_from_dict_rejects_non_mapping():
    with pytest.raises(ConfigError):
        Pagination.from_dict([1, 2])


def test_date_index_keeps_order_and_sorts_by_granularity():
    pagination = Pagination.from_dict({"date_index": ["Minute", "Month", "Year"]})
    assert pagination.date_index == [DateIndex.MINUTE, DateIndex.MONTH, DateIndex.YEAR]
    assert sorted(pagination.date_index) == [
        DateIndex.YEAR,
        DateIndex.MONTH,
        DateIndex.MINUTE,
    ]