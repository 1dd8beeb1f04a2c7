import pytest

from chronaxis.utility import (
    DEFAULT_CATALOG,
    MAJOR_INTERVALS,
    MINOR_INTERVALS,
    MINOR_TO_MAJOR,
    CatalogError,
    IntervalCatalog,
    TimeInterval,
    TimeUnit,
    validate_catalog,
)

UNIT_ORDER = list(TimeUnit)


def replace_minor(index: int, interval: TimeInterval) -> IntervalCatalog:
    minor_intervals = list(MINOR_INTERVALS)
    minor_intervals[index] = interval
    return DEFAULT_CATALOG._replace(minor_intervals=tuple(minor_intervals))


def test_default_catalog_shape():
    assert len(MINOR_INTERVALS) == 24
    assert len(MAJOR_INTERVALS) == 4
    assert MINOR_TO_MAJOR == (14, 16, 20, 1000000)
    validate_catalog(DEFAULT_CATALOG)


def test_minor_intervals_go_from_fine_to_coarse():
    rankings = [
        (UNIT_ORDER.index(interval.unit), interval.step) for interval in MINOR_INTERVALS
    ]
    assert rankings == sorted(rankings)


def test_major_intervals_are_days_months_years_then_blank():
    assert [i.unit for i in MAJOR_INTERVALS] == [
        TimeUnit.DAY,
        TimeUnit.MONTH,
        TimeUnit.YEAR,
        TimeUnit.YEAR,
    ]
    assert MAJOR_INTERVALS[-1].format_string == ""


def test_day_intervals_offer_a_shorter_format():
    day_intervals = [i for i in MINOR_INTERVALS if i.unit == TimeUnit.DAY]
    assert [i.format_string for i in day_intervals] == ["%a %e", "%e"]


def test_non_positive_steps_are_rejected():
    catalog = replace_minor(3, TimeInterval(TimeUnit.SECOND, 0, "%S"))
    with pytest.raises(CatalogError, match="positive"):
        validate_catalog(catalog)


def test_unknown_directives_are_rejected():
    catalog = replace_minor(0, TimeInterval(TimeUnit.SECOND, 1, "%j"))
    with pytest.raises(CatalogError, match="%j"):
        validate_catalog(catalog)


def test_units_must_be_time_units():
    catalog = replace_minor(0, TimeInterval("fortnight", 1, "%d"))  # type: ignore
    with pytest.raises(CatalogError, match="unit"):
        validate_catalog(catalog)


def test_decreasing_thresholds_are_rejected():
    catalog = DEFAULT_CATALOG._replace(minor_to_major=(16, 14, 20, 1000000))
    with pytest.raises(CatalogError, match="decrease"):
        validate_catalog(catalog)


def test_last_threshold_must_cover_every_minor_index():
    catalog = DEFAULT_CATALOG._replace(minor_to_major=(14, 16, 20, 23))
    with pytest.raises(CatalogError, match="last"):
        validate_catalog(catalog)


def test_thresholds_pair_with_major_intervals():
    catalog = DEFAULT_CATALOG._replace(minor_to_major=(14, 16, 1000000))
    with pytest.raises(CatalogError, match="one to one"):
        validate_catalog(catalog)


def test_empty_tables_are_rejected():
    with pytest.raises(CatalogError):
        validate_catalog(DEFAULT_CATALOG._replace(minor_intervals=()))
    with pytest.raises(CatalogError):
        validate_catalog(IntervalCatalog(MINOR_INTERVALS, (), ()))
