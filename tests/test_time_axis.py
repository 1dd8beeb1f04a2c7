import logging
import math

import pytest

from chronaxis.axis import TimeAxis
from chronaxis.utility import (
    DEFAULT_CATALOG,
    AxisOrientation,
    AxisSettings,
    AxisStateError,
    CatalogError,
    DurationRecorder,
    SpaceRequest,
    TextAnchor,
    TickLevel,
    TickLevels,
    TimeScale,
    tick_key,
)

from .conftest import RecordingSurface, utc

THREE_DAYS = (utc(2024, 1, 1, 6), utc(2024, 1, 4, 6))


def make_axis(measurer, domain=THREE_DAYS, width=1000.0, **settings) -> TimeAxis:
    scale = TimeScale(domain, pixel_range=(0.0, width))
    return TimeAxis(scale, measurer, AxisSettings(**settings))


def test_space_request_fits_the_tick_font(measurer):
    time_axis = make_axis(measurer)
    assert time_axis.request_space(800, 100) == SpaceRequest(
        width=0.0, height=54.0, wants_width=False, wants_height=False
    )


def test_space_request_asks_for_more_height_when_cramped(measurer):
    time_axis = make_axis(measurer)
    space_request = time_axis.request_space(800, 30)
    assert space_request.height == 30
    assert space_request.wants_height


def test_fixed_height_setting_wins(measurer):
    time_axis = make_axis(measurer, height=70.0)
    assert time_axis.request_space(800, 100).height == 70.0


def test_vertical_orientations_are_rejected(measurer):
    with pytest.raises(ValueError, match="left"):
        make_axis(measurer, orientation=AxisOrientation.LEFT)


def test_broken_catalogs_are_rejected(measurer):
    catalog = DEFAULT_CATALOG._replace(minor_to_major=(14, 16, 20, 3))
    with pytest.raises(CatalogError):
        TimeAxis(TimeScale(THREE_DAYS), measurer, catalog=catalog)


def test_render_requires_setup(measurer):
    with pytest.raises(AxisStateError):
        make_axis(measurer).render(1000, 54)


def test_render_stacks_two_label_rows(measurer, surface):
    time_axis = make_axis(measurer)
    time_axis.setup(surface)
    rendering = time_axis.render(1000, 54)

    assert time_axis.tick_levels(1000) == TickLevels(minor_index=12, major_index=0)

    minor_labels = rendering.labels[TickLevel.MINOR]
    assert len(minor_labels) == 13
    assert minor_labels[0].text == "06 AM"
    assert minor_labels[0].position == 0.0
    assert minor_labels[-1].position == 1000.0
    assert {p.anchor for p in minor_labels} == {TextAnchor.START}
    assert {p.x_offset for p in minor_labels} == {5.0}
    assert {p.y_offset for p in minor_labels} == {20.0}

    major_labels = rendering.labels[TickLevel.MAJOR]
    assert [p.text for p in major_labels] == [
        "January  1, 2024",
        "January  2, 2024",
        "January  3, 2024",
        "January  4, 2024",
    ]
    assert {p.anchor for p in major_labels} == {TextAnchor.MIDDLE}
    assert {p.y_offset for p in major_labels} == {40.0}

    assert len(surface.live_labels(TickLevel.MINOR)) == 13
    assert len(surface.live_labels(TickLevel.MAJOR)) == 4


def test_render_draws_each_instant_once(measurer, surface):
    time_axis = make_axis(measurer)
    time_axis.setup(surface)
    rendering = time_axis.render(1000, 54)

    (tick_marks,) = surface.tick_mark_batches
    assert tick_marks == rendering.tick_marks
    assert len(tick_marks) == 13
    assert len({m.key for m in tick_marks}) == 13
    major_marks = [m for m in tick_marks if m.level == TickLevel.MAJOR]
    assert [m.length for m in major_marks] == [40.0, 40.0, 40.0]


def test_top_axis_mirrors_label_rows(measurer, surface):
    time_axis = make_axis(measurer, orientation=AxisOrientation.TOP)
    time_axis.setup(surface)
    rendering = time_axis.render(1000, 54)
    assert {p.y_offset for p in rendering.labels[TickLevel.MINOR]} == {34.0}
    assert {p.y_offset for p in rendering.labels[TickLevel.MAJOR]} == {14.0}


def test_labels_persist_across_nearby_redraws(measurer, surface):
    time_axis = make_axis(measurer)
    time_axis.setup(surface)
    time_axis.render(1000, 54)
    assert len(surface.labels) == 17

    time_axis.scale.set_domain(utc(2024, 1, 1, 12), utc(2024, 1, 4, 12))
    time_axis.render(1000, 54)

    # One new hour label, and two day midpoints moved.
    assert len(surface.labels) == 20
    assert sum(label.released for label in surface.labels) == 3
    assert len(surface.live_labels(TickLevel.MINOR)) == 13
    assert len(surface.live_labels(TickLevel.MAJOR)) == 4


def test_new_surface_releases_previous_labels(measurer, surface):
    time_axis = make_axis(measurer)
    time_axis.setup(surface)
    time_axis.render(1000, 54)

    other_surface = RecordingSurface()
    time_axis.setup(other_surface)
    assert all(label.released for label in surface.labels)

    time_axis.render(1000, 54)
    assert len(other_surface.labels) == 17


def test_level_changes_are_logged(measurer, surface, caplog):
    time_axis = make_axis(measurer)
    time_axis.setup(surface)
    with caplog.at_level(logging.DEBUG, logger="chronaxis"):
        time_axis.render(1000, 54)
        time_axis.render(1000, 54)
        time_axis.render(300, 54)
    assert caplog.text.count("levels changed") == 2


def test_render_durations_are_recorded(measurer, surface):
    time_axis = make_axis(measurer)
    time_axis.setup(surface)
    time_axis.render(1000, 54)
    assert DurationRecorder.mean_duration("render_time_axis") is not None


def test_zero_length_domain_renders_one_label_per_row(measurer, surface):
    moment = utc(2024, 6, 15, 12, 30, 45)
    time_axis = make_axis(measurer, domain=(moment, moment))
    time_axis.setup(surface)
    rendering = time_axis.render(1000, 54)

    assert time_axis.tick_levels(1000) == TickLevels(minor_index=0, major_index=0)
    for level in (TickLevel.MINOR, TickLevel.MAJOR):
        (placement,) = rendering.labels[level]
        assert placement.key == tick_key(moment)
        assert len(surface.live_labels(level)) == 1

    positions = [m.position for m in rendering.tick_marks] + [
        p.position for placements in rendering.labels.values() for p in placements
    ]
    assert positions
    assert all(math.isfinite(p) for p in positions)
    assert set(positions) == {0.0}


def test_ticks_on_the_bounds_collapse_into_one_label(measurer, surface):
    time_axis = make_axis(measurer, domain=(utc(2024, 1, 1), utc(2024, 1, 4)))
    time_axis.setup(surface)
    rendering = time_axis.render(1000, 54)

    assert time_axis.tick_levels(1000) == TickLevels(minor_index=12, major_index=0)
    assert [p.text for p in rendering.labels[TickLevel.MAJOR]] == [
        "January  1, 2024",
        "January  1, 2024",
        "January  2, 2024",
        "January  3, 2024",
        "January  4, 2024",
    ]
    for level, placements in rendering.labels.items():
        assert len({p.key for p in placements}) == len(placements)
        assert len(surface.live_labels(level)) == len(placements)
    assert len(rendering.labels[TickLevel.MINOR]) == 13
