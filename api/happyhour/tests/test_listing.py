"""Tests for the venue ranking pipeline."""
from __future__ import annotations

import logging
from datetime import datetime
from unittest.mock import patch

import pytest

from happyhour.db.repository import FixtureVenueRepository
from happyhour.schemas.venues import TimeWindow
from happyhour.services.geospatial import Coordinates
from happyhour.services.listing import SEARCH_RADIUS_KM, build_row, rank_venues

VIEWER = Coordinates(lat=37.79, lon=-122.4)
MONDAY_4PM = datetime(2024, 1, 1, 16, 0)
TUESDAY_NOON = datetime(2024, 1, 2, 12, 0)


def _distances(mapping: dict[str, float]):
    """Stand-in for distance_km keyed by venue latitude/longitude label."""

    def _fake(origin, position):
        return mapping[f"{position.lat},{position.lon}"]

    return _fake


class TestBuildRow:
    """Tests for build_row."""

    def test_juniper_row(self, make_venue):
        venue = make_venue(
            schedule={"mon": [("15:00", "18:00")]},
            items=[{"name": "Lager", "hh": 5, "reg": 8}, {"name": "Wings", "hh": 7, "reg": 12}],
        )
        row = build_row(venue, VIEWER, MONDAY_4PM)

        assert row.venue is venue
        assert row.active is True
        assert row.next_window == TimeWindow(start="15:00", end="18:00")
        assert row.distance_km == 0.0
        assert row.top_savings == 5.0

    def test_no_window_today(self, make_venue):
        row = build_row(make_venue(schedule={"tue": [("15:00", "18:00")]}), VIEWER, MONDAY_4PM)
        assert row.active is False
        assert row.next_window is None


class TestRankVenues:
    """Tests for rank_venues."""

    def test_sorted_ascending_by_distance(self, make_venue):
        venues = [
            make_venue(id="far", slug="far", lat=37.9, lon=-122.4),
            make_venue(id="near", slug="near", lat=37.79, lon=-122.4),
            make_venue(id="mid", slug="mid", lat=37.85, lon=-122.4),
        ]
        rows = rank_venues(venues, VIEWER, MONDAY_4PM)
        assert [r.venue.id for r in rows] == ["near", "mid", "far"]

    def test_filters_beyond_radius(self, make_venue):
        venues = [
            make_venue(id="here", slug="here"),
            make_venue(id="la", slug="la", lat=34.05, lon=-118.24),
        ]
        rows = rank_venues(venues, VIEWER, MONDAY_4PM)
        assert [r.venue.id for r in rows] == ["here"]

    def test_exactly_at_radius_is_kept(self, make_venue):
        venues = [
            make_venue(id="edge", slug="edge", lat=1.0, lon=1.0),
            make_venue(id="past", slug="past", lat=2.0, lon=2.0),
        ]
        fake = _distances({"1.0,1.0": SEARCH_RADIUS_KM, "2.0,2.0": SEARCH_RADIUS_KM + 0.001})
        with patch("happyhour.services.listing.distance_km", side_effect=fake):
            rows = rank_venues(venues, VIEWER, MONDAY_4PM)
        assert [r.venue.id for r in rows] == ["edge"]
        assert rows[0].distance_km == 30.0

    def test_ties_keep_dataset_order(self, make_venue):
        venues = [
            make_venue(id="b", slug="b", lat=1.0, lon=1.0),
            make_venue(id="a", slug="a", lat=2.0, lon=2.0),
            make_venue(id="c", slug="c", lat=3.0, lon=3.0),
        ]
        fake = _distances({"1.0,1.0": 5.0, "2.0,2.0": 5.0, "3.0,3.0": 1.0})
        with patch("happyhour.services.listing.distance_km", side_effect=fake):
            rows = rank_venues(venues, VIEWER, MONDAY_4PM)
        assert [r.venue.id for r in rows] == ["c", "b", "a"]

    def test_empty_dataset(self):
        assert rank_venues([], VIEWER, MONDAY_4PM) == []

    def test_everything_out_of_range(self, make_venue):
        rows = rank_venues([make_venue()], Coordinates(lat=0, lon=0), MONDAY_4PM)
        assert rows == []


class TestFixtureRanking:
    """End-to-end ranking over the fixture venues."""

    @pytest.fixture
    def venues(self):
        return FixtureVenueRepository().fetch_all()

    def test_juniper_ranks_before_harbor(self, venues):
        rows = rank_venues(venues, VIEWER, MONDAY_4PM)
        assert [r.venue.name for r in rows] == ["Juniper", "Harbor & Vine"]

    def test_distances(self, venues):
        rows = rank_venues(venues, VIEWER, MONDAY_4PM)
        assert f"{rows[0].distance_km:.2f}" == "0.00"
        assert 1.5 <= rows[1].distance_km <= 2.0

    def test_top_savings(self, venues):
        rows = rank_venues(venues, VIEWER, MONDAY_4PM)
        assert rows[0].top_savings == 5.0
        assert rows[1].top_savings == 8.0

    def test_monday_afternoon_status(self, venues):
        juniper, harbor = rank_venues(venues, VIEWER, MONDAY_4PM)
        assert juniper.active is True
        assert harbor.active is False
        assert harbor.next_window is None

    def test_tuesday_noon_next_windows(self, venues):
        juniper, harbor = rank_venues(venues, VIEWER, TUESDAY_NOON)
        assert juniper.active is False
        assert juniper.next_window == TimeWindow(start="15:00", end="18:00")
        assert harbor.next_window == TimeWindow(start="16:00", end="18:30")


class TestRankingLog:
    def test_logs_counts_at_debug(self, make_venue, caplog):
        venues = [make_venue(id="here", slug="here"), make_venue(id="la", slug="la", lat=34.05, lon=-118.24)]
        with caplog.at_level(logging.DEBUG, logger="happyhour.services.listing"):
            rank_venues(venues, VIEWER, MONDAY_4PM)
        assert "Ranked 1 of 2 venue(s) within 30 km of (37.79, -122.4)" in caplog.text
