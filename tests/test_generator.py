import random

import pytest

from nomadia.api import generator
from nomadia.api.generator import (
    CULTURE_DESCRIPTION,
    NATURE_DESCRIPTION,
    SLEEP_OPTIONS,
    estimate_cost,
    generate_route,
    round_half_up,
)
from nomadia.api.models import PreferenceSet, TripRequest


def at_center():
    return 0.0


def test_europe_backpack_scenario(europe_request):
    route = generate_route(europe_request)

    assert route.title == "5-day Europe backpack adventure"
    assert len(route.days) == 5
    assert len(route.points) == 5
    assert route.summary.estimated_cost_usd == 100
    for day in route.days:
        assert 6 <= day.distance_km <= 28
        assert day.description == NATURE_DESCRIPTION
    assert route.meta.region == "Europe"
    assert route.meta.prefs == europe_request.prefs


@pytest.mark.parametrize("challenge, radius", [(40, 50.0), (90, 75.0)])
def test_challenge_sets_sampling_radius(monkeypatch, europe_request, challenge, radius):
    seen = []
    real_sample = generator.sample_point

    def recording_sample(center, radius_km, rand):
        seen.append(radius_km)
        return real_sample(center, radius_km, rand)

    monkeypatch.setattr(generator, "sample_point", recording_sample)
    prefs = PreferenceSet(**{**europe_request.prefs.to_dict(), "challenge": challenge})
    generate_route(TripRequest(days=5, region="Europe", style="backpack", prefs=prefs))

    assert seen == [pytest.approx(radius)] * 5


def test_every_point_sampled_around_fixed_center(monkeypatch, europe_request):
    centers = []
    real_sample = generator.sample_point

    def recording_sample(center, radius_km, rand):
        centers.append(center)
        return real_sample(center, radius_km, rand)

    monkeypatch.setattr(generator, "sample_point", recording_sample)
    generate_route(europe_request)
    assert len(set(centers)) == 1
    assert centers[0].label == "Europe"


@pytest.mark.parametrize("days", range(2, 31))
def test_day_count_and_leg_bounds(days):
    prefs = PreferenceSet(challenge=100)
    route = generate_route(TripRequest(days=days, region="asia", prefs=prefs), random.Random(days).random)

    assert len(route.days) == days
    assert [d.day for d in route.days] == list(range(1, days + 1))
    for day in route.days:
        assert 6 <= day.distance_km <= 28
        assert day.time_hrs >= 3


@pytest.mark.parametrize("requested, expected", [(0, 2), (1, 2), (31, 30), (1000, 30), ("abc", 5)])
def test_day_count_is_clamped(requested, expected):
    route = generate_route(TripRequest(days=requested))
    assert len(route.days) == expected
    assert route.meta.days == expected
    assert route.title.startswith(f"{expected}-day ")


def test_legs_at_center(europe_request):
    # every point on the center: raw leg distance 0, challenge 40 shifts by -1 km
    route = generate_route(europe_request, at_center)

    assert [d.distance_km for d in route.days] == [7] * 5
    assert [d.time_hrs for d in route.days] == [3] * 5
    assert route.summary.total_distance_km == 35
    assert route.summary.total_time_hrs == 8


def test_total_time_comes_from_rounded_total(europe_request):
    route = generate_route(europe_request, at_center)
    assert sum(d.time_hrs for d in route.days) != route.summary.total_time_hrs


def test_leg_floor_and_ceiling(cycle_source):
    prefs = PreferenceSet(challenge=0)
    route = generate_route(TripRequest(days=3, region="europe", prefs=prefs), at_center)
    # 0 + 8 - 5 = 3 km, lifted to the 6 km floor
    assert [d.distance_km for d in route.days] == [6, 6, 6]

    # alternate the extreme north and south edges of an 80 km disc
    far = cycle_source(0.999, 0.0, 0.999, 0.5)
    route = generate_route(TripRequest(days=4, region="europe", prefs=PreferenceSet(challenge=100)), far)
    assert [d.distance_km for d in route.days] == [13, 28, 28, 28]
    assert [d.time_hrs for d in route.days] == [3, 6, 6, 6]
    assert route.summary.total_distance_km == 97
    assert route.summary.total_time_hrs == 22


@pytest.mark.parametrize("nature, expected", [(61, NATURE_DESCRIPTION), (60, CULTURE_DESCRIPTION), (0, CULTURE_DESCRIPTION)])
def test_description_follows_nature_preference(nature, expected):
    route = generate_route(TripRequest(days=4, prefs=PreferenceSet(nature=nature)))
    assert {d.description for d in route.days} == {expected}


def test_sleep_round_robin():
    backpack = generate_route(TripRequest(days=7, style="backpack"))
    mixed = generate_route(TripRequest(days=7, style="mixed"))

    assert [d.sleep for d in backpack.days] == [SLEEP_OPTIONS[i % 5] for i in range(7)]
    assert [d.sleep for d in mixed.days] == [SLEEP_OPTIONS[(i + 1) % 5] for i in range(7)]


@pytest.mark.parametrize("style, per_day", [("backpack", 20), ("mixed", 30), ("public", 25)])
def test_cost_per_style(style, per_day):
    route = generate_route(TripRequest(days=6, region="africa", style=style))
    assert route.summary.estimated_cost_usd == 6 * per_day
    assert route.title == f"6-day Africa {style} adventure"


def test_cost_edge_cases():
    assert estimate_cost(5, "unknown", 40) == 100
    assert estimate_cost(5, "mixed", 0) == 125


def test_unknown_region_uses_alps():
    route = generate_route(TripRequest(days=3, region="Atlantis"))
    assert route.title == "3-day Alps backpack adventure"


def test_routes_do_not_share_sequences(europe_request):
    first = generate_route(europe_request)
    second = generate_route(europe_request)
    assert first.points is not second.points
    assert first.days is not second.days


def test_seeded_source_is_reproducible(europe_request):
    a = generate_route(europe_request, random.Random(42).random)
    b = generate_route(europe_request, random.Random(42).random)
    assert a == b


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(7.49) == 7
