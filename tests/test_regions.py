import pytest

from nomadia.api.regions import DEFAULT_CENTER, REGION_CENTERS, resolve_region


@pytest.mark.parametrize("text", ["Europe", "europe", " Europe ", "EUROPE\t"])
def test_resolution_ignores_case_and_whitespace(text):
    assert resolve_region(text) == REGION_CENTERS["europe"]


@pytest.mark.parametrize("text", ["", "   ", None, "Atlantis", "euro pe", "Switzerland"])
def test_unknown_or_empty_falls_back_to_alps(text):
    center = resolve_region(text)
    assert center is DEFAULT_CENTER
    assert (center.lat, center.lon, center.label) == (46.8, 8.3, "Alps")


def test_multi_word_regions():
    assert resolve_region("South America").label == "South America"
    assert resolve_region("  north AMERICA").lon == -105.0


def test_region_table_is_read_only():
    with pytest.raises(TypeError):
        REGION_CENTERS["mars"] = DEFAULT_CENTER


def test_known_regions():
    assert set(REGION_CENTERS) == {
        "europe", "asia", "south america", "north america", "africa", "oceania",
    }
