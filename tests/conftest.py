"""Pytest configuration and fixtures for neoanalyzer tests."""
import copy

import pytest

from neoanalyzer.bodies import Asteroid


# ==============================================================================
# Fixtures: NeoWs records
# ==============================================================================
@pytest.fixture
def sample_neo_record():
    """A NeoWs feed record (trimmed), values as served for 465633 (2009 JR5).

    ``relative_velocity`` and ``miss_distance`` are strings, exactly as NeoWs
    serves them.
    """
    return {
        "id": "2465633",
        "neo_reference_id": "2465633",
        "name": "465633 (2009 JR5)",
        "nasa_jpl_url": "https://ssd.jpl.nasa.gov/tools/sbdb_lookup.html#/?sstr=2465633",
        "absolute_magnitude_h": 20.44,
        "estimated_diameter": {
            "kilometers": {
                "estimated_diameter_min": 0.2170475943,
                "estimated_diameter_max": 0.4853331752,
            },
            "meters": {
                "estimated_diameter_min": 217.0475943071,
                "estimated_diameter_max": 485.3331752235,
            },
        },
        "is_potentially_hazardous_asteroid": True,
        "close_approach_data": [
            {
                "close_approach_date": "2015-09-08",
                "close_approach_date_full": "2015-Sep-08 20:28",
                "epoch_date_close_approach": 1441744080000,
                "relative_velocity": {
                    "kilometers_per_second": "18.1279360862",
                    "kilometers_per_hour": "65260.5699103704",
                    "miles_per_hour": "40550.3802312521",
                },
                "miss_distance": {
                    "astronomical": "0.3027469457",
                    "lunar": "117.7685618773",
                    "kilometers": "45290298.225725659",
                    "miles": "28142086.3515817342",
                },
                "orbiting_body": "Earth",
            },
            {
                "close_approach_date": "2016-09-08",
                "relative_velocity": {"kilometers_per_second": "99.0"},
                "miss_distance": {"kilometers": "1.0"},
                "orbiting_body": "Earth",
            },
        ],
        "is_sentry_object": False,
    }


@pytest.fixture
def second_neo_record(sample_neo_record):
    """Another record on the same feed date."""
    rec = copy.deepcopy(sample_neo_record)
    rec["id"] = "3713989"
    rec["neo_reference_id"] = "3713989"
    rec["name"] = "(2015 FC35)"
    rec["absolute_magnitude_h"] = 22.1
    rec["estimated_diameter"]["kilometers"] = {
        "estimated_diameter_min": 0.1011162335,
        "estimated_diameter_max": 0.2261026264,
    }
    rec["is_potentially_hazardous_asteroid"] = False
    rec["close_approach_data"] = [
        {
            "close_approach_date": "2015-09-08",
            "relative_velocity": {"kilometers_per_second": "3.7362725994"},
            "miss_distance": {"kilometers": "62753692.001112987"},
            "orbiting_body": "Earth",
        }
    ]
    return rec


@pytest.fixture
def sample_feed(sample_neo_record, second_neo_record):
    """A NeoWs feed response for 2015-09-07 .. 2015-09-08."""
    return {
        "element_count": 2,
        "near_earth_objects": {
            "2015-09-08": [sample_neo_record, second_neo_record],
            "2015-09-07": [],
        },
    }


# ==============================================================================
# Fixtures: Asteroids
# ==============================================================================
def _asteroid(**kwargs):
    base = dict(
        name="A",
        id="1000001",
        nasa_jpl_url="https://ssd.jpl.nasa.gov/?sstr=1000001",
        absolute_magnitude=21.0,
        min_diameter_km=0.2,
        max_diameter_km=0.4,
        is_hazardous=False,
        close_approach_date="2024-06-01",
        relative_velocity_km_s=3.0,
        miss_distance_km=1.0e6,
    )
    base.update(kwargs)
    return Asteroid(**base)


@pytest.fixture
def make_asteroid():
    """Factory for asteroids with overridable fields."""
    return _asteroid


@pytest.fixture
def asteroid_a():
    """min=0.2 km, max=0.4 km, v=3.0 km/s."""
    return _asteroid()


@pytest.fixture
def asteroid_b():
    """min=0.15 km, max=0.3 km, v=2.5 km/s, different identity from `asteroid_a`."""
    return _asteroid(
        name="B",
        id="2000002",
        nasa_jpl_url="https://ssd.jpl.nasa.gov/?sstr=2000002",
        absolute_magnitude=22.5,
        min_diameter_km=0.15,
        max_diameter_km=0.3,
        is_hazardous=True,
        close_approach_date="2024-07-15",
        relative_velocity_km_s=2.5,
        miss_distance_km=2.5e6,
    )


# ==============================================================================
# Fixtures: Tolerances
# ==============================================================================
@pytest.fixture
def rtol():
    """Default relative tolerance."""
    return 1e-12


# ==============================================================================
# Markers
# ==============================================================================
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "network: marks tests requiring network access")
