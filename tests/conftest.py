"""
Pytest configuration for test discovery and imports.

Provides fixtures for testing including:
- A small Olympic dataset covering four countries and nine event occurrences
- A graph builder for scenario-specific datasets
- Temporary CSV files for loader tests
"""

import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import pytest


# Determine paths
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
tests_path = project_root / "tests"


def pytest_configure(config):
    """Put project root and src/ at the front of sys.path, without tests/."""
    seen = set()
    new_path = []
    for p in sys.path:
        if p not in seen and p != str(tests_path):
            seen.add(p)
            new_path.append(p)

    for path in [str(src_path), str(project_root)]:
        if path in new_path:
            new_path.remove(path)

    new_path.insert(0, str(src_path))
    new_path.insert(0, str(project_root))

    sys.path[:] = new_path


# (athlete, gender, country, sport, year, medal)
Row = Tuple[str, str, str, str, int, Optional[str]]


def build_graph(rows: Iterable[Row], idle_athletes: Iterable[Tuple[str, str, str]] = ()):
    """
    Build athletes, countries and events the way the loader does.

    Args:
        rows: Participation rows
        idle_athletes: (name, gender, country) for athletes with no participations

    Returns:
        (athletes dict, countries dict, events list)
    """
    from olympics.models import Athlete, Country, Event, Gender, MedalType, record_participation

    athletes: Dict[str, Athlete] = {}
    countries: Dict[str, Country] = {}
    events: List[Event] = []
    events_by_key: Dict[Tuple[str, int], Event] = {}

    def get_athlete(name, gender, country_name):
        country = countries.get(country_name)
        if country is None:
            country = countries[country_name] = Country(country_name)
        athlete = athletes.get(name)
        if athlete is None:
            athlete = athletes[name] = Athlete(name, Gender.from_string(gender), country)
            country.add_athlete(athlete)
        return athlete

    for name, gender, country_name, sport, year, medal in rows:
        athlete = get_athlete(name, gender, country_name)
        event = events_by_key.get((sport, year))
        if event is None:
            event = events_by_key[(sport, year)] = Event(sport, year)
            events.append(event)
        record_participation(athlete, event, MedalType.from_string(medal) if medal else None)

    for name, gender, country_name in idle_athletes:
        get_athlete(name, gender, country_name)

    return athletes, countries, events


SAMPLE_ROWS: List[Row] = [
    # Colombia: 3 medalists
    ("Ana Perez", "F", "Colombia", "Swimming", 2021, "gold"),
    ("Ana Perez", "F", "Colombia", "Swimming", 2020, "bronze"),
    ("Mariana Pajon", "F", "Colombia", "Cycling", 2016, "gold"),
    ("Mariana Pajon", "F", "Colombia", "Cycling", 2021, "silver"),
    ("Carlos Ramirez", "M", "Colombia", "Athletics", 2021, "bronze"),
    ("Luis Diaz", "M", "Colombia", "Athletics", 2021, None),
    # United States: 3 medalists
    ("Katie Ledecky", "F", "United States", "Swimming", 2016, "gold"),
    ("Katie Ledecky", "F", "United States", "Swimming", 2021, "gold"),
    ("Simone Biles", "F", "United States", "Gymnastics", 2016, "gold"),
    ("Simone Biles", "F", "United States", "Gymnastics", 2021, "bronze"),
    ("Noah Lyles", "M", "United States", "Athletics", 2021, "silver"),
    # Australia: 1 medalist, Sam competes in three sports without a medal
    ("Emma McKeon", "F", "Australia", "Swimming", 2021, "silver"),
    ("Sam Welsford", "M", "Australia", "Cycling", 2021, None),
    ("Sam Welsford", "M", "Australia", "Athletics", 2016, None),
    ("Sam Welsford", "M", "Australia", "Swimming", 2020, None),
    # Kenya: 1 medalist
    ("Eliud Kipchoge", "M", "Kenya", "Athletics", 2016, "gold"),
    ("Eliud Kipchoge", "M", "Kenya", "Athletics", 2021, "gold"),
]

SAMPLE_IDLE_ATHLETES = [("Zoe Kamau", "F", "Kenya")]


@pytest.fixture
def graph_builder():
    """Provides build_graph for scenario-specific datasets."""
    return build_graph


@pytest.fixture
def sample_graph():
    """
    Sample dataset: 11 athletes (8 medalists), 4 countries, 9 events.

    Returns:
        (athletes dict, countries dict, events list)
    """
    return build_graph(SAMPLE_ROWS, SAMPLE_IDLE_ATHLETES)


@pytest.fixture
def stats_api(sample_graph):
    """Provides OlympicStatsAPI over the sample dataset."""
    from olympic_stats.stats_api import OlympicStatsAPI

    athletes, countries, events = sample_graph
    return OlympicStatsAPI(athletes, countries, events)


@pytest.fixture
def write_csv(tmp_path):
    """
    Write CSV text to a temporary file.

    Returns:
        Function taking the file content and returning its Path
    """
    def _write(content: str, name: str = "athletes.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def restore_root_logger():
    """Remove the handlers setup_logging added and restore the root level."""
    import logging
    import logging.handlers

    from logging_config import ColoredFormatter

    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler) or isinstance(
            handler.formatter, ColoredFormatter
        ):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
