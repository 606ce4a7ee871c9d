"""
Olympics Package

Entity graph (athletes, countries, events, participations) and the CSV
loader that builds it.
"""

from .models import (
    Athlete,
    Country,
    Event,
    Gender,
    MedalTally,
    MedalType,
    Participation,
    record_participation,
)
from .olympics_exceptions import (
    OlympicsException,
    EmptyDatasetException,
    DataLoadException,
    InconsistentDataException,
)

__all__ = [
    'Athlete',
    'Country',
    'Event',
    'Gender',
    'MedalTally',
    'MedalType',
    'Participation',
    'record_participation',
    'OlympicsException',
    'EmptyDatasetException',
    'DataLoadException',
    'InconsistentDataException',
]
