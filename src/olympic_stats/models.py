"""
Statistical Data Models for Olympic Stats

Type-safe records returned by OlympicStatsAPI queries.
"""
from dataclasses import dataclass

from olympics.models import MedalType, Participation


@dataclass(frozen=True)
class MedalRecord:
    """One medal won by an athlete"""
    event: str
    year: int
    medal: MedalType

    @classmethod
    def from_participation(cls, participation: Participation) -> "MedalRecord":
        return cls(
            event=participation.event.sport,
            year=participation.event.year,
            medal=participation.medal,
        )


@dataclass(frozen=True)
class ParticipationRecord:
    """One athlete taking part in one event occurrence"""
    event: str
    year: int
    athlete: str

    @classmethod
    def from_participation(cls, participation: Participation) -> "ParticipationRecord":
        return cls(
            event=participation.event.sport,
            year=participation.event.year,
            athlete=participation.athlete.name,
        )
