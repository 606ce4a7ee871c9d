"""
Olympic Entity Graph for Olympic Stats

Athletes, countries and event occurrences, linked through participations.
The graph is built once by the data loader and is read-only afterwards.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple


class Gender(Enum):
    """Athlete gender as recorded in the source data"""
    MALE = "male"
    FEMALE = "female"

    @classmethod
    def from_string(cls, value: str) -> "Gender":
        """
        Parse a gender string ('m', 'male', 'f', 'female').

        Raises:
            ValueError: If the value is not a recognised gender
        """
        normalized = value.strip().lower()
        if normalized in ("m", "male"):
            return cls.MALE
        if normalized in ("f", "female"):
            return cls.FEMALE
        raise ValueError(f"Invalid gender: {value!r}")


class MedalType(Enum):
    """Medal outcome of a participation"""
    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"

    @classmethod
    def from_string(cls, value: str) -> "MedalType":
        """
        Parse a medal string ('gold', 'silver', 'bronze'), case-insensitive.

        Raises:
            ValueError: If the value is not a medal type
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid medal: {value!r}") from None


@dataclass(frozen=True)
class MedalTally:
    """Gold, silver and bronze counts for one country in one sport"""
    gold: int = 0
    silver: int = 0
    bronze: int = 0

    def as_tuple(self) -> Tuple[int, int, int]:
        """Ranking key: gold first, then silver, then bronze"""
        return (self.gold, self.silver, self.bronze)

    @property
    def total(self) -> int:
        return self.gold + self.silver + self.bronze


@dataclass(frozen=True, eq=False)
class Participation:
    """
    One athlete's presence in one event occurrence.

    Compared by identity: the same athlete can take part in the same sport
    in several years, and each of those is a distinct fact.
    """
    athlete: "Athlete"
    event: "Event"
    medal: Optional[MedalType] = None

    @property
    def is_medal(self) -> bool:
        return self.medal is not None


class Country:
    """A nation and the index of athletes who represent it"""

    def __init__(self, name: str):
        self.name = name
        # Non-owning index; athletes are owned by the athlete collection
        self._athletes: Dict[str, "Athlete"] = {}

    def __repr__(self) -> str:
        return f"Country({self.name!r})"

    @property
    def athletes(self) -> List["Athlete"]:
        """Athletes of this country in registration order"""
        return list(self._athletes.values())

    def add_athlete(self, athlete: "Athlete") -> None:
        self._athletes[athlete.name] = athlete

    def get_athlete(self, name: str) -> Optional["Athlete"]:
        return self._athletes.get(name)

    def count_medalists(self) -> int:
        """Number of distinct athletes of this country with at least one medal"""
        return sum(1 for athlete in self._athletes.values() if athlete.is_medalist())

    def medal_tally(self, sport: str) -> MedalTally:
        """
        Sum this country's medals over every occurrence of a sport.

        Args:
            sport: Sport name (all years)

        Returns:
            MedalTally, (0, 0, 0) when no athlete of the country took part
        """
        counts = {MedalType.GOLD: 0, MedalType.SILVER: 0, MedalType.BRONZE: 0}
        for athlete in self._athletes.values():
            for participation in athlete.participations:
                if participation.event.sport == sport and participation.medal is not None:
                    counts[participation.medal] += 1

        return MedalTally(
            gold=counts[MedalType.GOLD],
            silver=counts[MedalType.SILVER],
            bronze=counts[MedalType.BRONZE],
        )

    def medalists_by_gender(self, gender: Gender) -> List["Athlete"]:
        """Athletes of the given gender with at least one medal"""
        return [
            athlete for athlete in self._athletes.values()
            if athlete.gender == gender and athlete.is_medalist()
        ]

    def participations(self) -> List[Participation]:
        """Every participation of every athlete, athlete by athlete"""
        result = []
        for athlete in self._athletes.values():
            result.extend(athlete.participations)
        return result


class Athlete:
    """An athlete with a gender, one country and a participation history"""

    def __init__(self, name: str, gender: Gender, country: Country):
        self.name = name
        self.gender = gender
        self.country = country
        self.participations: List[Participation] = []

    def __repr__(self) -> str:
        return f"Athlete({self.name!r}, {self.country.name!r})"

    def add_participation(self, participation: Participation) -> None:
        self.participations.append(participation)

    def has_participated(self, sport: str, year: int) -> bool:
        return any(
            p.event.sport == sport and p.event.year == year
            for p in self.participations
        )

    def count_medals(self) -> int:
        return sum(1 for p in self.participations if p.is_medal)

    def is_medalist(self) -> bool:
        return any(p.is_medal for p in self.participations)

    def count_sports(self) -> int:
        """Distinct sports; the same sport in different years counts once"""
        return len({p.event.sport for p in self.participations})

    def medals(self) -> List[Participation]:
        """Medal-winning participations in insertion order"""
        return [p for p in self.participations if p.is_medal]

    def medals_in_range(self, start_year: int, end_year: int) -> List[Participation]:
        """Medal-winning participations held between start_year and end_year (inclusive)"""
        return [
            p for p in self.participations
            if p.is_medal and start_year <= p.event.year <= end_year
        ]


class Event:
    """
    One occurrence of a sport in a given year.

    Identity is (sport, year): the same sport in another year is a
    different Event.
    """

    def __init__(self, sport: str, year: int):
        self.sport = sport
        self.year = year
        self.participations: List[Participation] = []

    def __repr__(self) -> str:
        return f"Event({self.sport!r}, {self.year})"

    @property
    def key(self) -> Tuple[str, int]:
        return (self.sport, self.year)

    def add_participation(self, participation: Participation) -> None:
        self.participations.append(participation)

    def athletes(self) -> List[Athlete]:
        """Distinct participating athletes in order of first appearance"""
        seen: Set[str] = set()
        result = []
        for participation in self.participations:
            athlete = participation.athlete
            if athlete.name not in seen:
                seen.add(athlete.name)
                result.append(athlete)
        return result

    def medalists(self) -> List[Athlete]:
        """Distinct athletes who won a medal in this occurrence"""
        seen: Set[str] = set()
        result = []
        for participation in self.participations:
            athlete = participation.athlete
            if participation.is_medal and athlete.name not in seen:
                seen.add(athlete.name)
                result.append(athlete)
        return result


def record_participation(
    athlete: Athlete,
    event: Event,
    medal: Optional[MedalType] = None
) -> Participation:
    """
    Create a participation and link it to both the athlete and the event.

    Args:
        athlete: Participating athlete
        event: Event occurrence
        medal: Medal won, or None

    Returns:
        The new Participation
    """
    participation = Participation(athlete=athlete, event=event, medal=medal)
    athlete.add_participation(participation)
    event.add_participation(participation)
    return participation
