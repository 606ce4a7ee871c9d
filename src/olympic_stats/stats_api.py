"""
Main Statistics API for Olympic Stats

Central entry point for all statistical queries over the Olympic dataset.
Provides athlete queries, country queries, event queries and leaders.
"""
import logging
from typing import Dict, List, Optional, Set

from olympics.models import Athlete, Country, Event, Gender, MedalTally
from olympics.olympics_exceptions import EmptyDatasetException
from olympic_stats.calculations import calculate_ratio, count_true
from olympic_stats.models import MedalRecord, ParticipationRecord
from olympic_stats.rankings import select_best_tallies, select_leaders

logger = logging.getLogger(__name__)


class OlympicStatsAPI:
    """
    Main Statistics API - Single entry point for all Olympic queries.

    Architecture: Caller → OlympicStatsAPI → entity graph (athletes, countries, events)

    The graph is built by the data loader and never modified here. Every
    query is a read-only traversal. Lookups by name that match nothing
    return None, never an empty collection.
    """

    def __init__(
        self,
        athletes: Dict[str, Athlete],
        countries: Dict[str, Country],
        events: List[Event]
    ):
        """
        Initialize Statistics API.

        Args:
            athletes: Athlete name -> Athlete
            countries: Country name -> Country
            events: Event occurrences (same sport may appear for several years)
        """
        self.athletes: List[Athlete] = list(athletes.values())
        self.countries: List[Country] = list(countries.values())
        self.events: List[Event] = events

        self._athletes_by_name: Dict[str, Athlete] = dict(athletes)
        self._countries_by_name: Dict[str, Country] = dict(countries)

    # === EVENT QUERIES ===

    def athletes_per_year(self, year: int) -> Dict[str, List[Athlete]]:
        """
        Athletes who took part in each event held in a year.

        Args:
            year: Year to look up

        Returns:
            Dict of sport name -> participating athletes. Empty if no event
            was held that year.
        """
        result = {}
        for event in self.events:
            if event.year == year:
                result[event.sport] = event.athletes()

        logger.debug(f"athletes_per_year({year}): {len(result)} events")
        return result

    def medalists_by_event(self, sport: str) -> Set[Athlete]:
        """
        Athletes who won at least one medal in a sport, in any year.

        Args:
            sport: Sport name

        Returns:
            Set of distinct athletes (empty if none or unknown sport)
        """
        medalists: Set[Athlete] = set()
        for event in self.events:
            if event.sport == sport:
                medalists.update(event.medalists())

        logger.debug(f"medalists_by_event({sport!r}): {len(medalists)} medalists")
        return medalists

    def sport_names(self) -> Set[str]:
        """Distinct sport names across all years"""
        return {event.sport for event in self.events}

    # === ATHLETE QUERIES ===

    def medals_in_range(
        self,
        start_year: int,
        end_year: int,
        athlete_name: str
    ) -> Optional[List[MedalRecord]]:
        """
        Medals an athlete won between two years (inclusive).

        Args:
            start_year: First year of the range
            end_year: Last year of the range
            athlete_name: Athlete to look up

        Returns:
            List of MedalRecord in participation order, empty if the athlete
            won nothing in the range. None if no athlete has that name.
        """
        athlete = self._find_athlete(athlete_name)
        if athlete is None:
            logger.debug(f"medals_in_range: athlete {athlete_name!r} not found")
            return None

        return [
            MedalRecord.from_participation(p)
            for p in athlete.medals_in_range(start_year, end_year)
        ]

    def athletes_with_more_medals(self, minimum_medals: int) -> Dict[str, int]:
        """
        Athletes with strictly more than a number of medals.

        Args:
            minimum_medals: Exclusive threshold

        Returns:
            Dict of athlete name -> total medals
        """
        result = {}
        for athlete in self.athletes:
            medal_count = athlete.count_medals()
            if medal_count > minimum_medals:
                result[athlete.name] = medal_count
        return result

    def star_athletes(self) -> Dict[str, int]:
        """
        Athlete(s) with the most medals of any kind.

        The running maximum starts at 0, so when nobody has a medal every
        athlete is returned with 0.

        Returns:
            Dict of athlete name -> medal count for everyone tied for first
        """
        return select_leaders(
            ((athlete.name, athlete.count_medals()) for athlete in self.athletes),
            starting_max=0
        )

    def all_terrain_athlete(self) -> Athlete:
        """
        Athlete who has competed in the most different sports.

        The same sport in different years counts once. Ties go to the
        alphabetically smallest name.

        Returns:
            The all-terrain Athlete

        Raises:
            EmptyDatasetException: If there are no athletes
        """
        if not self.athletes:
            raise EmptyDatasetException(operation="all_terrain_athlete")

        champion = min(self.athletes, key=lambda a: (-a.count_sports(), a.name))
        logger.debug(f"all_terrain_athlete: {champion.name} ({champion.count_sports()} sports)")
        return champion

    def medalist_percentage(self) -> float:
        """
        Share of athletes who won at least one medal.

        Returns:
            Fraction between 0.0 and 1.0; 0.0 when there are no athletes
        """
        medalists = count_true(athlete.is_medalist() for athlete in self.athletes)
        return calculate_ratio(medalists, len(self.athletes))

    def country_of_athlete(self, athlete_name: str) -> Optional[str]:
        """
        Country an athlete represents.

        Args:
            athlete_name: Athlete to look up

        Returns:
            Country name, or None if no athlete has that name
        """
        athlete = self._find_athlete(athlete_name)
        if athlete is None:
            return None
        return athlete.country.name

    # === COUNTRY QUERIES ===

    def athletes_by_country(self, country_name: str) -> Optional[List[ParticipationRecord]]:
        """
        Every participation of every athlete of a country.

        Args:
            country_name: Country to look up

        Returns:
            List of ParticipationRecord, or None if the country is unknown
        """
        country = self._find_country(country_name)
        if country is None:
            logger.debug(f"athletes_by_country: country {country_name!r} not found")
            return None

        return [ParticipationRecord.from_participation(p) for p in country.participations()]

    def country_with_most_medalists(self) -> Dict[str, int]:
        """
        Country (or countries) with the most distinct medalists.

        Counts athletes who won at least one medal, not medals. The running
        maximum starts at -1, so when nobody has a medal every country is
        returned with 0.

        Returns:
            Dict of country name -> medalist count for everyone tied for first
        """
        return select_leaders(
            ((country.name, country.count_medalists()) for country in self.countries),
            starting_max=-1
        )

    def best_country_for_event(self, sport: str) -> Dict[str, MedalTally]:
        """
        Country (or countries) with the best results in a sport.

        Best means most golds; ties broken by silvers, then bronzes. Countries
        still tied all appear.

        Args:
            sport: Sport name (all years)

        Returns:
            Dict of country name -> MedalTally
        """
        result = select_best_tallies(
            (country.name, country.medal_tally(sport)) for country in self.countries
        )
        logger.debug(f"best_country_for_event({sport!r}): {sorted(result)}")
        return result

    def medalists_by_country_and_gender(
        self,
        country_name: str,
        gender: Gender
    ) -> Optional[Dict[str, List[MedalRecord]]]:
        """
        Medalists of one country and gender with their medals.

        Args:
            country_name: Country to look up
            gender: Gender to keep

        Returns:
            Dict of athlete name -> list of MedalRecord, or None if the
            country is unknown
        """
        country = self._find_country(country_name)
        if country is None:
            return None

        return {
            athlete.name: [MedalRecord.from_participation(p) for p in athlete.medals()]
            for athlete in country.medalists_by_gender(gender)
        }

    # === HELPERS ===

    def _find_athlete(self, athlete_name: str) -> Optional[Athlete]:
        return self._athletes_by_name.get(athlete_name)

    def _find_country(self, country_name: str) -> Optional[Country]:
        return self._countries_by_name.get(country_name)
