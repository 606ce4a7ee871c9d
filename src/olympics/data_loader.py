"""
Olympic Data Loader

Reads the athletes CSV file and builds the entity graph consumed by
OlympicStatsAPI.

File Format:
    athlete,gender,country,sport,year,medal
    Ana Perez,female,Colombia,Swimming,2021,gold
    Ana Perez,female,Colombia,Swimming,2020,bronze
    Luis Diaz,male,Colombia,Athletics,2021,

One row per participation. An empty medal cell (or 'na' / 'none') means the
athlete took part without winning a medal.
"""

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from config.olympics_settings import OlympicsSettings
from olympics.models import (
    Athlete,
    Country,
    Event,
    Gender,
    MedalType,
    record_participation,
)
from olympics.olympics_exceptions import DataLoadException, InconsistentDataException
from olympic_stats.stats_api import OlympicStatsAPI

logger = logging.getLogger(__name__)


@dataclass
class OlympicsDataset:
    """The three collections handed to the statistics engine."""
    athletes: Dict[str, Athlete] = field(default_factory=dict)
    countries: Dict[str, Country] = field(default_factory=dict)
    events: List[Event] = field(default_factory=list)
    participation_count: int = 0
    skipped_rows: int = 0

    def build_stats_api(self) -> OlympicStatsAPI:
        """Create an OlympicStatsAPI over this dataset."""
        return OlympicStatsAPI(self.athletes, self.countries, self.events)


class OlympicsDataLoader:
    """
    Builds an OlympicsDataset from a CSV file.

    Countries, athletes and events are created the first time they appear;
    events are keyed by (sport, year) and kept in order of first appearance.
    """

    def __init__(
        self,
        file_path: Union[str, Path],
        delimiter: str = OlympicsSettings.CSV_DELIMITER,
        encoding: str = OlympicsSettings.CSV_ENCODING
    ):
        self.file_path = Path(file_path)
        self.delimiter = delimiter
        self.encoding = encoding

    def load(self) -> OlympicsDataset:
        """
        Read the whole file.

        Returns:
            Populated OlympicsDataset

        Raises:
            DataLoadException: If the file is missing or a row is malformed
            InconsistentDataException: If an athlete's rows disagree on
                country or gender
        """
        if not self.file_path.exists():
            raise DataLoadException(
                f"Data file not found: {self.file_path}",
                file_path=str(self.file_path)
            )

        logger.info(f"Loading Olympic data from {self.file_path}")

        dataset = OlympicsDataset()
        events_by_key: Dict[Tuple[str, int], Event] = {}

        with open(self.file_path, "r", encoding=self.encoding, newline="") as f:
            reader = csv.DictReader(f, delimiter=self.delimiter)
            self._validate_header(reader.fieldnames)

            # Header is line 1
            for line_number, row in enumerate(reader, start=2):
                self._load_row(row, line_number, dataset, events_by_key)

        logger.info(
            f"Loaded {len(dataset.athletes)} athletes, {len(dataset.countries)} countries, "
            f"{len(dataset.events)} events, {dataset.participation_count} participations"
        )
        if dataset.skipped_rows:
            logger.warning(f"Skipped {dataset.skipped_rows} duplicate rows")

        return dataset

    def _validate_header(self, fieldnames: Optional[List[str]]) -> None:
        """Check that every required column is present"""
        present = {name.strip().lower() for name in (fieldnames or [])}
        missing = [col for col in OlympicsSettings.REQUIRED_COLUMNS if col not in present]
        if missing:
            raise DataLoadException(
                f"Missing required columns: {', '.join(missing)}",
                file_path=str(self.file_path),
                line_number=1
            )

    def _load_row(
        self,
        row: Dict[str, str],
        line_number: int,
        dataset: OlympicsDataset,
        events_by_key: Dict[Tuple[str, int], Event]
    ) -> None:
        """Add one participation row to the dataset"""
        # Extra cells land under the None key
        row = {
            key.strip().lower(): (value or "").strip()
            for key, value in row.items()
            if key is not None
        }

        athlete_name = row["athlete"]
        country_name = row["country"]
        sport = row["sport"]
        if not athlete_name or not country_name or not sport:
            raise DataLoadException(
                "Athlete, country and sport must not be empty",
                file_path=str(self.file_path),
                line_number=line_number
            )

        try:
            year = int(row["year"])
            gender = Gender.from_string(row["gender"])
            medal = self._parse_medal(row["medal"])
        except ValueError as e:
            raise DataLoadException(
                f"Invalid row: {e}",
                file_path=str(self.file_path),
                line_number=line_number,
                original_exception=e
            ) from e

        athlete = dataset.athletes.get(athlete_name)
        if athlete is None:
            country = dataset.countries.get(country_name)
            if country is None:
                country = Country(country_name)
                dataset.countries[country_name] = country

            athlete = Athlete(athlete_name, gender, country)
            dataset.athletes[athlete_name] = athlete
            country.add_athlete(athlete)
        elif athlete.country.name != country_name:
            raise InconsistentDataException(
                athlete_name, "country", athlete.country.name, country_name, line_number
            )
        elif athlete.gender != gender:
            raise InconsistentDataException(
                athlete_name, "gender", athlete.gender.value, gender.value, line_number
            )

        event = events_by_key.get((sport, year))
        if event is None:
            event = Event(sport, year)
            events_by_key[event.key] = event
            dataset.events.append(event)

        if athlete.has_participated(sport, year):
            logger.warning(
                f"Line {line_number}: duplicate participation of {athlete_name} "
                f"in {sport} {year}, skipping"
            )
            dataset.skipped_rows += 1
            return

        record_participation(athlete, event, medal)
        dataset.participation_count += 1

    @staticmethod
    def _parse_medal(value: str) -> Optional[MedalType]:
        if value.lower() in OlympicsSettings.NO_MEDAL_VALUES:
            return None
        return MedalType.from_string(value)


def load_olympics_data(file_path: Union[str, Path]) -> OlympicsDataset:
    """
    Load an Olympic dataset from a CSV file.

    Args:
        file_path: Path to the athletes CSV

    Returns:
        OlympicsDataset with athletes, countries and events

    Example:
        dataset = load_olympics_data("data/athletes.csv")
        api = dataset.build_stats_api()
    """
    return OlympicsDataLoader(file_path).load()
