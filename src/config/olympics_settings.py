"""
Olympic Stats Settings

Central constants for data loading and logging.
"""


class OlympicsSettings:
    """
    Dataset and logging configuration.

    Change these to point the loader at another file or layout.
    """

    # ================================================================
    # DATA FILE
    # ================================================================

    DEFAULT_DATA_FILE = "data/athletes.csv"

    CSV_DELIMITER = ","
    CSV_ENCODING = "utf-8"

    # Header columns the loader expects (order does not matter)
    REQUIRED_COLUMNS = ("athlete", "gender", "country", "sport", "year", "medal")

    # Medal cells meaning "took part, no medal"
    NO_MEDAL_VALUES = ("", "na", "none", "-")

    # ================================================================
    # LOGGING
    # ================================================================

    LOG_DIR = "logs"
    LOG_LEVEL = "INFO"
