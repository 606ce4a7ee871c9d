"""
Olympic Statistics Package

Query engine over the Olympic entity graph.
"""

from .stats_api import OlympicStatsAPI
from .models import MedalRecord, ParticipationRecord

__all__ = [
    'OlympicStatsAPI',
    'MedalRecord',
    'ParticipationRecord',
]
