"""
Arknights operator catalog builder.
"""

from .alias_generator import generate_aliases
from .catalog_builder import build_catalog, get_operators
from .game_data_fetcher import FetchError, GameDataFetcher
from .taxonomy_builder import ProfessionTaxonomy, UnknownIdentifierError

__all__ = [
    'FetchError',
    'GameDataFetcher',
    'ProfessionTaxonomy',
    'UnknownIdentifierError',
    'build_catalog',
    'generate_aliases',
    'get_operators',
]
