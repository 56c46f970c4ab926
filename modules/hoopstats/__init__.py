"""
hoopstats page handlers.
~~~~~~~~~~~~~~~~~~~~~~~~

Framework-free request handlers for the basketball statistics browser.
"""

__title__ = 'hoopstats'
__license__ = 'None'
__version__ = '0.1.0'

from .context import RequestContext, PageResponse
from .forms import SearchForm
from .pages import (
    home, player_item, team_item, game_item,
    player_search, team_search, game_search
)

__all__ = [
    'RequestContext',
    'PageResponse',
    'SearchForm',
    'home',
    'player_item',
    'team_item',
    'game_item',
    'player_search',
    'team_search',
    'game_search'
]
