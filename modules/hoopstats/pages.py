"""
Page handlers for hoopstats.

Each handler takes the Database and a RequestContext and returns a
PageResponse. Nothing here touches the web framework, so handlers can be
called directly.
"""

from typing import Any, Callable, Dict, List, Optional

from modules.database import Database, DatabaseError
from modules.logging_config import get_logger, log_function_call
from .context import PageResponse, RequestContext
from .forms import SearchForm

logger = get_logger('hoopstats.pages')


def _require_db(db: Optional[Database]) -> Database:
    if db is None:
        raise DatabaseError("Database not available")
    return db


def not_found(entity: str, identifier: str) -> PageResponse:
    """404 page for a lookup that matched no row."""
    logger.info(f"{entity} {identifier!r} not found")
    return PageResponse(
        template='not_found.html',
        data={
            'pageTitle': f'{entity} not found',
            'entity': entity,
            'identifier': identifier
        },
        status=404
    )


@log_function_call(logger)
def home(db: Optional[Database], ctx: RequestContext) -> PageResponse:
    """Home page; the current user (or empty string) is passed through as is."""
    return PageResponse('home.html', {'user': ctx.user, 'pageTitle': 'Home'})


@log_function_call(logger, log_args=True)
def player_item(db: Optional[Database], ctx: RequestContext) -> PageResponse:
    player_id = ctx.path_params['playerID']
    player = _require_db(db).players.get_by_id(player_id)
    if player is None:
        return not_found('Player', player_id)

    return PageResponse('item.html', {
        'pageTitle': f"{player['fname']} {player['lname']}",
        'player': player
    })


@log_function_call(logger, log_args=True)
def team_item(db: Optional[Database], ctx: RequestContext) -> PageResponse:
    team_id = ctx.path_params['teamID']
    team = _require_db(db).teams.get_by_id(team_id)
    if team is None:
        return not_found('Team', team_id)

    return PageResponse('team_item.html', {
        'pageTitle': team['name'],
        'team': team
    })


@log_function_call(logger, log_args=True)
def game_item(db: Optional[Database], ctx: RequestContext) -> PageResponse:
    game_id = ctx.path_params['gameID']
    game = _require_db(db).games.get_by_id(game_id)
    if game is None:
        return not_found('Game', game_id)

    return PageResponse('game_item.html', {
        'pageTitle': f"{game['awayteamID']} @ {game['hometeamID']} - {game['date']}",
        'game': game
    })


def _search_page(ctx: RequestContext, template: str, title: str,
                 search: Callable[[str], List[Dict[str, Any]]]) -> PageResponse:
    """
    Shared form handling for the three search pages.

    A valid submission runs exactly one search query. An absent or blank
    submission re-renders the form with no results and runs no query.
    """
    form = SearchForm(ctx.form)
    results: List[Dict[str, Any]] = []
    searched = form.validate()

    if searched:
        results = search(form.term)
        logger.info(f"{title}: {form.term!r} matched {len(results)} rows")
    elif form.errors:
        logger.debug(f"{title}: rejected submission ({'; '.join(form.errors)})")

    return PageResponse(template, {
        'pageTitle': title,
        'form': form,
        'results': results,
        'searched': searched
    })


@log_function_call(logger)
def player_search(db: Optional[Database], ctx: RequestContext) -> PageResponse:
    return _search_page(ctx, 'search.html', 'Search',
                        lambda term: _require_db(db).players.search(term))


@log_function_call(logger)
def team_search(db: Optional[Database], ctx: RequestContext) -> PageResponse:
    return _search_page(ctx, 'team_search.html', 'Search Teams',
                        lambda term: _require_db(db).teams.search(term))


@log_function_call(logger)
def game_search(db: Optional[Database], ctx: RequestContext) -> PageResponse:
    return _search_page(ctx, 'game_search.html', 'Search Games',
                        lambda term: _require_db(db).games.search(term))
