from __future__ import annotations

import pytest

from modules import hoopstats
from modules.database import Database, DatabaseError
from modules.hoopstats import RequestContext, SearchForm


def test_home_passes_user_through(db: Database, pool) -> None:
    page = hoopstats.home(db, RequestContext(user="coach"))

    assert page.template == "home.html"
    assert page.data == {"user": "coach", "pageTitle": "Home"}
    assert pool.executed == []


def test_player_item_title_is_full_name(db: Database) -> None:
    page = hoopstats.player_item(db, RequestContext(path_params={"playerID": "2"}))

    assert page.status == 200
    assert page.template == "item.html"
    assert page.data["pageTitle"] == "Amy Jones"
    assert page.data["player"]["teamname"] == "TeamB"


@pytest.mark.parametrize("team_id, name", [("TA", "TeamA"), ("TC", "TeamC"), ("TD", "100% Ballers")])
def test_team_item_title_is_team_name(db: Database, team_id: str, name: str) -> None:
    page = hoopstats.team_item(db, RequestContext(path_params={"teamID": team_id}))

    assert page.template == "team_item.html"
    assert page.data["pageTitle"] == name


def test_game_item_title_is_away_at_home_with_date(db: Database) -> None:
    page = hoopstats.game_item(db, RequestContext(path_params={"gameID": "1"}))

    assert page.template == "game_item.html"
    assert page.data["pageTitle"] == "TB @ TA - 2016-11-02"


@pytest.mark.parametrize(
    "handler, param, entity",
    [
        (hoopstats.player_item, "playerID", "Player"),
        (hoopstats.team_item, "teamID", "Team"),
        (hoopstats.game_item, "gameID", "Game"),
    ],
)
def test_missing_identifier_is_not_found(db: Database, handler, param: str, entity: str) -> None:
    page = handler(db, RequestContext(path_params={param: "does-not-exist"}))

    assert page.status == 404
    assert page.template == "not_found.html"
    assert page.data["pageTitle"] == f"{entity} not found"
    assert page.data["identifier"] == "does-not-exist"


@pytest.mark.parametrize("term", ["", "   ", "\t\n"])
def test_blank_search_issues_no_query(db: Database, pool, term: str) -> None:
    page = hoopstats.player_search(db, RequestContext(method="POST", form={"search": term}))

    assert pool.executed == []
    assert page.data["results"] == []
    assert page.data["searched"] is False
    assert page.data["form"].errors == [SearchForm.blank_message]


def test_unsubmitted_search_shows_empty_form(db: Database, pool) -> None:
    page = hoopstats.team_search(db, RequestContext())

    assert pool.executed == []
    assert page.template == "team_search.html"
    assert page.data["pageTitle"] == "Search Teams"
    assert page.data["results"] == []
    assert page.data["form"].errors == []


def test_player_search_returns_exact_matches(db: Database) -> None:
    page = hoopstats.player_search(db, RequestContext(method="POST", form={"search": "  Jo "}))

    names = {(r["fname"], r["lname"]) for r in page.data["results"]}
    assert names == {("John", "Smith"), ("Amy", "Jones")}
    assert page.data["searched"] is True
    assert page.data["pageTitle"] == "Search"


def test_search_with_no_matches_is_distinct_from_unsubmitted(db: Database) -> None:
    page = hoopstats.game_search(db, RequestContext(method="POST", form={"search": "1999"}))

    assert page.template == "game_search.html"
    assert page.data["pageTitle"] == "Search Games"
    assert page.data["results"] == []
    assert page.data["searched"] is True


def test_search_term_with_wildcards_is_literal(db: Database) -> None:
    page = hoopstats.team_search(db, RequestContext(method="POST", form={"search": "%"}))

    assert [r["teamID"] for r in page.data["results"]] == ["TD"]


def test_repeated_requests_are_identical(db: Database) -> None:
    ctx = RequestContext(method="POST", form={"search": "Team"})
    first = hoopstats.team_search(db, ctx).data["results"]
    second = hoopstats.team_search(db, ctx).data["results"]
    assert first == second

    lookup = RequestContext(path_params={"playerID": "3"})
    assert hoopstats.player_item(db, lookup).data == hoopstats.player_item(db, lookup).data


def test_store_fault_propagates(db: Database, pool) -> None:
    pool.broken = True

    with pytest.raises(DatabaseError):
        hoopstats.team_item(db, RequestContext(path_params={"teamID": "TA"}))


def test_missing_database_is_a_store_fault() -> None:
    with pytest.raises(DatabaseError, match="not available"):
        hoopstats.player_search(None, RequestContext(method="POST", form={"search": "Jo"}))
