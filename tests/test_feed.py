from __future__ import annotations

import pytest

from groupmatch.core.errors import NotFound, StorageError, ValidationError
from groupmatch.modules.feed.service import CandidateFeed, advance_cursor


def ids(groups) -> list[str]:
    return [g.id for g in groups]


def test_candidates_exclude_self_and_liked(store) -> None:
    feed = CandidateFeed(store)
    assert ids(feed.list_candidates("g1")) == ["g2", "g3", "g4"]

    feed.like_candidate("g1", "g3")

    assert ids(feed.list_candidates("g1")) == ["g2", "g4"]
    # liking is directional: g3 still sees g1
    assert "g1" in ids(feed.list_candidates("g3"))


def test_candidates_for_unknown_group(store) -> None:
    with pytest.raises(NotFound):
        CandidateFeed(store).list_candidates("missing")


def test_cursor_resumes_after_pass(store) -> None:
    feed = CandidateFeed(store)
    result = feed.pass_candidate("g1", "g2")

    assert result.cursor == "g2"
    assert result.like is None
    assert store.read_all("likes") == []
    assert ids(feed.list_candidates("g1", after=result.cursor)) == ["g3", "g4"]


def test_page_reports_more(store) -> None:
    page = CandidateFeed(store).get_page("g1", limit=2)

    assert [c.id for c in page.candidates] == ["g2", "g3"]
    assert page.has_more is True
    assert page.cursor is None


def test_advance_cursor_never_moves_back() -> None:
    assert advance_cursor(None, "g2") == "g2"
    assert advance_cursor("g3", "g2") == "g3"
    assert advance_cursor("g2", "g4") == "g4"


def test_pass_self_rejected(store) -> None:
    with pytest.raises(ValidationError):
        CandidateFeed(store).pass_candidate("g1", "g1")


def test_scenario_like_then_reciprocate(store) -> None:
    feed = CandidateFeed(store)

    first = feed.like_candidate("g1", "g2")
    assert first.match is None
    assert first.cursor == "g2"
    assert len(store.read_all("likes")) == 1
    assert store.read_all("matches") == []
    assert "g2" not in ids(feed.list_candidates("g1"))

    second = feed.like_candidate("g2", "g1")
    assert second.match is not None
    assert second.match.other_group.id == "g1"
    assert len(store.read_all("matches")) == 1


def test_scenario_double_like_without_reciprocation(store) -> None:
    feed = CandidateFeed(store)

    feed.like_candidate("g1", "g2")
    again = feed.like_candidate("g1", "g2")

    assert again.match is None
    assert len(store.read_all("likes")) == 1
    assert store.read_all("matches") == []


def test_like_surfaces_storage_error(store) -> None:
    store.fail_with = "backend down"

    with pytest.raises(StorageError):
        CandidateFeed(store).like_candidate("g1", "g2", cursor=None)
