from __future__ import annotations

from datetime import datetime, timezone

import pytest

from groupmatch.core.errors import Forbidden, NotFound, ValidationError
from groupmatch.database.store import message_collection
from groupmatch.modules.conversations.service import ConversationLog
from groupmatch.modules.likes.service import LikeLedger
from groupmatch.modules.matches.service import MatchRegistry


@pytest.fixture
def match_id(store) -> str:
    ledger = LikeLedger(store)
    ledger.record_like("g1", "g2")
    ledger.record_like("g2", "g1")
    return MatchRegistry(store, ledger).check_and_create_match("g1", "g2").id


def test_scenario_three_messages_in_order(store, match_id) -> None:
    log = ConversationLog(store)
    log.post_message(match_id, "g1", "hello")
    log.post_message(match_id, "g2", "hi")
    log.post_message(match_id, "g1", "how are you")

    messages = log.list_messages(match_id, "g2")

    assert [(m.author_group_id, m.text) for m in messages] == [
        ("g1", "hello"),
        ("g2", "hi"),
        ("g1", "how are you"),
    ]
    assert all(a.created_at <= b.created_at for a, b in zip(messages, messages[1:]))


def test_posted_message_is_last(store, match_id) -> None:
    log = ConversationLog(store)
    log.post_message(match_id, "g1", "first")
    posted = log.post_message(match_id, "g2", "  second  ")

    messages = log.list_messages(match_id, "g1")

    assert messages[-1].id == posted.id
    assert messages[-1].text == "second"


def test_equal_timestamps_fall_back_to_sequence(store, match_id) -> None:
    same = datetime(2024, 1, 1, tzinfo=timezone.utc)
    collection = message_collection(match_id)
    store.collections[collection] = [
        {"id": "b", "match_id": match_id, "author_group_id": "g2", "text": "two", "created_at": same, "seq": 2},
        {"id": "a", "match_id": match_id, "author_group_id": "g1", "text": "one", "created_at": same, "seq": 1},
    ]

    assert [m.id for m in ConversationLog(store).list_messages(match_id, "g1")] == ["a", "b"]


def test_outsider_cannot_post(store, match_id) -> None:
    with pytest.raises(Forbidden):
        ConversationLog(store).post_message(match_id, "g3", "let me in")
    assert store.read_all(message_collection(match_id)) == []


def test_outsider_cannot_read(store, match_id) -> None:
    with pytest.raises(Forbidden):
        ConversationLog(store).list_messages(match_id, "g3")


def test_blank_message_rejected(store, match_id) -> None:
    with pytest.raises(ValidationError):
        ConversationLog(store).post_message(match_id, "g1", "   ")


def test_overlong_message_rejected(store, match_id, monkeypatch) -> None:
    from groupmatch.config import settings

    monkeypatch.setattr(settings, "message_max_length", 5)
    with pytest.raises(ValidationError):
        ConversationLog(store).post_message(match_id, "g1", "too long")


def test_unknown_match(store) -> None:
    with pytest.raises(NotFound):
        ConversationLog(store).list_messages("missing", "g1")
