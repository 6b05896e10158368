from datetime import date, datetime

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from src.categories.service import delete_category
from src.errors import NotFoundError, PersistenceError, ValidationFailedError
from src.history import service
from src.history.models import GameHistory, GameParticipant, GameWordResult
from src.history.schemas import GameMode, HistoryFilter, HistorySort
from tests.helpers import build_session_data, count_rows


async def _table_counts(db):
    return (
        await count_rows(db, GameHistory),
        await count_rows(db, GameParticipant),
        await count_rows(db, GameWordResult),
    )


async def test_record_session_writes_every_row(make_category, db, session_maker):
    category = await make_category(2)
    data = build_session_data(category.id, category.name, participants=2, words_each=14)

    history_id = await service.record_session(db, data)

    assert await _table_counts(db) == (1, 2, 28)

    async with session_maker() as other:
        detail = await service.get_game_history_detail(other, history_id)

    assert detail.category_id == category.id
    assert detail.category_name == data.category_name
    assert detail.game_mode == "multi"
    assert detail.played_at == data.played_at
    assert detail.total_time_seconds == 420
    assert [p.participant_name for p in detail.participants] == ["Oyuncu 1", "Oyuncu 2"]
    for stored, sent in zip(detail.participants, data.participants):
        assert stored.score == sent.score
        assert stored.rank == sent.rank
        assert [
            (r.word, r.word_hint, r.result, r.points_earned, r.letters_used, r.game_history_id)
            for r in stored.word_results
        ] == [
            (r.word, r.word_hint, r.result.value, r.points_earned, r.letters_used, history_id)
            for r in sent.word_results
        ]


async def test_failure_after_first_participant_leaves_nothing(make_category, db, monkeypatch):
    category = await make_category(2)
    data = build_session_data(category.id, participants=2)
    original = service._add_participant
    calls = []

    async def failing_add_participant(session, history_id, participant):
        calls.append(participant.name)
        if len(calls) == 2:
            raise OperationalError("INSERT INTO game_participant", {}, Exception("disk I/O error"))
        return await original(session, history_id, participant)

    monkeypatch.setattr(service, "_add_participant", failing_add_participant)

    with pytest.raises(PersistenceError):
        await service.record_session(db, data)

    assert calls == ["Oyuncu 1", "Oyuncu 2"]
    assert await _table_counts(db) == (0, 0, 0)


async def test_constraint_violation_is_rolled_back(db):
    # A category id that does not exist trips the foreign key
    data = build_session_data(category_id=999)

    with pytest.raises(PersistenceError):
        await service.record_session(db, data)

    assert await _table_counts(db) == (0, 0, 0)


async def test_record_session_without_category_reference(db):
    data = build_session_data(category_id=None, category_name="Silinmiş", participants=1)

    history_id = await service.record_session(db, data)

    history = await service.get_game_history(db, history_id)
    assert history.category_id is None
    assert history.category_name == "Silinmiş"


async def test_delete_history_cascades_to_participants_and_results(make_category, db):
    category = await make_category(2)
    kept = await service.record_session(db, build_session_data(category.id, participants=1))
    removed = await service.record_session(db, build_session_data(category.id, participants=2))

    await service.delete_game_history(db, removed)

    assert await _table_counts(db) == (1, 1, 14)
    await service.get_game_history(db, kept)
    with pytest.raises(NotFoundError):
        await service.get_game_history(db, removed)


async def test_delete_unknown_history(db):
    with pytest.raises(NotFoundError):
        await service.delete_game_history(db, 77)


async def test_bulk_and_full_delete(make_category, db):
    category = await make_category(2)
    ids = [
        await service.record_session(db, build_session_data(category.id, participants=1))
        for _ in range(3)
    ]

    deleted = await service.delete_game_history_bulk(db, [ids[0], ids[2], 9999])

    assert deleted == 2
    assert await _table_counts(db) == (1, 1, 14)

    assert await service.delete_all_game_history(db) == 1
    assert await _table_counts(db) == (0, 0, 0)


async def test_history_survives_category_deletion(make_category, db):
    category = await make_category(2, name="Meyveler")
    history_id = await service.record_session(db, build_session_data(category.id, "Meyveler"))

    await delete_category(db, category.id)

    row = (await db.execute(
        select(GameHistory.category_id, GameHistory.category_name).where(GameHistory.id == history_id)
    )).one()
    assert row.category_id is None
    assert row.category_name == "Meyveler"
    assert await count_rows(db, GameWordResult) == 28


async def _record(db, category_id, played_at, mode="multi", top_score=None):
    data = build_session_data(category_id, participants=1, words_each=2, mode=mode)
    data.played_at = played_at
    if top_score is not None:
        data.participants[0].score = top_score
    return await service.record_session(db, data)


async def test_list_history_filters_and_sorts(make_category, db):
    first = await make_category(2, name="A")
    second = await make_category(2, name="B")
    early = await _record(db, first.id, datetime(2026, 1, 5, 9, 0), top_score=500)
    middle = await _record(db, second.id, datetime(2026, 1, 10, 23, 59), mode="team", top_score=50)
    late = await _record(db, first.id, datetime(2026, 2, 1, 8, 0), mode="single", top_score=900)

    default = await service.list_game_history(db)
    assert [h.id for h in default] == [late, middle, early]

    ascending = await service.list_game_history(db, HistoryFilter(sort_by=HistorySort.DATE_ASC))
    assert [h.id for h in ascending] == [early, middle, late]

    by_score = await service.list_game_history(db, HistoryFilter(sort_by=HistorySort.SCORE_DESC))
    assert [h.id for h in by_score] == [late, early, middle]

    by_category = await service.list_game_history(db, HistoryFilter(category_id=first.id))
    assert {h.id for h in by_category} == {early, late}

    by_mode = await service.list_game_history(db, HistoryFilter(game_mode=GameMode.TEAM))
    assert [h.id for h in by_mode] == [middle]

    in_range = await service.list_game_history(
        db, HistoryFilter(start_date=date(2026, 1, 6), end_date=date(2026, 1, 10))
    )
    assert [h.id for h in in_range] == [middle]

    page = await service.list_game_history(db, HistoryFilter(limit=1, offset=1))
    assert [h.id for h in page] == [middle]


async def test_list_history_rejects_inverted_date_range(db):
    with pytest.raises(ValidationFailedError):
        await service.list_game_history(
            db, HistoryFilter(start_date=date(2026, 2, 1), end_date=date(2026, 1, 1))
        )


async def test_participants_ordered_by_rank_then_score(make_category, db):
    category = await make_category(2)
    data = build_session_data(category.id, participants=3, words_each=1)
    data.participants[0].rank = None
    history_id = await service.record_session(db, data)

    participants = await service.get_game_participants(db, history_id)

    assert [(p.participant_name, p.rank) for p in participants] == [
        ("Oyuncu 3", 1),
        ("Oyuncu 2", 2),
        ("Oyuncu 1", None),
    ]

    results = await service.get_participant_word_results(db, participants[0].id)
    assert len(results) == 1
    assert results[0].participant_id == participants[0].id


async def test_stats(make_category, db):
    empty = await service.get_game_history_stats(db)
    assert empty.total_games == 0
    assert empty.most_played_category is None
    assert empty.highest_score == 0
    assert empty.total_play_time_seconds == 0

    fruits = await make_category(2, name="Meyveler")
    animals = await make_category(2, name="Hayvanlar")
    await service.record_session(db, build_session_data(fruits.id, "Meyveler", participants=3))
    await service.record_session(db, build_session_data(fruits.id, "Meyveler", participants=1))
    await service.record_session(db, build_session_data(animals.id, "Hayvanlar", participants=1))

    stats = await service.get_game_history_stats(db)

    assert stats.total_games == 3
    assert stats.most_played_category.name == "Meyveler"
    assert stats.most_played_category.emoji == "🧪"
    assert stats.highest_score == 300
    assert stats.total_play_time_seconds == 3 * 420


async def test_stats_count_a_recreated_category_under_one_name(make_category, db):
    fruits = await make_category(2, name="Meyveler")
    plants = await make_category(2, name="Bitkiler")
    for _ in range(2):
        await service.record_session(db, build_session_data(fruits.id, "Meyveler", participants=1))
        await service.record_session(db, build_session_data(plants.id, "Bitkiler", participants=1))

    await delete_category(db, fruits.id)
    recreated = await make_category(2, name="Meyveler")
    await service.record_session(db, build_session_data(recreated.id, "Meyveler", participants=1))

    stats = await service.get_game_history_stats(db)

    assert stats.total_games == 5
    assert stats.most_played_category.name == "Meyveler"
    assert stats.most_played_category.emoji == "🧪"


async def test_stats_for_a_deleted_category_have_no_emoji(make_category, db):
    category = await make_category(2, name="Eski")
    await service.record_session(db, build_session_data(category.id, "Eski", participants=1))
    await delete_category(db, category.id)

    stats = await service.get_game_history_stats(db)

    assert stats.most_played_category.name == "Eski"
    assert stats.most_played_category.emoji is None
