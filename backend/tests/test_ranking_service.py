from quiz_api.models.ranking import RankingEntry
from quiz_api.services.ranking import get_top_ranking


def test_top_ranking_is_unbounded_and_sorted(session):
    session.add_all([RankingEntry(username=f"p{i}", score=i * 3 % 17, level="A") for i in range(40)])
    session.commit()

    rows = get_top_ranking(session)
    assert len(rows) == 40
    scores = [r.score for r in rows]
    assert scores == sorted(scores, reverse=True)


def test_top_ranking_empty(session):
    assert get_top_ranking(session) == []
