import pytest

from flappy.config import BlankNamePolicy
from flappy.data_models import RankingEntry
from flappy.ranking import Ranking, RankingNameError


def test_ranking_is_capped_and_sorted() -> None:
    ranking = Ranking(size=5)
    for i, score in enumerate([3, 9, 1, 7, 5, 8, 2, 6]):
        ranking.submit(f"p{i}", score)

    scores = [e.score for e in ranking.entries()]
    assert len(ranking) == 5
    assert scores == [9, 8, 7, 6, 5]


def test_ties_keep_submission_order() -> None:
    ranking = Ranking(size=3)
    ranking.submit("first", 4)
    ranking.submit("second", 4)
    ranking.submit("third", 4)
    ranking.submit("fourth", 4)
    assert [e.name for e in ranking.entries()] == ["first", "second", "third"]


def test_submit_returns_none_when_entry_misses_the_cut() -> None:
    ranking = Ranking([RankingEntry("a", 10), RankingEntry("b", 9)], size=2)
    assert ranking.submit("late", 9) is None
    assert [e.name for e in ranking.entries()] == ["a", "b"]

    assert ranking.submit("top", 11) == RankingEntry("top", 11)


@pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
def test_blank_name_is_rejected_without_changes(name) -> None:
    ranking = Ranking([RankingEntry("a", 3)])
    with pytest.raises(RankingNameError):
        ranking.submit(name, 50)
    assert ranking.entries() == (RankingEntry("a", 3),)


def test_blank_name_can_be_substituted() -> None:
    ranking = Ranking(blank_name_policy=BlankNamePolicy.SUBSTITUTE)
    assert ranking.submit("  ", 2) == RankingEntry("Anonymous", 2)


def test_names_are_trimmed_and_capped() -> None:
    ranking = Ranking()
    entry = ranking.submit("  " + "x" * 40 + "  ", 1)
    assert entry.name == "x" * 16


def test_loaded_entries_are_reordered_and_truncated() -> None:
    loaded = [RankingEntry("low", 1), RankingEntry("high", 5), RankingEntry("mid", 3)]
    ranking = Ranking(loaded, size=2)
    assert ranking.entries() == (RankingEntry("high", 5), RankingEntry("mid", 3))


def test_invalid_arguments() -> None:
    with pytest.raises(ValueError):
        Ranking(size=0)
    with pytest.raises(ValueError):
        Ranking().submit("bob", -1)
