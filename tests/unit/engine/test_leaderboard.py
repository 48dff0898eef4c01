"""Unit tests for the leaderboard engine."""

import datetime

from app.db.store import DataStore
from app.engine.leaderboard import compute_leaderboard, rank_entries
from app.schemas.leaderboard import LeaderboardEntry

DAY = datetime.timedelta(days=1)


def _entry(player_id: str, avg_score: float, total_goals: int) -> LeaderboardEntry:
    return LeaderboardEntry(player_id=player_id, first_name="F", last_name="L", center_name="C",
                            avg_score=avg_score, total_goals=total_goals)


# ======================================================================
# rank_entries
# ======================================================================


class TestRankEntries:
    def test_sorted_by_score_then_goals(self):
        ranked = rank_entries([_entry("a", 80.0, 10), _entry("b", 90.0, 5), _entry("c", 80.0, 30)])
        assert [e.player_id for e in ranked] == ["b", "c", "a"]
        assert [e.rank for e in ranked] == [1, 2, 3]

    def test_full_ties_keep_input_order_with_distinct_ranks(self):
        ranked = rank_entries([_entry("a", 70.0, 10), _entry("b", 70.0, 10)])
        assert [e.player_id for e in ranked] == ["a", "b"]
        assert [e.rank for e in ranked] == [1, 2]


# ======================================================================
# compute_leaderboard
# ======================================================================


class TestComputeLeaderboard:
    def test_one_entry_per_profile(self, make_profile, make_session, now):
        p1 = make_profile(email="a@example.com", first_name="Ana")
        p2 = make_profile(email="b@example.com", first_name="Ben")
        p3 = make_profile(email="c@example.com", first_name="Cal")
        store = DataStore(profiles=[p1, p2, p3], sessions=[
            make_session(p1.id, now - DAY, score=70.0),
            make_session(p2.id, now - DAY, score=95.0),
        ])

        board = compute_leaderboard(store, now)
        assert len(board) == 3
        assert sorted(e.rank for e in board) == [1, 2, 3]
        assert [e.player_id for e in board] == [p2.id, p1.id, p3.id]

    def test_player_without_sessions_is_zero_row(self, make_profile, now):
        player = make_profile()
        entry = compute_leaderboard(DataStore(profiles=[player]), now)[0]
        assert entry.rank == 1
        assert entry.total_sessions == 0
        assert entry.avg_score == 0
        assert entry.best_streak == 0
        assert entry.avg_speed_of_play == 0
        assert entry.center_name == player.center_name

    def test_aggregates(self, make_profile, make_session, now):
        player = make_profile()
        store = DataStore(profiles=[player], sessions=[
            make_session(player.id, now - DAY, score=81.0, number_of_goals=20, number_of_balls=100, best_streak=12,
                         avg_speed_of_play=4.0),
            make_session(player.id, now - 2 * DAY, score=80.0, number_of_goals=15, number_of_balls=90, best_streak=30,
                         avg_speed_of_play=4.25),
            make_session(player.id, now + DAY, score=10.0, number_of_goals=500),
        ])

        entry = compute_leaderboard(store, now)[0]
        assert entry.total_sessions == 2
        assert entry.avg_score == 80.5
        assert entry.total_goals == 35
        assert entry.total_balls == 190
        assert entry.best_streak == 30
        assert entry.avg_speed_of_play == 4.13

    def test_goals_break_score_ties(self, make_profile, make_session, now):
        low = make_profile(email="low@example.com")
        high = make_profile(email="high@example.com")
        store = DataStore(profiles=[low, high], sessions=[
            make_session(low.id, now - DAY, score=85.0, number_of_goals=10),
            make_session(high.id, now - DAY, score=85.0, number_of_goals=40),
        ])

        board = compute_leaderboard(store, now)
        assert [e.player_id for e in board] == [high.id, low.id]

    def test_adjacent_rows_are_ordered(self, make_profile, make_session, now):
        profiles = [make_profile(email=f"p{i}@example.com") for i in range(5)]
        scores = [60.0, 90.0, 75.0, 90.0, 75.0]
        goals = [5, 10, 30, 50, 30]
        store = DataStore(profiles=profiles, sessions=[
            make_session(p.id, now - DAY, score=s, number_of_goals=g) for p, s, g in zip(profiles, scores, goals)
        ])

        board = compute_leaderboard(store, now)
        assert [e.rank for e in board] == [1, 2, 3, 4, 5]
        keys = [(e.avg_score, e.total_goals) for e in board]
        assert keys == sorted(keys, reverse=True)
