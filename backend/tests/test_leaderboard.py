"""
Tests for services/leaderboard.py.
"""

import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.leaderboard import Leaderboard, InvalidScore, MAX_NAME_LENGTH


class TestLeaderboard:
    """Ranking and truncation."""

    def test_empty_by_default(self):
        board = Leaderboard()
        assert board.entries() == []
        assert len(board) == 0

    def test_submit_returns_sorted_snapshot(self):
        board = Leaderboard()
        board.submit("alice", 3)
        result = board.submit("bob", 7)

        assert result == [{"name": "bob", "score": 7}, {"name": "alice", "score": 3}]
        assert board.entries() == result

    def test_keeps_only_top_ten(self):
        board = Leaderboard()
        for score in range(12):
            board.submit(f"player{score}", score)

        entries = board.entries()
        assert len(entries) == 10
        assert [e["score"] for e in entries] == list(range(11, 1, -1))

    def test_low_score_does_not_displace_full_board(self):
        board = Leaderboard(size=3)
        for name, score in [("a", 5), ("b", 6), ("c", 7)]:
            board.submit(name, score)

        result = board.submit("d", 1)

        assert [e["name"] for e in result] == ["c", "b", "a"]

    def test_ties_keep_submission_order(self):
        board = Leaderboard()
        board.submit("first", 4)
        board.submit("second", 4)
        board.submit("third", 9)

        assert [e["name"] for e in board.entries()] == ["third", "first", "second"]

    def test_name_is_stripped(self):
        board = Leaderboard()
        assert board.submit("  ana  ", 1) == [{"name": "ana", "score": 1}]

    def test_long_name_is_truncated(self):
        board = Leaderboard()
        result = board.submit("  " + "x" * (MAX_NAME_LENGTH + 10), 1)
        assert result == [{"name": "x" * MAX_NAME_LENGTH, "score": 1}]

    def test_snapshot_is_a_copy(self):
        board = Leaderboard()
        board.submit("alice", 1)
        board.entries()[0]["score"] = 999
        assert board.entries()[0]["score"] == 1


class TestValidation:
    """Malformed submissions are rejected."""

    @pytest.mark.parametrize("name,score", [
        ("", 1),
        ("   ", 1),
        (None, 1),
        (42, 1),
        ("alice", -1),
        ("alice", 1.5),
        ("alice", "10"),
        ("alice", True),
        ("alice", None),
    ])
    def test_invalid_entries_raise(self, name, score):
        board = Leaderboard()
        with pytest.raises(InvalidScore):
            board.submit(name, score)
        assert board.entries() == []

    def test_invalid_score_is_value_error(self):
        with pytest.raises(ValueError):
            Leaderboard().submit("alice", -5)

    def test_zero_score_is_allowed(self):
        assert Leaderboard().submit("alice", 0) == [{"name": "alice", "score": 0}]
