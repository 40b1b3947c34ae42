"""Tests for tournament session ids, status and participation gating."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from quizboard.core.errors import AlreadyParticipatedError, ConfigurationError, ValidationError
from quizboard.services import (
    TournamentWindow,
    check_participation,
    get_tournament_status,
    submit_tournament_result,
)
from quizboard.services.tournament import DEFAULT_TOURNAMENT_ID

START = "2026-03-10T00:00:00Z"


# ============================================================================
# SESSION ID
# ============================================================================


class TestSessionId:
    def test_default_without_start(self):
        assert TournamentWindow().session_id == DEFAULT_TOURNAMENT_ID

    def test_derived_from_start(self):
        assert TournamentWindow.from_strings(START).session_id == "tournament_2026-03-10T00:00:00Z"

    def test_same_instant_same_session(self):
        spellings = [START, "2026-03-10T00:00:00+00:00", "2026-03-10T02:00:00+02:00", "2026-03-10T00:00:00"]

        assert {TournamentWindow.from_strings(raw).session_id for raw in spellings} == {
            "tournament_2026-03-10T00:00:00Z"
        }

    def test_new_start_new_session(self):
        assert (
            TournamentWindow.from_strings(START).session_id
            != TournamentWindow.from_strings("2026-03-17T00:00:00Z").session_id
        )

    def test_end_does_not_change_session(self):
        assert (
            TournamentWindow.from_strings(START, "2026-03-12T00:00:00Z").session_id
            == TournamentWindow.from_strings(START).session_id
        )

    def test_malformed_instant(self):
        with pytest.raises(ConfigurationError):
            TournamentWindow.from_strings("next tuesday")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("TOURNAMENT_START_UTC", START)
        monkeypatch.setenv("TOURNAMENT_END_UTC", "2026-03-11T00:00:00Z")

        window = TournamentWindow.from_env()

        assert window.start == datetime(2026, 3, 10, tzinfo=timezone.utc)
        assert window.end == datetime(2026, 3, 11, tzinfo=timezone.utc)


# ============================================================================
# STATUS
# ============================================================================


class TestStatus:
    def test_unconfigured_is_always_active(self):
        assert get_tournament_status(TournamentWindow()) == {
            "status": "active",
            "startTime": None,
            "endTime": None,
        }

    @pytest.mark.parametrize(
        "now, expected",
        [
            (datetime(2026, 3, 9, 23, 59, tzinfo=timezone.utc), "upcoming"),
            (datetime(2026, 3, 10, tzinfo=timezone.utc), "active"),
            (datetime(2026, 3, 16, tzinfo=timezone.utc), "active"),
            (datetime(2026, 3, 17, tzinfo=timezone.utc), "active"),
            (datetime(2026, 3, 17, 0, 0, 1, tzinfo=timezone.utc), "ended"),
        ],
    )
    def test_default_seven_day_window(self, now, expected):
        status = get_tournament_status(TournamentWindow.from_strings(START), now=now)

        assert status["status"] == expected
        assert status["startTime"] == "2026-03-10T00:00:00Z"
        assert status["endTime"] == "2026-03-17T00:00:00Z"

    def test_explicit_end(self):
        window = TournamentWindow.from_strings(START, "2026-03-11T12:00:00Z")

        status = get_tournament_status(window, now=datetime(2026, 3, 12, tzinfo=timezone.utc))

        assert status == {
            "status": "ended",
            "startTime": "2026-03-10T00:00:00Z",
            "endTime": "2026-03-11T12:00:00Z",
        }


# ============================================================================
# PARTICIPATION
# ============================================================================


class TestParticipation:
    def test_check_before_and_after_submission(self, session, now):
        window = TournamentWindow.from_strings(START)

        assert check_participation(session, "ana", window) is False
        submit_tournament_result(session, {"username": "ana", "score": 10}, window, now=now)
        assert check_participation(session, "ana", window) is True
        assert check_participation(session, "ben", window) is False

    @pytest.mark.parametrize("username", [None, "", "   ", 42, ["ana"]])
    def test_check_requires_username(self, session, username):
        with pytest.raises(ValidationError):
            check_participation(session, username, TournamentWindow())

    def test_check_normalizes_username(self, session, now):
        window = TournamentWindow()
        submit_tournament_result(session, {"username": "ana", "score": 1}, window, now=now)

        assert check_participation(session, "  ana ", window) is True

    def test_submission_is_stamped(self, session, now):
        window = TournamentWindow.from_strings(START)

        entry = submit_tournament_result(
            session,
            {
                "username": "ana",
                "score": 42,
                "correctCount": 4,
                "totalQuestions": 5,
                "timeSpentSeconds": 73.5,
            },
            window,
            now=now,
        )

        assert entry.tournament_id == window.session_id
        assert (entry.score, entry.correct_count, entry.total_questions) == (42, 4, 5)
        assert entry.time_spent_seconds == 73.5

    def test_legacy_field_names(self, session, now):
        entry = submit_tournament_result(
            session,
            {"username": "ana", "score": 1, "correct": 3, "timeSpent": 12},
            TournamentWindow(),
            now=now,
        )

        assert entry.correct_count == 3
        assert entry.time_spent_seconds == 12

    def test_second_attempt_rejected(self, session, now):
        window = TournamentWindow.from_strings(START)
        submit_tournament_result(session, {"username": "ana", "score": 10}, window, now=now)

        with pytest.raises(AlreadyParticipatedError):
            submit_tournament_result(
                session, {"username": "ana", "score": 99}, window, now=now + timedelta(minutes=1)
            )

        assert check_participation(session, "ana", window) is True

    def test_new_session_allows_new_attempt(self, session, now):
        submit_tournament_result(
            session, {"username": "ana", "score": 10}, TournamentWindow.from_strings(START), now=now
        )

        next_window = TournamentWindow.from_strings("2026-03-17T00:00:00Z")
        entry = submit_tournament_result(
            session, {"username": "ana", "score": 20}, next_window, now=now + timedelta(days=7)
        )

        assert entry.tournament_id == next_window.session_id

    def test_submission_requires_username(self, session):
        with pytest.raises(ValidationError):
            submit_tournament_result(session, {"score": 10}, TournamentWindow())
