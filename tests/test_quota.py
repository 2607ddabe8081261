"""Tests for the AI question quota, settings defaults and the Pro upgrade."""

from datetime import datetime, timedelta

import pytest

from zengym.activity import ActivityAggregator, QuotaStatus

from .conftest import NOW, fixed_clock


class TestCanAskAI:
    def test_no_settings_fails_closed(self, aggregator, store):
        assert aggregator.can_ask_ai(1) == QuotaStatus(False, 0)
        # the check never creates a row
        assert store.get_settings(1) is None

    def test_first_question_of_day_resets_counter(self, aggregator, store):
        store.upsert_settings(
            1, daily_ai_questions=3, last_ai_question_date=NOW - timedelta(days=1)
        )

        status = aggregator.can_ask_ai(1)

        assert status == QuotaStatus(True, 2)
        settings = store.get_settings(1)
        assert settings.daily_ai_questions == 0
        assert settings.last_ai_question_date == NOW

    def test_never_asked_resets(self, aggregator, store):
        store.upsert_settings(1)
        assert aggregator.can_ask_ai(1) == QuotaStatus(True, 2)
        assert store.get_settings(1).last_ai_question_date == NOW

    @pytest.mark.parametrize("used,left", [(0, 3), (1, 2), (2, 1), (3, 0), (7, 0)])
    def test_same_day_remaining(self, aggregator, store, used, left):
        store.upsert_settings(
            1, daily_ai_questions=used, last_ai_question_date=NOW - timedelta(hours=2)
        )

        assert aggregator.can_ask_ai(1) == QuotaStatus(left > 0, left)

    def test_pro_is_unlimited(self, aggregator, store):
        store.upsert_settings(
            1,
            is_pro=True,
            pro_expires_at=NOW + timedelta(days=10),
            daily_ai_questions=50,
            last_ai_question_date=NOW,
        )

        assert aggregator.can_ask_ai(1) == QuotaStatus(True, -1)

    def test_pro_without_expiry_is_unlimited(self, aggregator, store):
        store.upsert_settings(1, is_pro=True, daily_ai_questions=9, last_ai_question_date=NOW)
        assert aggregator.can_ask_ai(1).questions_left == -1

    def test_expired_pro_uses_free_quota(self, aggregator, store):
        store.upsert_settings(
            1,
            is_pro=True,
            pro_expires_at=NOW - timedelta(minutes=1),
            daily_ai_questions=3,
            last_ai_question_date=NOW,
        )

        assert aggregator.can_ask_ai(1) == QuotaStatus(False, 0)

    def test_to_dict(self):
        assert QuotaStatus(True, 2).to_dict() == {"can_ask": True, "questions_left": 2}


class TestIncrement:
    def test_noop_without_settings(self, aggregator, store):
        aggregator.increment_ai_questions(1)
        assert store.get_settings(1) is None

    def test_increments_and_stamps_today(self, aggregator, store):
        store.upsert_settings(1, daily_ai_questions=1, last_ai_question_date=NOW)

        aggregator.increment_ai_questions(1)

        settings = store.get_settings(1)
        assert settings.daily_ai_questions == 2
        assert settings.last_ai_question_date == NOW

    def test_fourth_question_is_refused(self, aggregator, store):
        store.upsert_settings(1)

        for _ in range(3):
            assert aggregator.can_ask_ai(1).can_ask
            aggregator.increment_ai_questions(1)

        assert aggregator.can_ask_ai(1) == QuotaStatus(False, 0)

    def test_quota_comes_back_next_day(self, store):
        store.upsert_settings(1, daily_ai_questions=3, last_ai_question_date=NOW)
        tomorrow = ActivityAggregator(store, clock=lambda: NOW + timedelta(days=1))

        assert tomorrow.can_ask_ai(1) == QuotaStatus(True, 2)

    def test_custom_daily_limit(self, store):
        aggregator = ActivityAggregator(store, clock=fixed_clock, daily_limit=5)
        store.upsert_settings(1, daily_ai_questions=1, last_ai_question_date=NOW)

        assert aggregator.can_ask_ai(1) == QuotaStatus(True, 4)


class TestSettings:
    def test_get_or_create_uses_defaults(self, aggregator, store):
        settings = aggregator.get_or_create_settings(1)

        assert settings.workout_reminder_time == "08:00"
        assert settings.affirmation_time == "07:00"
        assert settings.notifications_enabled is True
        assert settings.is_pro is False
        assert settings.daily_ai_questions == 0
        assert store.get_settings(1) is settings

    def test_get_or_create_returns_existing(self, aggregator, store):
        existing = store.upsert_settings(1, dark_mode=True)
        assert aggregator.get_or_create_settings(1) is existing

    def test_update_settings_rejects_quota_fields(self, aggregator):
        with pytest.raises(ValueError):
            aggregator.update_settings(1, {"is_pro": True})

    def test_update_settings_applies_preferences(self, aggregator, store):
        aggregator.update_settings(1, {"dark_mode": True, "workout_reminder_time": "06:15"})

        settings = store.get_settings(1)
        assert settings.dark_mode is True
        assert settings.workout_reminder_time == "06:15"

    def test_upgrade_to_pro(self, aggregator, store):
        store.upsert_settings(1, daily_ai_questions=3, last_ai_question_date=NOW)

        settings = aggregator.upgrade_to_pro(1)

        assert settings.is_pro is True
        assert settings.daily_ai_questions == 0
        assert settings.pro_expires_at == datetime(2025, 12, 19, 15, 30)
        assert aggregator.can_ask_ai(1) == QuotaStatus(True, -1)

    def test_upgrade_creates_settings(self, aggregator, store):
        aggregator.upgrade_to_pro(1)
        assert store.get_settings(1).is_pro is True
