# backend/zengym/activity.py
"""
Activity aggregation: workout stats, streaks, the 7-day histogram and the
free-tier AI question quota.

`compute_stats` and `compute_weekly_histogram` are pure functions over
already-loaded sessions. `ActivityAggregator` wires them to an
`ActivityStore` and owns the quota state machine.
"""
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Dict, Iterable, List, Optional, Set

from .clock import add_months, day_of, utc_now, window_start

logger = logging.getLogger(__name__)

STATS_WINDOW_DAYS = 30
WEEK_WINDOW_DAYS = 7
STREAK_LOOKBACK_DAYS = 30
DAILY_AI_QUESTION_LIMIT = 3
UNLIMITED = -1

# indexed by date.weekday() (Monday == 0); kept locale independent
WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# preference fields the user may change through the settings API
PREFERENCE_FIELDS = (
    "workout_reminder_enabled",
    "workout_reminder_time",
    "affirmation_enabled",
    "affirmation_time",
    "dark_mode",
    "notifications_enabled",
)


# ------------------------------
# Date bucketing
# ------------------------------
def _session_days(sessions: Iterable) -> Set[date]:
    return {day_of(s.completed_at) for s in sessions}


def _sessions_on(sessions: Iterable, day: date) -> List:
    return [s for s in sessions if day_of(s.completed_at) == day]


def compute_streak(sessions: Iterable, today: date, lookback: int = STREAK_LOOKBACK_DAYS) -> int:
    """
    Consecutive days with at least one session, walking back from today.
    A missing session today does not break the chain; any later gap does.
    """
    days = _session_days(sessions)
    streak = 0
    for offset in range(lookback):
        if (today - timedelta(days=offset)) in days:
            streak += 1
        elif offset == 0:
            continue
        else:
            break
    return streak


def compute_stats(sessions: List, sessions_this_week: List, today: date) -> Dict[str, int]:
    return {
        "total_workouts": len(sessions),
        "weekly_workouts": len(sessions_this_week),
        "streak": compute_streak(sessions, today),
    }


def compute_weekly_histogram(sessions: List, today: date) -> List[Dict]:
    """Seven buckets, six days ago first and today last."""
    buckets = []
    for i in range(WEEK_WINDOW_DAYS - 1, -1, -1):
        d = today - timedelta(days=i)
        day_sessions = _sessions_on(sessions, d)
        buckets.append(
            {
                "day": WEEKDAY_LABELS[d.weekday()],
                "date": d.isoformat(),
                "workouts": len(day_sessions),
                "duration": sum(s.duration_minutes or 0 for s in day_sessions),
            }
        )
    return buckets


# ------------------------------
# Quota
# ------------------------------
@dataclass(frozen=True)
class QuotaStatus:
    can_ask: bool
    questions_left: int

    def to_dict(self):
        return {"can_ask": self.can_ask, "questions_left": self.questions_left}


def is_pro_active(settings, now) -> bool:
    if not settings.is_pro:
        return False
    return settings.pro_expires_at is None or settings.pro_expires_at > now


class ActivityAggregator:
    def __init__(
        self,
        store,
        clock: Optional[Callable] = None,
        daily_limit: int = DAILY_AI_QUESTION_LIMIT,
        pro_plan_months: int = 1,
    ):
        self.store = store
        self.clock = clock or utc_now
        self.daily_limit = daily_limit
        self.pro_plan_months = pro_plan_months

    def today(self) -> date:
        return self.clock().date()

    def recent_sessions(self, user_id, days: int) -> List:
        return self.store.list_sessions(user_id, window_start(self.today(), days))

    # ------------------------------
    # Stats
    # ------------------------------
    def get_stats(self, user_id) -> Dict[str, int]:
        sessions = self.recent_sessions(user_id, STATS_WINDOW_DAYS)
        week = self.recent_sessions(user_id, WEEK_WINDOW_DAYS)
        return compute_stats(sessions, week, self.today())

    def get_weekly_histogram(self, user_id) -> List[Dict]:
        sessions = self.recent_sessions(user_id, WEEK_WINDOW_DAYS)
        return compute_weekly_histogram(sessions, self.today())

    def log_session(self, user_id, routine_id=None, duration_minutes=None):
        return self.store.add_session(
            user_id,
            completed_at=self.clock(),
            routine_id=routine_id,
            duration_minutes=duration_minutes,
        )

    # ------------------------------
    # Settings
    # ------------------------------
    def get_or_create_settings(self, user_id):
        settings = self.store.get_settings(user_id)
        if settings is None:
            settings = self.store.upsert_settings(user_id)
        return settings

    def update_settings(self, user_id, changes: Dict):
        unknown = set(changes) - set(PREFERENCE_FIELDS)
        if unknown:
            raise ValueError(f"not a preference field: {', '.join(sorted(unknown))}")
        return self.store.upsert_settings(user_id, **changes)

    def upgrade_to_pro(self, user_id):
        now = self.clock()
        settings = self.store.upsert_settings(
            user_id,
            is_pro=True,
            pro_expires_at=add_months(now, self.pro_plan_months),
            daily_ai_questions=0,
        )
        logger.info("user %s upgraded to Pro until %s", user_id, settings.pro_expires_at)
        return settings

    # ------------------------------
    # AI quota
    # ------------------------------
    def can_ask_ai(self, user_id) -> QuotaStatus:
        settings = self.store.get_settings(user_id)
        if settings is None:
            return QuotaStatus(False, 0)

        now = self.clock()
        if is_pro_active(settings, now):
            return QuotaStatus(True, UNLIMITED)

        last = settings.last_ai_question_date
        if last is None or day_of(last) != now.date():
            self.store.upsert_settings(
                user_id, daily_ai_questions=0, last_ai_question_date=now
            )
            logger.debug("reset AI quota for user %s", user_id)
            # reported as if the question about to be asked is already spent
            return QuotaStatus(True, self.daily_limit - 1)

        questions_left = max(0, self.daily_limit - int(settings.daily_ai_questions or 0))
        return QuotaStatus(questions_left > 0, questions_left)

    def increment_ai_questions(self, user_id) -> None:
        settings = self.store.get_settings(user_id)
        if settings is None:
            return
        self.store.upsert_settings(
            user_id,
            daily_ai_questions=int(settings.daily_ai_questions or 0) + 1,
            last_ai_question_date=self.clock(),
        )
