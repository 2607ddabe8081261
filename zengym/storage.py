# backend/zengym/storage.py
"""Storage backends for the activity aggregator.

The aggregator only needs four capabilities: read sessions since a
timestamp, append a session, read settings, and upsert settings.
`SqlAlchemyStore` serves the running app; `InMemoryStore` keeps the
same contract over plain dicts and is what the aggregator tests use.
"""

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .clock import utc_now
from .models.settings import DEFAULT_SETTINGS, UserSettings, settings_to_dict
from .models.workout import WorkoutSession, session_to_dict


class ActivityStore(ABC):
    """Session + settings persistence used by `ActivityAggregator`."""

    @abstractmethod
    def list_sessions(self, user_id: int, since: datetime) -> List[Any]:
        """
        Sessions of `user_id` completed at or after `since`,
        ordered by completion time.
        """

    @abstractmethod
    def add_session(
        self,
        user_id: int,
        completed_at: datetime,
        routine_id: Optional[int] = None,
        duration_minutes: Optional[int] = None,
    ) -> Any:
        """Append a completed session and return it."""

    @abstractmethod
    def get_settings(self, user_id: int) -> Optional[Any]:
        """Settings of `user_id`, or None if none were created yet."""

    @abstractmethod
    def upsert_settings(self, user_id: int, **fields) -> Any:
        """
        Apply `fields` to the user's settings, creating the row from
        DEFAULT_SETTINGS first when it does not exist.
        """


# ------------------------------
# Relational store
# ------------------------------
class SqlAlchemyStore(ActivityStore):
    def __init__(self, db):
        self.db = db

    def list_sessions(self, user_id, since):
        return (
            WorkoutSession.query.filter(
                WorkoutSession.user_id == user_id,
                WorkoutSession.completed_at >= since,
            )
            .order_by(WorkoutSession.completed_at.asc())
            .all()
        )

    def add_session(self, user_id, completed_at, routine_id=None, duration_minutes=None):
        session = WorkoutSession(
            user_id=user_id,
            routine_id=routine_id,
            duration_minutes=duration_minutes,
            completed_at=completed_at,
        )
        self.db.session.add(session)
        self.db.session.commit()
        return session

    def get_settings(self, user_id):
        return UserSettings.query.filter_by(user_id=user_id).first()

    def upsert_settings(self, user_id, **fields):
        settings = self.get_settings(user_id)
        if settings is None:
            values = dict(DEFAULT_SETTINGS)
            values.update(fields)
            settings = UserSettings(user_id=user_id, **values)
            self.db.session.add(settings)
        else:
            for key, value in fields.items():
                setattr(settings, key, value)
        self.db.session.commit()
        return settings


# ------------------------------
# In-memory store
# ------------------------------
@dataclass
class SessionRecord:
    id: int
    user_id: int
    completed_at: datetime
    routine_id: Optional[int] = None
    duration_minutes: Optional[int] = None

    def to_dict(self):
        return session_to_dict(self)


@dataclass
class SettingsRecord:
    user_id: int
    workout_reminder_enabled: bool = True
    workout_reminder_time: str = "08:00"
    affirmation_enabled: bool = True
    affirmation_time: str = "07:00"
    dark_mode: bool = False
    notifications_enabled: bool = True
    is_pro: bool = False
    pro_expires_at: Optional[datetime] = None
    daily_ai_questions: int = 0
    last_ai_question_date: Optional[datetime] = None

    def to_dict(self):
        return settings_to_dict(self)


@dataclass
class InMemoryStore(ActivityStore):
    sessions: List[SessionRecord] = field(default_factory=list)
    settings: Dict[int, SettingsRecord] = field(default_factory=dict)

    def __post_init__(self):
        self._ids = itertools.count(1)

    def list_sessions(self, user_id, since):
        rows = [
            s for s in self.sessions
            if s.user_id == user_id and s.completed_at >= since
        ]
        return sorted(rows, key=lambda s: s.completed_at)

    def add_session(self, user_id, completed_at=None, routine_id=None, duration_minutes=None):
        record = SessionRecord(
            id=next(self._ids),
            user_id=user_id,
            completed_at=completed_at or utc_now(),
            routine_id=routine_id,
            duration_minutes=duration_minutes,
        )
        self.sessions.append(record)
        return record

    def get_settings(self, user_id):
        return self.settings.get(user_id)

    def upsert_settings(self, user_id, **fields):
        record = self.settings.get(user_id)
        if record is None:
            values = dict(DEFAULT_SETTINGS)
            values.update(fields)
            record = SettingsRecord(user_id=user_id, **values)
            self.settings[user_id] = record
        else:
            for key, value in fields.items():
                setattr(record, key, value)
        return record
