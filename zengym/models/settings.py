# backend/zengym/models/settings.py
from .. import db

# Values a freshly created settings row starts with.
DEFAULT_SETTINGS = {
    "workout_reminder_enabled": True,
    "workout_reminder_time": "08:00",
    "affirmation_enabled": True,
    "affirmation_time": "07:00",
    "dark_mode": False,
    "notifications_enabled": True,
    "is_pro": False,
    "pro_expires_at": None,
    "daily_ai_questions": 0,
    "last_ai_question_date": None,
}


class UserSettings(db.Model):
    __tablename__ = "user_settings"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), unique=True, nullable=False)

    workout_reminder_enabled = db.Column(db.Boolean, nullable=False, default=True)
    workout_reminder_time = db.Column(db.String(5), nullable=False, default="08:00")
    affirmation_enabled = db.Column(db.Boolean, nullable=False, default=True)
    affirmation_time = db.Column(db.String(5), nullable=False, default="07:00")
    dark_mode = db.Column(db.Boolean, nullable=False, default=False)
    notifications_enabled = db.Column(db.Boolean, nullable=False, default=True)

    # Pro tier + AI quota
    is_pro = db.Column(db.Boolean, nullable=False, default=False)
    pro_expires_at = db.Column(db.DateTime)
    daily_ai_questions = db.Column(db.Integer, nullable=False, default=0)
    last_ai_question_date = db.Column(db.DateTime)

    user = db.relationship("User", backref=db.backref("settings", uselist=False))

    def to_dict(self):
        return settings_to_dict(self)


def settings_to_dict(s):
    """
    Shared by the ORM row and the in-memory record so both stores
    serialize identically.
    """
    return {
        "user_id": s.user_id,
        "workout_reminder": {
            "enabled": bool(s.workout_reminder_enabled),
            "time": s.workout_reminder_time,
        },
        "affirmation": {
            "enabled": bool(s.affirmation_enabled),
            "time": s.affirmation_time,
        },
        "dark_mode": bool(s.dark_mode),
        "notifications_enabled": bool(s.notifications_enabled),
        "is_pro": bool(s.is_pro),
        "pro_expires_at": s.pro_expires_at.isoformat() if s.pro_expires_at else None,
        "daily_ai_questions": int(s.daily_ai_questions or 0),
        "last_ai_question_date": s.last_ai_question_date.isoformat()
        if s.last_ai_question_date
        else None,
    }
