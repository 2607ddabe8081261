# backend/zengym/models/affirmation.py
from .. import db
from ..clock import utc_now


class AffirmationHistory(db.Model):
    __tablename__ = "affirmation_history"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    affirmation = db.Column(db.Text, nullable=False)
    date = db.Column(db.DateTime, nullable=False, default=utc_now)

    def to_dict(self):
        return {
            "id": self.id,
            "affirmation": self.affirmation,
            "date": self.date.isoformat() if self.date else None,
        }
