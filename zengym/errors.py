# backend/zengym/errors.py
"""
Client-facing errors. Each carries the HTTP status it maps to; the app
factory registers one handler that renders them as
{"message": ..., "errors": ...}.
"""
from typing import Any, Optional


class ZenGymError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.details = details

    def to_dict(self):
        payload = {"message": self.message}
        if self.details is not None:
            payload["errors"] = self.details
        return payload


class ValidationError(ZenGymError):
    status_code = 400
    message = "Invalid request data"

    @classmethod
    def from_pydantic(cls, exc, message: Optional[str] = None):
        details = [
            {
                "field": ".".join(str(part) for part in err.get("loc", ())),
                "message": err.get("msg"),
            }
            for err in exc.errors()
        ]
        return cls(message, details=details)


class NotFoundError(ZenGymError):
    status_code = 404
    message = "Not found"


class QuotaExceededError(ZenGymError):
    status_code = 403
    message = "Daily AI question limit reached. Upgrade to ZenGym Pro for unlimited access!"
