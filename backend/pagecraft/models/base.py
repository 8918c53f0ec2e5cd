from datetime import datetime, timezone
from pagecraft.extensions import db


def utc_now():
    return datetime.now(timezone.utc)


class BaseModel(db.Model):
    __abstract__ = True

    # Autoincrement ids double as creation order for tie-breaks
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    created_at = db.Column(db.DateTime, default=utc_now, index=True)
    updated_at = db.Column(db.DateTime, default=utc_now, onupdate=utc_now, index=True)

    def __repr__(self):
        return f"<{type(self).__name__} {self.id}>"
