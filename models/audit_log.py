from models.models import db
from datetime import datetime, timezone

class AuditLog(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    actor = db.Column(db.String(128), nullable=True)  # remote address of the request
    action = db.Column(db.String(256), nullable=False)
    details = db.Column(db.Text, nullable=True)
    timestamp = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))

    def __repr__(self):
        return f"<AuditLog {self.action} by {self.actor} at {self.timestamp}>"
