from flask_sqlalchemy import SQLAlchemy
db = SQLAlchemy()

# Key-value rows backing the persisted collections. Each value is a whole
# JSON document and is always replaced in one write.
class StoredValue(db.Model):
    __tablename__ = 'stored_value'
    key = db.Column(db.String(128), primary_key=True)
    value = db.Column(db.Text, nullable=False)

    def __repr__(self):
        return f"<StoredValue {self.key} ({len(self.value)} bytes)>"
