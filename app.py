import logging

from flask import Flask

from flask_migrate import Migrate
from config import Config

# Initialize Flask app
app = Flask(__name__)
app.config.from_object(Config)

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s"
)

# Initialize extensions
from models.models import db
import models.audit_log  # registers the audit_log table
db.init_app(app)
migrate = Migrate(app, db)

from services.storage import DatabaseStore
app.extensions['kv_store'] = DatabaseStore(db)

from services.timestamps import local_date_string
app.jinja_env.filters['local_date'] = local_date_string

# Import blueprints
from routes.main import main_bp
from routes.admissions import admissions_bp
from routes.contact import contact_bp
from routes.admin import admin_bp

# Register blueprints
app.register_blueprint(main_bp)
app.register_blueprint(admissions_bp)
app.register_blueprint(contact_bp)
app.register_blueprint(admin_bp, url_prefix='/admin')

@app.cli.command('init-db')
def init_db():
    """Create the stored_value and audit_log tables."""
    db.create_all()
    print('Database tables created.')

if __name__ == "__main__":
    with app.app_context():
        db.create_all()
    app.run(debug=True)
