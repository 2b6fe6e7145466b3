import logging
from flask import Blueprint, render_template, request, redirect, url_for, flash
from models.models import db
from services.audit_service import log_action
from services.errors import ValidationError
from services.intake_service import submit_contact_message
from services.storage import get_store

contact_bp = Blueprint('contact', __name__)

@contact_bp.route('/contact', methods=['GET', 'POST'])
def contact():
    values = {'name': '', 'email': '', 'message': ''}
    errors = {}
    if request.method == 'POST':
        values = {field: request.form.get(field, '') for field in values}
        try:
            message = submit_contact_message(get_store(), request.form)
        except ValidationError as e:
            flash('Please fix the errors in the form', 'danger')
            return render_template('contact.html', values=values, errors=e.errors), 400
        except Exception as e:
            db.session.rollback()
            logging.error(f"[CONTACT] Failed to store message: {e}")
            flash('There was an error sending your message. Please try again.', 'danger')
            return render_template('contact.html', values=values, errors=errors), 500
        log_action('Contact Message', f'Message ID: {message["id"]}')
        flash("Message Sent! Thank you for contacting us. We'll get back to you soon.", 'success')
        return redirect(url_for('contact.contact'))
    return render_template('contact.html', values=values, errors=errors)
