import logging
from flask import Blueprint, render_template, request, redirect, url_for, flash, session, abort, current_app
from models.courses import COURSE_NAMES
from models.models import db
from services.audit_service import log_action
from services.errors import ValidationError
from services.export_service import receipt_filename, render_receipt_pdf, send_receipt
from services.intake_service import submit_application
from services.registry_service import ApplicationRegistry
from services.storage import get_store

admissions_bp = Blueprint('admissions', __name__)

EMPTY_FORM = {'name': '', 'dateOfBirth': '', 'email': '', 'contactNumber': '', 'selectedCourse': ''}
RECEIPTS_SESSION_KEY = 'receipt_ids'
MAX_REMEMBERED_RECEIPTS = 5

def _render_form(values=None, errors=None, status=200, receipt_url=None):
    return render_template(
        'apply.html',
        values=values or EMPTY_FORM,
        errors=errors or {},
        courses=COURSE_NAMES,
        receipt_url=receipt_url
    ), status

def _own_receipts():
    # Receipts can only be fetched by the browser session that submitted them
    return session.get(RECEIPTS_SESSION_KEY, [])

@admissions_bp.route('/apply', methods=['GET', 'POST'])
def apply():
    if request.method == 'GET':
        receipt_id = request.args.get('receipt', type=int)
        receipt_url = None
        if receipt_id in _own_receipts():
            receipt_url = url_for('admissions.download_receipt', application_id=receipt_id)
        return _render_form(receipt_url=receipt_url)
    values = {field: request.form.get(field, '') for field in EMPTY_FORM}
    try:
        record, _, _ = submit_application(
            get_store(),
            request.form,
            photo=request.files.get('photo'),
            documents=request.files.get('documents'),
            institution_name=current_app.config['INSTITUTION_NAME']
        )
    except ValidationError as e:
        flash('Please fix the errors in the form', 'danger')
        return _render_form(values, e.errors, 400)
    except Exception as e:
        db.session.rollback()
        logging.error(f"[ADMISSIONS] Failed to submit application: {e}")
        flash('There was an error submitting your application. Please try again.', 'danger')
        return _render_form(values, status=500)
    log_action('Submit Application', f'Application ID: {record["id"]}, Course: {record["selectedCourse"]}')
    session[RECEIPTS_SESSION_KEY] = (_own_receipts() + [record['id']])[-MAX_REMEMBERED_RECEIPTS:]
    flash('Application Submitted Successfully! Your admission form has been downloaded automatically.', 'success')
    return redirect(url_for('admissions.apply', receipt=record['id']))

@admissions_bp.route('/apply/<int:application_id>/receipt')
def download_receipt(application_id):
    if application_id not in _own_receipts():
        abort(404)
    record = ApplicationRegistry(get_store()).find(application_id)
    if record is None:
        abort(404)
    pdf = render_receipt_pdf(record, current_app.config['INSTITUTION_NAME'])
    return send_receipt(pdf, receipt_filename(record['name']))
