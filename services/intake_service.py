"""Admission and contact form intake.

Both flows validate first and only then touch the store. A successful
admission submission appends exactly one record and writes the whole
collection back in a single ``set``; nothing is written when validation,
receipt rendering or the read fails.
"""

import logging

from config import Config
from services.errors import ValidationError
from services.export_service import render_receipt_pdf, receipt_filename
from services.storage import read_collection, write_collection
from services.timestamps import epoch_millis, to_iso, utc_now
from services.validation import validate_application, validate_contact_message

logger = logging.getLogger(__name__)

APPLICATION_FIELDS = ['name', 'dateOfBirth', 'email', 'contactNumber', 'selectedCourse']


def _uploaded_name(upload):
    # Only the client-side filename is kept; the file body is never read.
    if upload is None:
        return ''
    return getattr(upload, 'filename', None) or ''


def _unique_id(candidate, existing):
    taken = {item.get('id') for item in existing}
    while candidate in taken:
        candidate += 1
    return candidate


def build_application_record(form, photo, documents, existing, now):
    record = {'id': _unique_id(epoch_millis(now), existing)}
    for field in APPLICATION_FIELDS:
        record[field] = form.get(field) or ''
    record['submittedAt'] = to_iso(now)
    record['photo'] = _uploaded_name(photo)
    record['documents'] = _uploaded_name(documents)
    return record


def submit_application(store, form, photo=None, documents=None, institution_name=None, now=None):
    """Validate, persist and render the receipt for one admission application.

    Returns ``(record, receipt_bytes, receipt_filename)``. Raises
    ``ValidationError`` when any field is rejected; storage is not touched in
    that case.
    """
    errors = validate_application(form)
    if errors:
        logger.info(f"[INTAKE] Rejected application with errors on {sorted(errors)}")
        raise ValidationError(errors)

    now = now or utc_now()
    applications = read_collection(store, Config.APPLICATIONS_KEY)
    record = build_application_record(form, photo, documents, applications, now)
    receipt = render_receipt_pdf(record, institution_name or Config.INSTITUTION_NAME)
    write_collection(store, Config.APPLICATIONS_KEY, applications + [record])
    logger.info(f"[INTAKE] Application {record['id']} saved for course '{record['selectedCourse']}'")
    return record, receipt, receipt_filename(record['name'])


def submit_contact_message(store, form, now=None):
    errors = validate_contact_message(form)
    if errors:
        raise ValidationError(errors)
    now = now or utc_now()
    messages = read_collection(store, Config.CONTACT_MESSAGES_KEY)
    message = {
        'id': _unique_id(epoch_millis(now), messages),
        'name': form.get('name') or '',
        'email': form.get('email') or '',
        'message': form.get('message') or '',
        'submittedAt': to_iso(now),
    }
    write_collection(store, Config.CONTACT_MESSAGES_KEY, messages + [message])
    logger.info(f"[CONTACT] Message {message['id']} stored")
    return message
