import re

from models.courses import COURSE_NAMES

EMAIL_PATTERN = re.compile(r'\S+@\S+\.\S+')
NON_DIGITS = re.compile(r'\D')


def _check_email(value, errors):
    if not value.strip():
        errors['email'] = 'Email is required'
    elif not EMAIL_PATTERN.search(value):
        errors['email'] = 'Email is invalid'


def normalize_contact_number(value):
    return NON_DIGITS.sub('', value or '')


def validate_application(form):
    """Return a dict of field -> error message; empty when the form is valid."""
    errors = {}
    name = form.get('name') or ''
    date_of_birth = form.get('dateOfBirth') or ''
    email = form.get('email') or ''
    contact_number = form.get('contactNumber') or ''
    selected_course = form.get('selectedCourse') or ''

    if not name.strip():
        errors['name'] = 'Name is required'
    if not date_of_birth:
        errors['dateOfBirth'] = 'Date of birth is required'
    _check_email(email, errors)
    if not contact_number.strip():
        errors['contactNumber'] = 'Contact number is required'
    elif len(normalize_contact_number(contact_number)) != 10:
        errors['contactNumber'] = 'Contact number must be 10 digits'
    if selected_course not in COURSE_NAMES:
        errors['selectedCourse'] = 'Please select a course'
    return errors


def validate_contact_message(form):
    errors = {}
    if not (form.get('name') or '').strip():
        errors['name'] = 'Name is required'
    _check_email(form.get('email') or '', errors)
    if not (form.get('message') or '').strip():
        errors['message'] = 'Message is required'
    return errors
