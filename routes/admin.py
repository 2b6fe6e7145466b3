from flask import Blueprint, render_template, request, redirect, url_for, flash, session, current_app
from models.courses import ALL_COURSES, COURSE_NAMES
from services.audit_service import log_action
from services.errors import ApplicationNotFoundError, EditInProgressError, NoActiveEditError
from services.export_service import export_applications_csv
from services.registry_service import ApplicationRegistry, EditSession, EDITABLE_FIELDS
from services.storage import get_store

admin_bp = Blueprint('admin', __name__)

EDIT_SESSION_KEY = 'application_edit'

# No login gate: the admin panel is open to every visitor.

def _registry():
    return ApplicationRegistry(get_store(), EditSession.from_dict(session.get(EDIT_SESSION_KEY)))

def _remember(registry):
    if registry.edit_session.active:
        session[EDIT_SESSION_KEY] = registry.edit_session.to_dict()
    else:
        session.pop(EDIT_SESSION_KEY, None)

def _back_to_list():
    # Keep the current search/filter when returning to the table
    return redirect(url_for(
        'admin.applications',
        q=request.form.get('q', ''),
        course=request.form.get('course', ALL_COURSES)
    ))

@admin_bp.route('/')
def applications():
    search_term = request.args.get('q', '')
    course_filter = request.args.get('course', ALL_COURSES)
    registry = _registry()
    filtered = registry.filtered(search_term, course_filter)
    return render_template(
        'admin/applications.html',
        applications=filtered,
        total=len(registry.applications),
        search_term=search_term,
        course_filter=course_filter,
        course_filters=[ALL_COURSES] + COURSE_NAMES,
        courses=COURSE_NAMES,
        edit=registry.edit_session
    )

@admin_bp.route('/applications/<int:application_id>/edit', methods=['POST'])
def edit_application(application_id):
    registry = _registry()
    try:
        registry.begin_edit(application_id)
    except EditInProgressError:
        flash('Finish or cancel the current edit before editing another application.', 'warning')
    except ApplicationNotFoundError:
        flash('Application not found.', 'danger')
    _remember(registry)
    return _back_to_list()

@admin_bp.route('/applications/<int:application_id>/save', methods=['POST'])
def save_application(application_id):
    registry = _registry()
    if registry.edit_session.editing_id != application_id:
        flash('This application is not being edited.', 'warning')
        return _back_to_list()
    changes = {field: request.form[field] for field in EDITABLE_FIELDS if field in request.form}
    try:
        registry.save_edit(changes)
    except NoActiveEditError:
        flash('This application is not being edited.', 'warning')
        return _back_to_list()
    _remember(registry)
    log_action('Edit Application', f'Application ID: {application_id}, Fields: {", ".join(sorted(changes))}')
    flash('Application Updated. Student application has been updated successfully.', 'success')
    return _back_to_list()

@admin_bp.route('/applications/cancel', methods=['POST'])
def cancel_edit():
    registry = _registry()
    registry.cancel_edit()
    _remember(registry)
    return _back_to_list()

@admin_bp.route('/applications/<int:application_id>/delete', methods=['GET', 'POST'])
def delete_application(application_id):
    registry = _registry()
    if request.method == 'GET':
        application = registry.find(application_id)
        if application is None:
            flash('Application not found.', 'danger')
            return redirect(url_for('admin.applications'))
        return render_template(
            'admin/confirm_delete.html',
            application=application,
            search_term=request.args.get('q', ''),
            course_filter=request.args.get('course', ALL_COURSES)
        )
    if registry.delete(application_id, confirmed=request.form.get('confirm') == 'yes'):
        _remember(registry)
        log_action('Delete Application', f'Application ID: {application_id}')
        flash('Application Deleted. Student application has been deleted successfully.', 'success')
    return _back_to_list()

@admin_bp.route('/export')
def export_applications():
    search_term = request.args.get('q', '')
    course_filter = request.args.get('course', ALL_COURSES)
    log_action('Export Applications', f'Filters: q={search_term}, course={course_filter}')
    registry = _registry()
    return export_applications_csv(
        registry.filtered(search_term, course_filter),
        current_app.config['CSV_EXPORT_FILENAME']
    )
