"""Admin-side view over the stored admission applications.

The registry loads the collection once per instance. Filtering is pure; edit
and delete rewrite the whole collection through the store. At most one record
is edited at a time, tracked by an ``EditSession``.
"""

import logging

from config import Config
from models.courses import ALL_COURSES
from services.errors import ApplicationNotFoundError, EditInProgressError, NoActiveEditError
from services.export_service import applications_to_csv
from services.storage import read_collection, write_collection

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ['name', 'email', 'contactNumber', 'selectedCourse']


def filter_applications(applications, search_term='', course_filter=ALL_COURSES):
    term = (search_term or '').lower()
    filtered = list(applications)
    if term:
        filtered = [
            a for a in filtered
            if term in (a.get('name') or '').lower() or term in (a.get('email') or '').lower()
        ]
    if course_filter and course_filter != ALL_COURSES:
        filtered = [a for a in filtered if a.get('selectedCourse') == course_filter]
    return filtered


class EditSession:
    """The id being edited plus a draft of its editable fields."""

    def __init__(self, editing_id=None, draft=None):
        self.editing_id = editing_id
        self.draft = dict(draft or {})

    @property
    def active(self):
        return self.editing_id is not None

    def clear(self):
        self.editing_id = None
        self.draft = {}

    def to_dict(self):
        return {'editing_id': self.editing_id, 'draft': self.draft}

    @classmethod
    def from_dict(cls, data):
        if not data:
            return cls()
        return cls(data.get('editing_id'), data.get('draft'))


class ApplicationRegistry:
    def __init__(self, store, edit_session=None, key=Config.APPLICATIONS_KEY):
        self.store = store
        self.key = key
        self.edit_session = edit_session or EditSession()
        self.applications = read_collection(store, key)

    def _persist(self):
        write_collection(self.store, self.key, self.applications)

    def find(self, application_id):
        for app in self.applications:
            if app.get('id') == application_id:
                return app
        return None

    def filtered(self, search_term='', course_filter=ALL_COURSES):
        return filter_applications(self.applications, search_term, course_filter)

    def begin_edit(self, application_id):
        session = self.edit_session
        if session.active and session.editing_id != application_id:
            raise EditInProgressError(session.editing_id)
        if session.active:
            return session.draft
        app = self.find(application_id)
        if app is None:
            raise ApplicationNotFoundError(application_id)
        session.editing_id = application_id
        session.draft = {field: app.get(field, '') for field in EDITABLE_FIELDS}
        return session.draft

    def update_draft(self, changes):
        if not self.edit_session.active:
            raise NoActiveEditError('No application is being edited')
        for field in EDITABLE_FIELDS:
            if field in changes:
                self.edit_session.draft[field] = changes[field]
        return self.edit_session.draft

    def save_edit(self, changes=None):
        """Merge the draft into the record being edited and persist the collection."""
        if not self.edit_session.active:
            raise NoActiveEditError('No application is being edited')
        if changes:
            self.update_draft(changes)
        editing_id = self.edit_session.editing_id
        draft = self.edit_session.draft
        self.applications = [
            {**app, **draft} if app.get('id') == editing_id else app
            for app in self.applications
        ]
        self._persist()
        self.edit_session.clear()
        logger.info(f"[REGISTRY] Application {editing_id} updated ({', '.join(sorted(draft))})")
        return self.find(editing_id)

    def cancel_edit(self):
        self.edit_session.clear()

    def delete(self, application_id, confirmed=False):
        """Remove one application. Returns True only when a record was removed."""
        if not confirmed:
            return False
        remaining = [app for app in self.applications if app.get('id') != application_id]
        if len(remaining) == len(self.applications):
            return False
        self.applications = remaining
        self._persist()
        if self.edit_session.editing_id == application_id:
            self.edit_session.clear()
        logger.info(f"[REGISTRY] Application {application_id} deleted")
        return True

    def export_csv(self, search_term='', course_filter=ALL_COURSES):
        return applications_to_csv(self.filtered(search_term, course_filter))
