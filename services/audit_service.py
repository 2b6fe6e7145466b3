import logging

from flask import request

from models.audit_log import AuditLog
from models.models import db

logger = logging.getLogger(__name__)


def log_action(action, details=None):
    """Record an admissions action in the audit_log table and mirror it to the log."""
    entry = AuditLog(
        actor=request.remote_addr or 'unknown',
        action=action,
        details=details or f"{request.method} {request.path}"
    )
    db.session.add(entry)
    db.session.commit()
    logger.info(f"[AUDIT] {entry.action} by {entry.actor}: {entry.details}")
    return entry
