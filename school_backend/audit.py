"""
Audit trail for grade changes and logins.

Entries go to the 'school_backend.audit' logger. If AUDIT_LOG_FILE is set,
they are also appended to that file as:
    timestamp | user | action | details
"""
import logging
import os

audit_logger = logging.getLogger('school_backend.audit')


def init_audit_log(path):
    """Attach a file handler for audit entries (once per path)."""
    if not path:
        return None
    for handler in audit_logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(path):
            return handler
    handler = logging.FileHandler(path)
    handler.setFormatter(logging.Formatter('%(asctime)s | %(message)s'))
    audit_logger.addHandler(handler)
    audit_logger.setLevel(logging.INFO)
    return handler


def audit_log(action, details="", user="anonymous"):
    """Record who did what. Details must not contain marks or remarks."""
    audit_logger.info("%s | %s | %s", user, action, details)
