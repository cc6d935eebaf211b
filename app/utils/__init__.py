from .responses import ok, error, error_response, validation_error_response, internal_error_response
from .auth import auth_required, admin_required
from .validation import validate_schema
from .db import transactional
from .security import hash_password, verify_password, normalize_email

__all__ = [
    'ok',
    'error',
    'error_response',
    'validation_error_response',
    'internal_error_response',
    'auth_required',
    'admin_required',
    'validate_schema',
    'transactional',
    'hash_password',
    'verify_password',
    'normalize_email',
]
