"""
Helpers Module - Utility functions for common request operations
"""

import uuid
from flask import session, request


VISITOR_TOKEN_KEY = 'visitor_token'


def get_visitor_token(create=True):
    """Return this browser session's token, issuing one on first use"""
    token = session.get(VISITOR_TOKEN_KEY)
    if not token and create:
        token = uuid.uuid4().hex
        session[VISITOR_TOKEN_KEY] = token
    return token


def wants_json():
    """True when the caller posted JSON or prefers a JSON response"""
    return request.is_json or request.accept_mimetypes.best == 'application/json'


def get_request_fields(names):
    """Read the named fields from a JSON body or form post"""
    source = request.get_json(silent=True) if request.is_json else request.form
    source = source or {}
    return {name: source[name] for name in names if name in source}
