"""
Decorators Module - Request-scoped helpers for views
"""

from functools import wraps


def with_contact_flow(f):
    """Decorator passing the visitor's ContactFormFlow as the ``flow`` kwarg"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from extensions import contact_flows
        from .helpers import get_visitor_token

        kwargs['flow'] = contact_flows.get(get_visitor_token())
        return f(*args, **kwargs)
    return decorated_function


def with_existing_contact_flow(f):
    """Like with_contact_flow, but passes None instead of mounting a new flow"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from extensions import contact_flows
        from .helpers import get_visitor_token

        kwargs['flow'] = contact_flows.peek(get_visitor_token(create=False))
        return f(*args, **kwargs)
    return decorated_function
