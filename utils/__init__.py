"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import with_contact_flow, with_existing_contact_flow
from .data import get_portfolio_data, NAV_LINKS, CONTACT_INFO, SECTION_IDS, SECTION_ORDER
from .emailjs import EmailJSClient, EmailJSConfig, EmailDeliveryError, build_payload
from .contact import ContactFormFlow, ContactFlowRegistry, ContactFlowStore, validation_errors, is_valid, SUCCESS_MESSAGE
from .helpers import get_visitor_token, wants_json, get_request_fields
from .rendering import (
    render_entries,
    render_contact_info,
    render_nav_links,
    get_page_specific_class
)

__all__ = [
    # Decorators
    'with_contact_flow',
    'with_existing_contact_flow',

    # Data
    'get_portfolio_data',
    'NAV_LINKS',
    'CONTACT_INFO',
    'SECTION_IDS',
    'SECTION_ORDER',

    # EmailJS
    'EmailJSClient',
    'EmailJSConfig',
    'EmailDeliveryError',
    'build_payload',

    # Contact
    'ContactFormFlow',
    'ContactFlowRegistry',
    'ContactFlowStore',
    'validation_errors',
    'is_valid',
    'SUCCESS_MESSAGE',

    # Helpers
    'get_visitor_token',
    'wants_json',
    'get_request_fields',

    # Rendering
    'render_entries',
    'render_contact_info',
    'render_nav_links',
    'get_page_specific_class'
]
