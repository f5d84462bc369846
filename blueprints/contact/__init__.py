"""
Contact Blueprint - Contact form endpoints
Handles: Field updates, submission, banner state
"""

from flask import Blueprint

contact_bp = Blueprint('contact', __name__, url_prefix='/contact')

from . import routes
