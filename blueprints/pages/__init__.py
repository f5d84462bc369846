"""
Pages Blueprint - The single portfolio page
Handles: Page rendering, resume download
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
