"""
Pages Routes - Portfolio page and static documents
"""

import os
from flask import render_template, send_from_directory, current_app, abort
from utils.data import get_portfolio_data, SECTION_ORDER, NAV_LINKS, CONTACT_INFO
from utils.decorators import with_existing_contact_flow
from models import ContactSubmission
from utils.contact import SUCCESS_MESSAGE
from utils.rendering import render_nav_links, render_contact_info
from . import pages_bp


@pages_bp.route('/')
@with_existing_contact_flow
def index(flow):
    """The portfolio page, sections mounted in a fixed order"""
    submission = flow.submission if flow else ContactSubmission.empty()
    banner_visible = flow.banner_visible if flow else False
    return render_template('index.html',
                           data=get_portfolio_data(),
                           sections=SECTION_ORDER,
                           nav_items=render_nav_links(NAV_LINKS),
                           contact_items=render_contact_info(CONTACT_INFO),
                           submission=submission,
                           banner_visible=banner_visible,
                           success_message=SUCCESS_MESSAGE)


@pages_bp.route('/resume')
def resume():
    """Serve the resume document from the static resume folder"""
    directory = os.path.join(current_app.root_path, current_app.config['RESUME_DIRECTORY'])
    filename = current_app.config['RESUME_FILENAME']
    if not os.path.isfile(os.path.join(directory, filename)):
        current_app.logger.warning(f"Resume not found at {directory}/{filename}")
        abort(404)
    return send_from_directory(directory, filename, mimetype='application/pdf')
