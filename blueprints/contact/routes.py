"""
Contact Routes - Contact form field updates and submission
"""

from flask import request, redirect, url_for, jsonify
from models import CONTACT_FIELDS, SubmitOutcome
from utils.decorators import with_contact_flow, with_existing_contact_flow
from utils.helpers import wants_json, get_request_fields
from utils.contact import validation_errors, idle_state
from . import contact_bp


@contact_bp.route('/field', methods=['POST'])
@with_contact_flow
def update_field(flow):
    """Replace one field of the visitor's in-progress submission"""
    payload = request.get_json(silent=True) or {}
    field_name = payload.get('field')
    value = payload.get('value', '')

    if not isinstance(value, str):
        return jsonify({'error': 'Field value must be text'}), 400

    try:
        flow.update_field(field_name, value)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    return jsonify(flow.to_dict())


@contact_bp.route('', methods=['POST'])
@with_contact_flow
def submit(flow):
    """Contact form processing - delivers the message through EmailJS"""
    fields = get_request_fields(CONTACT_FIELDS)
    not_text = sorted(name for name, value in fields.items() if not isinstance(value, str))
    if not_text:
        return jsonify({'error': 'Field values must be text', 'fields': not_text}), 400

    for field_name, value in fields.items():
        flow.update_field(field_name, value)

    submission = flow.submission
    outcome = flow.submit()

    if wants_json():
        body = flow.to_dict()
        body['success'] = outcome is SubmitOutcome.SENT
        body['outcome'] = outcome.value
        if outcome is SubmitOutcome.INVALID:
            body['errors'] = validation_errors(submission)
            return jsonify(body), 400
        return jsonify(body)

    return redirect(url_for('pages.index', _anchor='contact'))


@contact_bp.route('/state')
@with_existing_contact_flow
def state(flow):
    """Current form values and banner visibility"""
    if flow is None:
        return jsonify(idle_state())
    return jsonify(flow.to_dict())
