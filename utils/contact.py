"""
Contact Module - Contact form state and submission flow

One ContactFormFlow corresponds to one mounted contact form. It holds the
visitor's in-progress submission and the success banner flag, and delivers
submissions through an injected transport (EmailJSClient by default).
"""

import logging
import re
import threading
import time
from collections import OrderedDict

from flask import current_app

from models import ContactSubmission, SubmissionResult, FlowState, SubmitOutcome, CONTACT_FIELDS
from .emailjs import EmailJSClient, EmailJSConfig, EmailDeliveryError


EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
SUCCESS_MESSAGE = 'Message Sent Successfully!'
DEFAULT_BANNER_SECONDS = 5.0


def validation_errors(submission):
    """
    Required-field checks mirroring the browser's native form validation

    Returns:
        dict: field name -> error text, empty when the submission is valid
    """
    errors = {}
    for field_name in CONTACT_FIELDS:
        if not getattr(submission, field_name):
            errors[field_name] = 'Please fill out this field.'

    email = submission.email.strip()
    if email and not EMAIL_PATTERN.match(email):
        errors['email'] = 'Please enter a valid email address.'
    return errors


def is_valid(submission):
    return not validation_errors(submission)


def idle_state():
    """State of a contact form that has not been mounted yet"""
    return {
        'state': FlowState.IDLE.value,
        'banner_visible': False,
        'banner_message': '',
        'submission': ContactSubmission.empty().to_dict(),
    }


class ContactFormFlow:
    """Stateful contact form: field edits, submit, and the timed success banner"""

    def __init__(self, config, transport=None, timer_factory=threading.Timer,
                 logger=None, banner_seconds=DEFAULT_BANNER_SECONDS):
        self.config = config
        self.transport = transport or EmailJSClient(config)
        self.timer_factory = timer_factory
        self.logger = logger or logging.getLogger(__name__)
        self.banner_seconds = banner_seconds

        self.submission = ContactSubmission.empty()
        self.result = SubmissionResult()
        self.state = FlowState.IDLE

    @property
    def banner_visible(self):
        return self.result.visible

    def update_field(self, field_name, value):
        self.submission = self.submission.with_field(field_name, value)
        self.state = FlowState.IDLE if self.submission.is_empty() else FlowState.EDITING
        return self.submission

    def submit(self, submission=None):
        """
        Deliver a submission to the email provider

        Invalid submissions are blocked before any outbound call. A failed
        delivery is logged only; the entered values stay in place so the
        visitor can resubmit.

        Args:
            submission (ContactSubmission, optional): Defaults to the current one

        Returns:
            SubmitOutcome: SENT, FAILED or INVALID
        """
        if submission is None:
            submission = self.submission

        errors = validation_errors(submission)
        if errors:
            self.logger.debug(f"Contact submission blocked by validation: {sorted(errors)}")
            return SubmitOutcome.INVALID

        self.state = FlowState.SUBMITTING
        try:
            self.transport(submission.to_dict())
        except EmailDeliveryError as e:
            self.logger.error(f"Contact form delivery failed: {str(e)}")
            self.state = FlowState.EDITING
            return SubmitOutcome.FAILED

        self.logger.info("Contact form message delivered")
        self.result.visible = True
        self.submission = ContactSubmission.empty()
        self.state = FlowState.IDLE
        # Earlier pending hide timers are left running.
        self._schedule_banner_hide()
        return SubmitOutcome.SENT

    def hide_banner(self):
        self.result.visible = False

    def _schedule_banner_hide(self):
        timer = self.timer_factory(self.banner_seconds, self.hide_banner)
        timer.daemon = True
        timer.start()
        return timer

    def to_dict(self):
        return {
            'state': self.state.value,
            'banner_visible': self.result.visible,
            'banner_message': SUCCESS_MESSAGE if self.result.visible else '',
            'submission': self.submission.to_dict(),
        }


class ContactFlowStore:
    """
    Per-visitor ContactFormFlow instances for one app, keyed by a session token

    Bounded two ways: flows idle longer than idle_seconds are dropped, and
    when more than max_flows are mounted the least recently used goes first.
    """

    def __init__(self, factory, max_flows=1000, idle_seconds=3600, clock=time.monotonic):
        self._factory = factory
        self._flows = OrderedDict()  # token -> (flow, last_used)
        self._lock = threading.Lock()
        self.max_flows = max_flows
        self.idle_seconds = idle_seconds
        self.clock = clock

    def get(self, token):
        """Return the flow for a token, mounting a fresh one on first use"""
        with self._lock:
            now = self.clock()
            self._prune(now)
            entry = self._flows.pop(token, None)
            flow = entry[0] if entry else self._factory()
            self._flows[token] = (flow, now)
            while len(self._flows) > self.max_flows:
                self._flows.popitem(last=False)
            return flow

    def peek(self, token):
        """Return the flow for a token if one is mounted, without mounting"""
        if not token:
            return None
        with self._lock:
            now = self.clock()
            self._prune(now)
            entry = self._flows.get(token)
            if entry is None:
                return None
            self._flows[token] = (entry[0], now)
            self._flows.move_to_end(token)
            return entry[0]

    def _prune(self, now):
        while self._flows:
            token, (_, last_used) = next(iter(self._flows.items()))
            if now - last_used <= self.idle_seconds:
                break
            del self._flows[token]

    def __len__(self):
        return len(self._flows)


class ContactFlowRegistry:
    """
    Flask extension owning the contact flows

    Initialized without an app and bound later via init_app. Each bound app
    gets its own ContactFlowStore under app.extensions['contact_flows'].
    """

    def __init__(self, app=None, **options):
        if app is not None:
            self.init_app(app, **options)

    def init_app(self, app, transport=None, timer_factory=threading.Timer, clock=time.monotonic):
        emailjs_config = EmailJSConfig.from_app_config(app.config)
        banner_seconds = app.config.get('CONTACT_BANNER_SECONDS', DEFAULT_BANNER_SECONDS)

        def factory():
            return ContactFormFlow(
                emailjs_config,
                transport=transport,
                timer_factory=timer_factory,
                logger=app.logger,
                banner_seconds=banner_seconds)

        store = ContactFlowStore(
            factory,
            max_flows=app.config.get('CONTACT_MAX_FLOWS', 1000),
            idle_seconds=app.config.get('CONTACT_FLOW_IDLE_SECONDS', 3600),
            clock=clock)
        app.extensions['contact_flows'] = store
        return store

    def get(self, token):
        """Flow for a token in the current app"""
        return current_app.extensions['contact_flows'].get(token)

    def peek(self, token):
        """Mounted flow for a token in the current app, or None"""
        return current_app.extensions['contact_flows'].peek(token)
