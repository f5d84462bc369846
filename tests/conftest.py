import pytest

from app import create_app
from utils.emailjs import EmailDeliveryError


class FakeTransport:
    """Stands in for EmailJSClient; records every send"""

    def __init__(self):
        self.calls = []
        self.fail = False

    def __call__(self, template_params):
        self.calls.append(dict(template_params))
        if self.fail:
            raise EmailDeliveryError('simulated network failure')


class FakeTimer:
    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.started = False
        self.daemon = False

    def start(self):
        self.started = True

    def fire(self):
        self.function()


class TimerRecorder:
    """timer_factory that keeps every timer it creates"""

    def __init__(self):
        self.timers = []

    def __call__(self, interval, function):
        timer = FakeTimer(interval, function)
        self.timers.append(timer)
        return timer


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def timers():
    return TimerRecorder()


@pytest.fixture
def app(transport, timers):
    app = create_app('testing', transport=transport, timer_factory=timers)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def jane():
    return {'name': 'Jane Doe', 'email': 'jane@example.com', 'message': 'Hello'}
