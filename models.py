"""
Models Module - In-memory records for the portfolio page
Nothing here is persisted; records live for the duration of a page session.
"""

from dataclasses import dataclass, fields, replace
from enum import Enum


CONTACT_FIELDS = ('name', 'email', 'message')


@dataclass(frozen=True)
class ContactSubmission:
    """The contact form's three text fields"""
    name: str = ''
    email: str = ''
    message: str = ''

    @classmethod
    def empty(cls):
        return cls()

    def with_field(self, field_name, value):
        """Return a copy of this submission with one field replaced"""
        if field_name not in CONTACT_FIELDS:
            raise ValueError(f"Unknown contact field: {field_name!r}")
        return replace(self, **{field_name: value})

    def is_empty(self):
        return not any(getattr(self, f.name) for f in fields(self))

    def to_dict(self):
        return {name: getattr(self, name) for name in CONTACT_FIELDS}


@dataclass
class SubmissionResult:
    """Whether the success banner is currently shown"""
    visible: bool = False


class FlowState(Enum):
    IDLE = 'idle'
    EDITING = 'editing'
    SUBMITTING = 'submitting'


class SubmitOutcome(Enum):
    SENT = 'sent'
    FAILED = 'failed'
    INVALID = 'invalid'


@dataclass(frozen=True)
class ContactInfoEntry:
    icon: str
    label: str
    value: str
    href: str


@dataclass(frozen=True)
class NavLink:
    label: str
    target: str
