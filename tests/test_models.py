import dataclasses

import pytest

from models import ContactSubmission, CONTACT_FIELDS


def test_empty_submission_has_blank_fields():
    submission = ContactSubmission.empty()
    assert submission.to_dict() == {'name': '', 'email': '', 'message': ''}
    assert submission.is_empty()


def test_with_field_returns_new_record():
    original = ContactSubmission.empty()
    updated = original.with_field('name', 'Jane')

    assert updated is not original
    assert original.name == ''
    assert updated == ContactSubmission(name='Jane')


def test_submission_is_immutable():
    submission = ContactSubmission.empty()
    with pytest.raises(dataclasses.FrozenInstanceError):
        submission.name = 'Jane'


def test_unknown_field_rejected():
    with pytest.raises(ValueError):
        ContactSubmission.empty().with_field('phone', '555')


@pytest.mark.parametrize('updates', [
    [('name', 'J'), ('name', 'Ja'), ('name', 'Jane')],
    [('email', 'a@b.co'), ('message', 'Hi'), ('email', 'jane@example.com')],
    [('message', 'x'), ('name', 'Jane'), ('message', ''), ('email', 'e@x.io')],
])
def test_last_write_wins_and_untouched_fields_keep_value(updates):
    start = ContactSubmission(name='prior-name', email='prior@x.io', message='prior')
    submission = start
    for field_name, value in updates:
        submission = submission.with_field(field_name, value)

    expected = start.to_dict()
    for field_name, value in updates:
        expected[field_name] = value

    assert submission.to_dict() == expected
    for field_name in CONTACT_FIELDS:
        if field_name not in {name for name, _ in updates}:
            assert getattr(submission, field_name) == getattr(start, field_name)
