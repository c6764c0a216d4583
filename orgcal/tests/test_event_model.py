from datetime import datetime, timedelta

import pytest

from orgcal.models import Event, EventCategory, EventType, User, UserRole
from orgcal.utils.validation import EventValidationError, collect_event_errors, validate_event


def test_defaults():
    event = Event(title="Movie Night", start_time=datetime(2026, 10, 20, 19), created_by='admin')
    assert event.id is None
    assert event.event_type == EventType.CAMPUS_ACTIVITY
    assert event.category == EventCategory.OPTIONAL
    assert event.description == ''
    assert event.is_recurring is False
    assert event.is_cancelled is False


def test_display_helpers(make_event):
    event = make_event(datetime(2026, 10, 20, 19, 0), datetime(2026, 10, 20, 20, 30),
                       house_id='AV', title="House Meeting")
    assert event.display_time == "19:00 - 20:30"
    assert event.display_date == "Oct 20, 2026"
    assert event.duration == timedelta(minutes=90)
    assert event.house_name == "Ashford Village"
    assert event.event_type_label == "Campus Activity"
    assert str(event) == "[AV] House Meeting - Oct 20, 2026 19:00"


def test_open_ended_event(make_event):
    event = make_event(datetime(2026, 10, 20, 19, 0), None, title="Drop-in")
    assert event.display_time == "19:00"
    assert event.effective_end == datetime(2026, 10, 20, 20, 0)
    assert event.house_name == ''
    assert str(event).startswith("[Community] Drop-in")


def test_all_day_and_multi_day(make_event):
    assert make_event(datetime(2026, 10, 20), None).is_all_day
    assert not make_event(datetime(2026, 10, 20, 9), None).is_all_day
    assert make_event(datetime(2026, 10, 20, 22), datetime(2026, 10, 21, 2)).is_multi_day


def test_relative_to_now(make_event):
    now = datetime(2026, 10, 20, 12, 0)
    morning = make_event(datetime(2026, 10, 20, 9), datetime(2026, 10, 20, 10))
    lunch = make_event(datetime(2026, 10, 20, 11, 30), datetime(2026, 10, 20, 12, 30))
    tomorrow = make_event(datetime(2026, 10, 21, 9), None)

    assert morning.is_today(now) and lunch.is_today(now)
    assert not tomorrow.is_today(now)
    assert morning.is_past(now) and not morning.is_upcoming(now)
    assert tomorrow.is_upcoming(now) and not tomorrow.is_past(now)
    assert lunch.is_currently_active(now)
    assert not morning.is_currently_active(now)


def test_open_ended_event_is_active_for_default_duration(make_event):
    event = make_event(datetime(2026, 10, 20, 11, 30), None)
    assert event.is_currently_active(datetime(2026, 10, 20, 12, 29))
    assert event.is_past(datetime(2026, 10, 20, 12, 31))


def test_relative_checks_default_to_wall_clock(make_event):
    now = datetime.now()
    assert make_event(now + timedelta(days=1)).is_upcoming()
    assert make_event(now - timedelta(hours=3), now - timedelta(hours=2)).is_past()


def test_clone_of_recurring_template_links_back(make_event):
    template = make_event(id=7, house_id='SP', is_recurring=True, recurring_pattern='Weekly')
    copy = template.clone()
    assert copy.id is None
    assert copy.parent_event_id == 7
    assert copy.is_recurring is False
    assert copy.recurring_pattern is None
    assert copy.house_id == 'SP'
    assert copy.title == template.title


def test_clone_keeps_parent_link_of_non_template(make_event):
    occurrence = make_event(id=9, parent_event_id=7)
    assert occurrence.clone().parent_event_id == 7
    assert make_event(id=10).clone().parent_event_id is None


def test_to_dict_uses_enum_values(make_event):
    data = make_event(datetime(2026, 10, 20, 10), None, house_id='NL').to_dict()
    assert data['event_type'] == 'CampusActivity'
    assert data['category'] == 'Optional'
    assert data['start_time'] == '2026-10-20T10:00:00'
    assert data['end_time'] is None
    assert data['house_name'] == 'North Lodge'


def test_collect_event_errors_reports_every_problem():
    event = Event(title='  ', start_time=None, created_by=None)
    errors = collect_event_errors(event)
    assert "Title is required" in errors
    assert "Start time is required" in errors
    assert "Creator is required" in errors


def test_validate_event_rules(make_event):
    validate_event(make_event(house_id='AV'))

    with pytest.raises(EventValidationError) as exc_info:
        validate_event(make_event(datetime(2026, 10, 20, 11), datetime(2026, 10, 20, 10)))
    assert exc_info.value.errors == ["End time cannot be before start time"]

    with pytest.raises(EventValidationError):
        validate_event(make_event(house_id='ZZ'))

    with pytest.raises(EventValidationError):
        validate_event(make_event(is_cancelled=True, cancel_reason=''))


def test_validation_error_is_a_value_error():
    assert issubclass(EventValidationError, ValueError)


def test_user_permissions(make_event):
    admin = User(id='admin', username='admin', role=UserRole.ADMIN)
    parent = User(id='jdoe', username='jdoe', role=UserRole.HOUSE_PARENT, house_assignment='AV')
    staff = User(id='staff', username='staff', role=UserRole.STAFF, full_name='Sam Staff')

    av_event = make_event(house_id='AV', created_by='admin')
    sp_event = make_event(house_id='SP', created_by='staff')

    assert admin.can_edit_event(sp_event)
    assert parent.can_edit_event(av_event)
    assert not parent.can_edit_event(sp_event)
    assert staff.can_edit_event(sp_event)
    assert not staff.can_edit_event(av_event)
    assert staff.display_name == 'Sam Staff'
    assert admin.role_description == 'Administrator'


def test_non_text_title_is_a_validation_error(make_event):
    errors = collect_event_errors(make_event(title=5))
    assert errors == ["Title is required"]


def test_creator_check_can_be_skipped_for_edits(make_event):
    event = make_event(created_by=None)
    assert collect_event_errors(event) == ["Creator is required"]
    validate_event(event, require_creator=False)
