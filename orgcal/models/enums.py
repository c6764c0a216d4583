"""Enumerations for events and users, with their display labels.

Labels are plain lookup tables keyed by enum member.
"""

from enum import Enum


class EventType(Enum):
    """What kind of activity an event is."""
    MEAL = 'Meal'
    CAMPUS_ACTIVITY = 'CampusActivity'
    OFF_CAMPUS_ACTIVITY = 'OffCampusActivity'
    SCHOOL_ACTIVITY = 'SchoolActivity'
    MEDICAL_APPOINTMENT = 'MedicalAppointment'
    JOB = 'Job'


class EventCategory(Enum):
    """Attendance expectation of an event."""
    MANDATORY = 'Mandatory'
    OPTIONAL = 'Optional'
    HOUSE = 'House'


class UserRole(Enum):
    ADMIN = 'Admin'
    COMMUNITY_MANAGER = 'CommunityManager'
    HOUSE_PARENT = 'HouseParent'
    STAFF = 'Staff'


EVENT_TYPE_LABELS = {
    EventType.MEAL: 'Meal',
    EventType.CAMPUS_ACTIVITY: 'Campus Activity',
    EventType.OFF_CAMPUS_ACTIVITY: 'Off Campus Activity',
    EventType.SCHOOL_ACTIVITY: 'School Activity',
    EventType.MEDICAL_APPOINTMENT: 'Medical Appointment',
    EventType.JOB: 'Job',
}

CATEGORY_LABELS = {
    EventCategory.MANDATORY: 'Mandatory',
    EventCategory.OPTIONAL: 'Optional',
    EventCategory.HOUSE: 'House',
}

ROLE_LABELS = {
    UserRole.ADMIN: 'Administrator',
    UserRole.COMMUNITY_MANAGER: 'Community Manager',
    UserRole.HOUSE_PARENT: 'House Parent',
    UserRole.STAFF: 'Staff',
}


def enum_values(enum_class):
    """Persist enum members by value ('CampusActivity') rather than by name."""
    return [member.value for member in enum_class]
