"""Organization calendar: events per house, conflicts and month views."""

__version__ = "1.0.0"
