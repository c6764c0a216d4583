"""HTTP API for the calendar."""
