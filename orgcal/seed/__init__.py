"""Sample data for demos and local development."""

from .demo_data import create_demo_data, generate_demo_events

__all__ = ['create_demo_data', 'generate_demo_events']
