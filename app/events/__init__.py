"""
Event Log Subsystem

Read access to the registry's append-only notifications for external indexers.
"""

from .routes import create_events_blueprint

__all__ = ['create_events_blueprint']
