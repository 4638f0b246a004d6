"""API resources built on the paginated query executor."""

from .call_logs import CallLogs

__all__ = ["CallLogs"]
