"""HTTP server for SafeBrowse."""

from .app import AgentServer

__all__ = ["AgentServer"]
