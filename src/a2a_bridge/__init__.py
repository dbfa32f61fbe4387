"""A2A Bridge: exposes a chat-completions assistant as an A2A agent and
lets it call other A2A agents as tools."""

from __future__ import annotations

__version__ = "0.1.0"
