"""RemoteAgentRegistry — read-only lookup of configured remote A2A agents."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from a2a_bridge.config import RemoteAgentEntry


class RemoteAgentRegistry:
    """Maps logical agent ids to their configured entry.

    Built once from configuration; never mutated and never touches the
    network.  :meth:`get` returns ``None`` for unknown ids so callers can
    report the miss themselves.
    """

    def __init__(self, entries: Mapping[str, RemoteAgentEntry]) -> None:
        self._entries: Mapping[str, RemoteAgentEntry] = MappingProxyType(dict(entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def ids(self) -> list[str]:
        return list(self._entries)

    def entries(self) -> list[tuple[str, RemoteAgentEntry]]:
        """All ``(id, entry)`` pairs in configuration order."""
        return list(self._entries.items())

    def get(self, agent_id: str) -> RemoteAgentEntry | None:
        return self._entries.get(agent_id)

    def describe_ids(self) -> str:
        """Comma-separated ids, or ``none`` when the registry is empty."""
        return ", ".join(self._entries) or "none"
