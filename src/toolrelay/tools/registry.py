"""Tool registry — the declared schemas the dispatcher validates against."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from toolrelay.tools import TOOL_DEFINITIONS, ToolSpec


class ToolRegistry:
    """Ordered collection of ToolSpecs.

    Registration appends without a duplicate check; lookup returns the
    first spec whose name matches.

    Usage::

        registry = ToolRegistry.default()
        spec = registry.get("read_file")
    """

    def __init__(self, specs: Iterable[ToolSpec] = ()) -> None:
        self._specs: list[ToolSpec] = list(specs)

    @classmethod
    def default(cls) -> ToolRegistry:
        """Build a registry holding the full tool catalogue."""
        registry = cls()
        for spec in TOOL_DEFINITIONS:
            registry.register(spec)
        return registry

    def register(self, spec: ToolSpec) -> None:
        self._specs.append(spec)

    def get(self, name: str) -> ToolSpec | None:
        """Return the first spec registered under name, or None."""
        for spec in self._specs:
            if spec.name == name:
                return spec
        return None

    def definitions(self) -> list[dict[str, Any]]:
        """Render every registered spec as an Anthropic tool definition."""
        return [spec.to_schema() for spec in self._specs]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[ToolSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)
