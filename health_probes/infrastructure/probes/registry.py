"""Ordered collection of the probes exposed by the application."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List

from health_probes.domain.entities.errors import ProbeNotFoundError
from health_probes.domain.ports.health_probe import IHealthProbe


class ProbeRegistry:
    """Name-to-probe lookup preserving registration order."""

    def __init__(self, probes: Iterable[IHealthProbe] = ()) -> None:
        self._probes: Dict[str, IHealthProbe] = {}
        for probe in probes:
            self.register(probe)

    def register(self, probe: IHealthProbe) -> None:
        if probe.name in self._probes:
            raise ValueError(f"Probe '{probe.name}' is already registered")
        self._probes[probe.name] = probe

    def get(self, name: str) -> IHealthProbe:
        try:
            return self._probes[name]
        except KeyError:
            raise ProbeNotFoundError(name) from None

    @property
    def names(self) -> List[str]:
        return list(self._probes)

    def __iter__(self) -> Iterator[IHealthProbe]:
        return iter(list(self._probes.values()))

    def __len__(self) -> int:
        return len(self._probes)
