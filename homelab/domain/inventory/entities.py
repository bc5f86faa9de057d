"""
Inventory Entities

A home lab and the systems it contains. The lab is the unit that gets
snapshotted into the cache; pydantic owns the JSON encoding.
"""

from ipaddress import IPv4Address
from typing import List

from pydantic import BaseModel, Field

from .exceptions import NoSystemsFoundError, SearchTermTooShortError
from .value_objects import CPUInfo, OperatingSystem, SystemType

MIN_SEARCH_TERM_LENGTH = 3


class System(BaseModel):
    """A single machine in the lab, identified by its host name."""

    name: str = Field(..., min_length=1, description="Host name")
    system_type: SystemType
    cpu_info: CPUInfo
    ram_in_gb: float = Field(..., gt=0)
    os: OperatingSystem
    ip_address: IPv4Address


class HomeLab(BaseModel):
    """Named collection of systems."""

    name: str = Field(..., min_length=1)
    systems: List[System] = Field(default_factory=list)

    def add_system(self, system: System) -> None:
        self.systems.append(system)

    def search_systems(self, term: str) -> List[System]:
        """
        Return every system whose name contains ``term``.

        Raises:
            SearchTermTooShortError: If ``term`` is shorter than three characters.
            NoSystemsFoundError: If no system name contains ``term``.
        """
        if len(term) < MIN_SEARCH_TERM_LENGTH:
            raise SearchTermTooShortError(term, MIN_SEARCH_TERM_LENGTH)

        results = [system for system in self.systems if term in system.name]
        if not results:
            raise NoSystemsFoundError(term)
        return results

    def to_snapshot(self) -> str:
        """Pretty-printed JSON representation of the whole lab."""
        return self.model_dump_json(indent=2)

    @classmethod
    def from_snapshot(cls, snapshot: str) -> "HomeLab":
        """Rebuild a lab from ``to_snapshot`` output.

        Raises pydantic.ValidationError when the snapshot does not describe a lab.
        """
        return cls.model_validate_json(snapshot)
