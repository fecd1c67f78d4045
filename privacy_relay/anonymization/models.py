from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import NamedTuple

from privacy_relay.insights.models import InsightDataPackage


@dataclass(frozen=True)
class IdentityMap:
    """Per-call record linking real identities to their pseudonyms.

    Forward maps are real name -> pseudonym. Both are stored as read-only
    copies, so the map cannot change during the call that owns it. Nothing
    here is persisted.
    """

    employees: Mapping[str, str] = field(default_factory=dict)
    projects: Mapping[str, str] = field(default_factory=dict)
    company_name: str = ""
    company_pseudonym: str = "The Company"

    def __post_init__(self) -> None:
        object.__setattr__(self, "employees", MappingProxyType(dict(self.employees)))
        object.__setattr__(self, "projects", MappingProxyType(dict(self.projects)))

    @property
    def reverse_employees(self) -> dict[str, str]:
        return {pseudo: real for real, pseudo in self.employees.items()}

    @property
    def reverse_projects(self) -> dict[str, str]:
        return {pseudo: real for real, pseudo in self.projects.items()}

    def forward_table(self) -> dict[str, str]:
        """Every real identity -> pseudonym, company first, used for free text."""
        table: dict[str, str] = {}
        if self.company_name:
            table[self.company_name] = self.company_pseudonym
        for real, pseudo in self.employees.items():
            table.setdefault(real, pseudo)
        for real, pseudo in self.projects.items():
            table.setdefault(real, pseudo)
        return table

    def reverse_table(self) -> dict[str, str]:
        """Every pseudonym -> real identity, used to restore AI output."""
        table = {**self.reverse_employees, **self.reverse_projects}
        if self.company_name:
            table[self.company_pseudonym] = self.company_name
        return table


class AnonymizationResult(NamedTuple):
    """Output of the data anonymizer; unpacks as (anonymized_data, identity_map)."""

    anonymized_data: InsightDataPackage
    identity_map: IdentityMap
