from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

"""Reference snapshot models for the consultant CSV import.

The caller builds one ReferenceDataset per run (organizations, their managers,
the managers' coordinators and the staff accounts). The import never mutates it.
"""

__all__ = [
    "Organization",
    "Manager",
    "Coordinator",
    "Account",
    "ReferenceDataset",
]


@dataclass(frozen=True)
class Organization:
    """Client organization a consultant is allocated to."""
    id: int
    name: str  # razao_social_cliente
    default_recruiter_id: int | None = None  # id_gestor_rs on file
    default_people_manager_id: int | None = None  # id_gestao_de_pessoas on file


@dataclass(frozen=True)
class Manager:
    id: int
    name: str
    organization_id: int
    active: bool = True


@dataclass(frozen=True)
class Coordinator:
    id: int
    name: str
    manager_id: int
    active: bool = True


@dataclass(frozen=True)
class Account:
    """Staff account matched by email (recruiters, people managers)."""
    id: int
    email: str
    name: str = ""
    role: str = ""


@dataclass(frozen=True)
class ReferenceDataset:
    """Read-only snapshot consulted by the entity resolver.

    Collections are stored as tuples so the snapshot stays immutable for the
    whole run; iteration order is the order supplied by the caller and drives
    the first-match tie-break of the resolver.
    """
    organizations: tuple[Organization, ...] = field(default_factory=tuple)
    managers: tuple[Manager, ...] = field(default_factory=tuple)
    coordinators: tuple[Coordinator, ...] = field(default_factory=tuple)
    accounts: tuple[Account, ...] = field(default_factory=tuple)

    @staticmethod
    def build(
        organizations: Iterable[Organization] = (),
        managers: Iterable[Manager] = (),
        coordinators: Iterable[Coordinator] = (),
        accounts: Iterable[Account] = (),
    ) -> ReferenceDataset:
        return ReferenceDataset(
            organizations=tuple(organizations),
            managers=tuple(managers),
            coordinators=tuple(coordinators),
            accounts=tuple(accounts),
        )

    @staticmethod
    def from_dict(data: dict[str, Any]) -> ReferenceDataset:
        """Build a snapshot from plain mappings (YAML/JSON payloads)."""
        return ReferenceDataset.build(
            organizations=(
                Organization(
                    id=o["id"],
                    name=o["name"],
                    default_recruiter_id=o.get("default_recruiter_id"),
                    default_people_manager_id=o.get("default_people_manager_id"),
                )
                for o in data.get("organizations", [])
            ),
            managers=(
                Manager(
                    id=m["id"],
                    name=m["name"],
                    organization_id=m["organization_id"],
                    active=m.get("active", True),
                )
                for m in data.get("managers", [])
            ),
            coordinators=(
                Coordinator(
                    id=c["id"],
                    name=c["name"],
                    manager_id=c["manager_id"],
                    active=c.get("active", True),
                )
                for c in data.get("coordinators", [])
            ),
            accounts=(
                Account(
                    id=a["id"],
                    email=a["email"],
                    name=a.get("name", ""),
                    role=a.get("role", ""),
                )
                for a in data.get("accounts", [])
            ),
        )

    def managers_of(self, organization_id: int) -> list[Manager]:
        return [m for m in self.managers if m.organization_id == organization_id]

    def coordinators_of(self, manager_id: int) -> list[Coordinator]:
        return [c for c in self.coordinators if c.manager_id == manager_id]

    def organization_by_id(self, organization_id: int) -> Organization | None:
        return next((o for o in self.organizations if o.id == organization_id), None)

    def manager_by_id(self, manager_id: int) -> Manager | None:
        return next((m for m in self.managers if m.id == manager_id), None)
