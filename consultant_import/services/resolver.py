from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

from ..models.reference import Account, Coordinator, Manager, Organization, ReferenceDataset
from ..normalize.text import normalize_text

"""Entity resolution of free-text references against the reference snapshot.

Matching policy, identical for every entity kind:
1. normalize query and candidate names (diacritics, whitespace, case)
2. exact match -> Resolved
3. first token of the query is a prefix of a candidate name -> first such
   candidate, ResolvedByFallback(kind=PARTIAL)
4. managers/coordinators only: first active member of the scope,
   ResolvedByFallback(kind=SCOPE_FALLBACK)
Otherwise Unresolved. Candidates are scanned in snapshot order, so ties go to
the first entry supplied by the caller.

Accounts are matched by email, exact only; their fallback is the parent
organization's default id, decided by the validation pipeline.
"""

__all__ = [
    "MatchKind",
    "Resolved",
    "ResolvedByFallback",
    "Unresolved",
    "Resolution",
    "EntityResolver",
]

T = TypeVar("T")


class MatchKind(Enum):
    PARTIAL = "partial"  # first-token prefix match
    SCOPE_FALLBACK = "scope_fallback"  # first active member of the scope


@dataclass(frozen=True)
class Resolved(Generic[T]):
    entity: T


@dataclass(frozen=True)
class ResolvedByFallback(Generic[T]):
    entity: T
    kind: MatchKind
    note: str


@dataclass(frozen=True)
class Unresolved:
    query: str


Resolution = Union[Resolved[T], ResolvedByFallback[T], Unresolved]


def _first_token(normalized: str) -> str:
    parts = normalized.split(" ")
    return parts[0] if parts else ""


def _match(
    query: str,
    candidates: Sequence[T],
    name_of: Callable[[T], str],
    describe: str,
) -> Resolved[T] | ResolvedByFallback[T] | None:
    key = normalize_text(query)
    if not key:
        return None

    for candidate in candidates:
        if normalize_text(name_of(candidate)) == key:
            return Resolved(candidate)

    token = _first_token(key)
    for candidate in candidates:
        if normalize_text(name_of(candidate)).startswith(token):
            return ResolvedByFallback(
                candidate,
                MatchKind.PARTIAL,
                f'{describe} "{query}" matched approximately as "{name_of(candidate)}"',
            )
    return None


class EntityResolver:
    """Resolve organization/manager/coordinator names and account emails.

    Stateless apart from the read-only snapshot it wraps; safe to reuse for
    every row of a run.
    """

    def __init__(self, reference: ReferenceDataset) -> None:
        self.reference = reference

    def organization(self, name: str) -> Resolution[Organization]:
        found = _match(name, self.reference.organizations, lambda o: o.name, "Organization")
        return found if found is not None else Unresolved(name)

    def manager(self, name: str, organization_id: int) -> Resolution[Manager]:
        # a blank name never falls back: the column is mandatory
        if not normalize_text(name):
            return Unresolved(name)
        scope = self.reference.managers_of(organization_id)
        found = _match(name, scope, lambda m: m.name, "Manager")
        if found is not None:
            return found
        active = next((m for m in scope if m.active), None)
        if active is not None:
            return ResolvedByFallback(
                active,
                MatchKind.SCOPE_FALLBACK,
                f'Manager "{name}" not found. Using "{active.name}" as fallback',
            )
        return Unresolved(name)

    def coordinator(self, name: str, manager_id: int) -> Resolution[Coordinator]:
        if not normalize_text(name):
            return Unresolved(name)
        scope = self.reference.coordinators_of(manager_id)
        found = _match(name, scope, lambda c: c.name, "Coordinator")
        if found is not None:
            return found
        active = next((c for c in scope if c.active), None)
        if active is not None:
            return ResolvedByFallback(
                active,
                MatchKind.SCOPE_FALLBACK,
                f'Coordinator "{name}" not found. Using "{active.name}" as fallback',
            )
        return Unresolved(name)

    def account(self, email: str) -> Resolution[Account]:
        key = normalize_text(email)
        if not key:
            return Unresolved(email)
        for account in self.reference.accounts:
            if normalize_text(account.email) == key:
                return Resolved(account)
        return Unresolved(email)
