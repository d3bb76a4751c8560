from __future__ import annotations

import logging
from datetime import date

from ..delimited.reader import RawRow
from ..models.config_models import ImportConfig
from ..models.outcome import Accepted, Rejected, RowOutcome
from ..models.record import TERMINAL_STATUSES, NormalizedRecord
from ..models.reference import Organization
from ..normalize import (
    clean_cnpj,
    clean_cpf,
    clean_phone,
    clean_text,
    normalize_text,
    parse_active_flag,
    parse_currency,
    parse_locale_date,
    parse_serial_date,
    parse_status,
    parse_termination_reason,
    parse_year,
)
from .resolver import EntityResolver, Resolved, ResolvedByFallback, Unresolved

"""Row validation pipeline.

Turns one RawRow into exactly one RowOutcome. Reference resolution runs first
and short-circuits on the first fatal condition (organization, manager, blank
consultant name); the scalar normalizers that follow can only add warnings.
"""

__all__ = [
    "validate_row",
]

logger = logging.getLogger(__name__)


def _resolve_account_id(
    resolver: EntityResolver,
    email: str,
    default_id: int | None,
    label: str,
    fallback_label: str,
    warnings: list[str],
) -> int | None:
    """Account id by email, or the organization default.

    A blank email silently takes the default; a non-blank unmatched email
    takes it with a warning.
    """
    if not email:
        return default_id
    resolution = resolver.account(email)
    if isinstance(resolution, Resolved):
        return resolution.entity.id
    warnings.append(f'{label} "{email}" not found. Using the organization\'s {fallback_label}.')
    return default_id


def validate_row(
    row: RawRow,
    resolver: EntityResolver,
    config: ImportConfig | None = None,
    today: date | None = None,
) -> RowOutcome:
    """Validate and normalize a single CSV row.

    Args:
        row: Header-mapped row (missing cells read as "")
        resolver: Resolver bound to this run's reference snapshot
        config: Import configuration (null sentinels, default role)
        today: Date used for defaulted fields (inclusion date, validity year)

    Returns:
        Accepted with the record, or Rejected with the fatal error(s).
    """
    cfg = config or ImportConfig()
    today = today or date.today()
    sentinels = cfg.null_sentinels
    warnings: list[str] = []

    # every normalizer reads its cell through the configured sentinels
    def text(column: str) -> str:
        return clean_text(row.get(column), sentinels)

    def reject(message: str) -> Rejected:
        logger.debug("row=%d rejected: %s", row.row_number, message)
        return Rejected(row.row_number, errors=(message,), warnings=tuple(warnings))

    # 1. organization (fatal when unresolved)
    organization_name = text("razao_social_cliente")
    org_resolution = resolver.organization(organization_name)
    if isinstance(org_resolution, Unresolved):
        return reject(f'Organization "{organization_name}" not found')
    if isinstance(org_resolution, ResolvedByFallback):
        warnings.append(org_resolution.note)
    organization: Organization = org_resolution.entity

    # 2. manager within the organization
    manager_name = text("gestor_imediato_id")
    manager_resolution = resolver.manager(manager_name, organization.id)
    if isinstance(manager_resolution, Unresolved):
        return reject(
            f'Manager "{manager_name}" not found for organization "{organization_name}"'
        )
    if isinstance(manager_resolution, ResolvedByFallback):
        warnings.append(manager_resolution.note)
    manager = manager_resolution.entity

    # 3. coordinator within the manager (optional)
    coordinator_name = text("coordenador_id")
    coordinator_id: int | None = None
    if coordinator_name:
        coord_resolution = resolver.coordinator(coordinator_name, manager.id)
        if isinstance(coord_resolution, Unresolved):
            warnings.append(f'Coordinator "{coordinator_name}" not found')
        else:
            coordinator_id = coord_resolution.entity.id
            if isinstance(coord_resolution, ResolvedByFallback):
                warnings.append(coord_resolution.note)

    # 4. support accounts by email, defaulting to the organization's contacts
    recruiter_id = _resolve_account_id(
        resolver,
        text("analista_rs_id"),
        organization.default_recruiter_id,
        "Recruiter",
        "recruiter",
        warnings,
    )
    people_manager_id = _resolve_account_id(
        resolver,
        text("id_gestao_de_pessoas"),
        organization.default_people_manager_id,
        "People manager",
        "people manager",
        warnings,
    )

    # 5. consultant name is mandatory
    name = text("nome_consultores")
    if not name:
        return reject("Consultant name is required")

    # 6. status and active flag (terminal status forces inactive)
    status = parse_status(text("status"))
    active = status not in TERMINAL_STATUSES and parse_active_flag(text("ativo_consultor"))

    # 7. remaining scalar fields
    raw_reason = text("motivo_desligamento")
    termination_reason = parse_termination_reason(raw_reason)
    if termination_reason is not None and normalize_text(termination_reason.value) != normalize_text(raw_reason):
        warnings.append(
            f'Termination reason "{raw_reason}" interpreted as "{termination_reason.value}"'
        )

    record = NormalizedRecord(
        name=name,
        email=text("email_consultor") or None,
        cpf=clean_cpf(text("cpf")),
        role=text("cargo_consultores") or cfg.default_role,
        validity_year=parse_year(text("ano_vigencia"), default=today.year),
        inclusion_date=parse_locale_date(text("data_inclusao_consultores")) or today.isoformat(),
        last_change_date=parse_locale_date(text("data_ultima_alteracao")),
        exit_date=parse_serial_date(text("data_saida")),
        status=status,
        termination_reason=termination_reason,
        active=active,
        manager_id=manager.id,
        coordinator_id=coordinator_id,
        recruiter_id=recruiter_id,
        people_manager_id=people_manager_id,
        billing_amount=parse_currency(text("valor_faturamento")),
        payment_amount=parse_currency(text("valor_pagamento")),
        mobile_phone=clean_phone(text("celular")),
        birth_date=parse_locale_date(text("dt_aniversario")),
        cnpj=clean_cnpj(text("cnpj_consultor")),
        company_name=text("empresa_consultor") or None,
    )

    # 8. accepted
    return Accepted(row.row_number, record=record, warnings=tuple(warnings))
