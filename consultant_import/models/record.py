from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

"""NormalizedRecord model for the consultant CSV import.

A NormalizedRecord is the typed result of one accepted CSV row: scalar fields
already normalized and the free-text references already resolved to ids of the
reference snapshot. `to_storage_dict()` produces the column layout expected by
the persistence collaborator (same names as the operator-facing CSV headers).
"""

__all__ = [
    "ConsultantStatus",
    "TerminationReason",
    "NormalizedRecord",
    "EXPECTED_HEADERS",
    "TERMINAL_STATUSES",
]


# Accepted column set, in the order documented to operators.
EXPECTED_HEADERS: tuple[str, ...] = (
    "razao_social_cliente",
    "nome_consultores",
    "email_consultor",
    "cpf",
    "cargo_consultores",
    "ano_vigencia",
    "data_inclusao_consultores",
    "data_ultima_alteracao",
    "data_saida",
    "status",
    "motivo_desligamento",
    "ativo_consultor",
    "gestor_imediato_id",
    "coordenador_id",
    "analista_rs_id",
    "id_gestao_de_pessoas",
    "valor_faturamento",
    "valor_pagamento",
    "celular",
    "dt_aniversario",
    "cnpj_consultor",
    "empresa_consultor",
)


class ConsultantStatus(Enum):
    """Allocation status. Values are the labels stored downstream.

    - ACTIVE: consultant allocated at the client
    - LOST: allocation lost (terminal)
    - ENDED: allocation ended (terminal)
    """
    ACTIVE = "Ativo"
    LOST = "Perdido"
    ENDED = "Encerrado"


TERMINAL_STATUSES = frozenset({ConsultantStatus.LOST, ConsultantStatus.ENDED})


class TerminationReason(Enum):
    """Closed list of termination reasons; OTHER is the catch-all."""
    LOW_TECHNICAL_PERFORMANCE = "Baixa Performance Técnica"
    BEHAVIORAL_ISSUES = "Problemas Comportamentais"
    ABSENCES_AND_DELAYS = "Excesso de Faltas e Atrasos"
    LOW_PRODUCTIVITY = "Baixa Produtividade"
    UNFULFILLED_ACTIVITIES = "Não Cumprimento de Atividades"
    TECHNICAL_AND_BEHAVIORAL = "Performance Técnica e Comportamental"
    ROLE_ABANDONMENT = "Abandono de Função"
    HIRED_BY_CLIENT = "Internalizado pelo Cliente"
    FINANCIAL_OPPORTUNITY = "Oportunidade Financeira"
    CAREER_OPPORTUNITY = "Oportunidade de Carreira"
    OTHER = "Outros"


@dataclass(frozen=True)
class NormalizedRecord:
    """Commit-ready consultant record (one per accepted row).

    Dates are ISO `YYYY-MM-DD` strings; amounts are floats. `active` is always
    False when `status` is terminal (enforced in __post_init__).
    """
    name: str
    role: str
    validity_year: int
    inclusion_date: str
    status: ConsultantStatus
    active: bool
    manager_id: int
    email: str | None = None
    cpf: str | None = None
    last_change_date: str | None = None
    exit_date: str | None = None
    termination_reason: TerminationReason | None = None
    coordinator_id: int | None = None
    recruiter_id: int | None = None
    people_manager_id: int | None = None
    billing_amount: float | None = None
    payment_amount: float | None = None
    mobile_phone: str | None = None
    birth_date: str | None = None
    cnpj: str | None = None
    company_name: str | None = None

    def __post_init__(self) -> None:
        if self.status in TERMINAL_STATUSES and self.active:
            object.__setattr__(self, "active", False)

    def to_storage_dict(self) -> dict[str, Any]:
        """Map the record onto the storage column names."""
        return {
            "nome_consultores": self.name,
            "email_consultor": self.email,
            "cpf": self.cpf,
            "cargo_consultores": self.role,
            "ano_vigencia": self.validity_year,
            "data_inclusao_consultores": self.inclusion_date,
            "data_ultima_alteracao": self.last_change_date,
            "data_saida": self.exit_date,
            "status": self.status.value,
            "motivo_desligamento": (
                self.termination_reason.value if self.termination_reason else None
            ),
            "ativo_consultor": self.active,
            "gestor_imediato_id": self.manager_id,
            "coordenador_id": self.coordinator_id,
            "analista_rs_id": self.recruiter_id,
            "id_gestao_de_pessoas": self.people_manager_id,
            "valor_faturamento": self.billing_amount,
            "valor_pagamento": self.payment_amount,
            "celular": self.mobile_phone,
            "dt_aniversario": self.birth_date,
            "cnpj_consultor": self.cnpj,
            "empresa_consultor": self.company_name,
        }
