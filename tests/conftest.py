# Shared pytest fixtures
from __future__ import annotations

from pathlib import Path

import pytest

from consultant_import.models.reference import (
    Account,
    Coordinator,
    Manager,
    Organization,
    ReferenceDataset,
)

HEADER = [
    "razao_social_cliente",
    "nome_consultores",
    "email_consultor",
    "cpf",
    "status",
    "ativo_consultor",
    "gestor_imediato_id",
    "coordenador_id",
    "analista_rs_id",
    "id_gestao_de_pessoas",
    "valor_pagamento",
]


def make_csv(rows: list[list[str]], header: list[str] | None = None, encoding: str = "utf-8") -> bytes:
    """Build semicolon separated CSV bytes (CRLF line endings like spreadsheet exports)."""
    lines = [";".join(header or HEADER)]
    lines.extend(";".join(r) for r in rows)
    return ("\r\n".join(lines) + "\r\n").encode(encoding)


@pytest.fixture()
def temp_workdir(monkeypatch, tmp_path: Path) -> Path:
    (tmp_path / "config").mkdir()
    (tmp_path / "data").mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CONSULTANT_IMPORT_CONFIG", raising=False)
    return tmp_path


@pytest.fixture()
def reference() -> ReferenceDataset:
    return ReferenceDataset.build(
        organizations=[
            Organization(id=1, name="Acme Tecnologia Ltda", default_recruiter_id=10, default_people_manager_id=20),
            Organization(id=2, name="Banco Horizonte S.A."),
        ],
        managers=[
            Manager(id=100, name="Ana Silva", organization_id=1),
            Manager(id=101, name="Ana Souza", organization_id=1),
            Manager(id=200, name="Carlos Pereira", organization_id=2, active=False),
        ],
        coordinators=[
            Coordinator(id=1000, name="Beatriz Lima", manager_id=100),
        ],
        accounts=[
            Account(id=10, email="recrutamento@empresa.com.br"),
            Account(id=11, email="joana.rs@empresa.com.br"),
            Account(id=20, email="pessoas@empresa.com.br"),
        ],
    )


@pytest.fixture()
def sample_config_yaml() -> str:
    return """delimiter: ";"
fallback_encodings: [cp1252, latin-1]
null_sentinels: ["NULL", "undefined", "-"]
default_role: Consultor
error_log_dir: logs
preview_rows: 10
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "import.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def reference_yaml() -> str:
    return """organizations:
  - {id: 1, name: "Acme Tecnologia Ltda", default_recruiter_id: 10, default_people_manager_id: 20}
managers:
  - {id: 100, name: "Ana Silva", organization_id: 1}
  - {id: 101, name: "Ana Souza", organization_id: 1}
coordinators:
  - {id: 1000, name: "Beatriz Lima", manager_id: 100}
accounts:
  - {id: 10, email: "recrutamento@empresa.com.br"}
"""


@pytest.fixture()
def write_reference(temp_workdir: Path, reference_yaml: str) -> Path:
    path = temp_workdir / "config" / "reference.yml"
    path.write_text(reference_yaml, encoding="utf-8")
    return path


@pytest.fixture()
def build_csv():
    return make_csv
