from __future__ import annotations

import pytest

from consultant_import.models.record import ConsultantStatus, TerminationReason
from consultant_import.normalize.coercion import (
    parse_active_flag,
    parse_status,
    parse_termination_reason,
    parse_year,
)
from consultant_import.normalize.text import clean_text, normalize_text


def test_normalize_text_strips_diacritics_and_collapses_spaces():
    assert normalize_text("  Não   Cumprimento DE Atividades ") == "nao cumprimento de atividades"


def test_clean_text_sentinels():
    assert clean_text(" null ") == ""
    assert clean_text(" Ana ") == "Ana"


@pytest.mark.parametrize("raw", [None, "", "null"])
def test_active_flag_defaults_true(raw):
    assert parse_active_flag(raw) is True


@pytest.mark.parametrize("raw,expected", [("TRUE", True), ("true", True), ("false", False), ("nope", False)])
def test_active_flag_literal_match(raw, expected):
    assert parse_active_flag(raw) is expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("Perdido", ConsultantStatus.LOST),
        ("ENCERRADO", ConsultantStatus.ENDED),
        ("Ended", ConsultantStatus.ENDED),
        ("lost", ConsultantStatus.LOST),
        ("Ativo", ConsultantStatus.ACTIVE),
        ("", ConsultantStatus.ACTIVE),
        ("whatever", ConsultantStatus.ACTIVE),
    ],
)
def test_status_labels(raw, expected):
    assert parse_status(raw) is expected


def test_year_parsing():
    assert parse_year("2025", default=2000) == 2025
    assert parse_year("2025.0", default=2000) == 2025
    assert parse_year("", default=2000) == 2000
    assert parse_year("n/a", default=2000) == 2000


def test_termination_reason_exact_ignores_case_and_accents():
    assert parse_termination_reason("baixa performance tecnica") is TerminationReason.LOW_TECHNICAL_PERFORMANCE


def test_termination_reason_substring_match():
    assert parse_termination_reason("Internalizado") is TerminationReason.HIRED_BY_CLIENT
    assert (
        parse_termination_reason("Oportunidade Financeira melhor")
        is TerminationReason.FINANCIAL_OPPORTUNITY
    )


def test_termination_reason_unknown_is_other():
    assert parse_termination_reason("Mudou de cidade") is TerminationReason.OTHER


def test_termination_reason_blank_is_none():
    assert parse_termination_reason("") is None
    assert parse_termination_reason(None) is None
