"""Pure field normalizers.

Each function converts a raw cell string into a canonical value and degrades
to None (or a documented default) on malformed input instead of raising.
"""

from .coercion import parse_active_flag, parse_status, parse_termination_reason, parse_year
from .currency import parse_currency
from .dates import parse_locale_date, parse_serial_date
from .identifiers import clean_cnpj, clean_cpf, clean_phone
from .text import clean_text, normalize_text

__all__ = [
    "clean_cnpj",
    "clean_cpf",
    "clean_phone",
    "clean_text",
    "normalize_text",
    "parse_active_flag",
    "parse_currency",
    "parse_locale_date",
    "parse_serial_date",
    "parse_status",
    "parse_termination_reason",
    "parse_year",
]
