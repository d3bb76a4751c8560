"""Consultant CSV import: decode, tokenize, normalize and resolve personnel rows
against a reference snapshot before handing accepted records to storage."""

__version__ = "0.1.0"
