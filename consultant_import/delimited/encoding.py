from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import NamedTuple

"""Encoding recovery for uploaded CSV bytes.

Spreadsheet exports arrive either as UTF-8 or as a Western-European single-byte
code page. UTF-8 is tried first; a replacement character in the result means the
bytes were not UTF-8, so the fallback encodings are tried in order. Latin-1 maps
every byte and therefore always terminates the chain.
"""

__all__ = [
    "DecodedText",
    "decode_bytes",
    "decode_with_encoding",
]

logger = logging.getLogger(__name__)

PRIMARY_ENCODING = "utf-8-sig"  # strips a leading BOM like browser decoders do
LAST_RESORT_ENCODING = "latin-1"
REPLACEMENT_CHAR = "\ufffd"


class DecodedText(NamedTuple):
    text: str
    encoding: str


def decode_with_encoding(
    raw: bytes, fallback_encodings: Sequence[str] = ("cp1252", LAST_RESORT_ENCODING)
) -> DecodedText:
    """Decode bytes and report which encoding was used.

    Never raises for content problems: an unknown codec name or bytes undefined
    in a code page (e.g. 0x81 in cp1252) move on to the next candidate.
    """
    text = raw.decode(PRIMARY_ENCODING, errors="replace")
    if REPLACEMENT_CHAR not in text:
        return DecodedText(text, "utf-8")

    for encoding in fallback_encodings:
        try:
            decoded = raw.decode(encoding)
        except (LookupError, UnicodeDecodeError):
            logger.debug("encoding %s unavailable for payload, trying next", encoding)
            continue
        logger.info("file is not valid UTF-8, decoded as %s", encoding)
        return DecodedText(decoded, encoding)

    logger.info("file is not valid UTF-8, decoded as %s", LAST_RESORT_ENCODING)
    return DecodedText(raw.decode(LAST_RESORT_ENCODING), LAST_RESORT_ENCODING)


def decode_bytes(raw: bytes, fallback_encodings: Sequence[str] = ("cp1252", LAST_RESORT_ENCODING)) -> str:
    """Decode raw file bytes to text (always succeeds)."""
    return decode_with_encoding(raw, fallback_encodings).text
