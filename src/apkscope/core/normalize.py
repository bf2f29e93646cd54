"""Decoding of the manifest format's primitive value encodings."""

import re
from typing import Final

from apkscope.exceptions import FormatError

# Canonical boolean encodings emitted by the manifest decoder
FALSE_TOKEN: Final[str] = "0x0"
TRUE_TOKEN: Final[str] = "0xffffffff"

GPU_VERSION_LABEL: Final[str] = "Open GL "

_HEX_INTEGER = re.compile(r"(?:0[xX])?[0-9a-fA-F]+")
_NOT_VERSION_DIGIT = re.compile(r"[^1-9]")


def is_tri_state_token(raw: str) -> bool:
    """Check if a raw value is one of the two boolean encodings."""
    return raw in (FALSE_TOKEN, TRUE_TOKEN)


def normalize_tri_state_bool(raw: str) -> bool:
    """Decode a hex boolean token.

    Only FALSE_TOKEN decodes to False. Every other value, including
    unrecognized tokens, decodes to True.
    """
    return raw != FALSE_TOKEN


def normalize_hex_integer(raw: str) -> int:
    """Decode hexadecimal text (with or without a 0x prefix) to an integer.

    Args:
        raw: Encoded value, e.g. '0x1a'.

    Returns:
        The decoded integer.

    Raises:
        FormatError: If raw is not hexadecimal text.
    """
    if not _HEX_INTEGER.fullmatch(raw):
        raise FormatError(raw)
    return int(raw, 16)


def normalize_gpu_version(raw: str) -> str:
    """Render an encoded GL ES version as a dotted version label.

    The significant digits of the encoding (every digit except 0) are
    joined with dots, and an encoding ending in 0 gets a '.0' suffix:
    '0x20000' -> 'Open GL 2.0', '0x20001' -> 'Open GL 2.1'.
    """
    version = ".".join(_NOT_VERSION_DIGIT.sub("", raw))
    if raw.endswith("0"):
        version += ".0"
    return GPU_VERSION_LABEL + version
