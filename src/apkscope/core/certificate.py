"""Parsing of certificate details from keytool/openssl text output.

Nothing here runs a process: callers collect the tool output (see
`apkscope.core.signing`) and pass it in as text.

A subject line is read as an RDN sequence::

    sequence   := field (terminator field)*
    field      := NAME "=" VALUE
    NAME       := [A-Z]+
    VALUE      := shortest run of characters without "="
    terminator := ", " followed by the next NAME "=", or end of text
"""

import re
from typing import Final, NamedTuple

from apkscope.models.certificate import CertificateInfo

PEM_BLOCK: Final[re.Pattern[str]] = re.compile(
    r"-----BEGIN CERTIFICATE-----.*-----END CERTIFICATE-----",
    re.DOTALL,
)

RDN_FIELDS: Final[tuple[str, ...]] = ("CN", "OU", "O", "ST", "L", "C")

_FIELD_NAME = r"[A-Z]+"
_SEPARATOR = "="
_VALUE = r"[^=]*?"
_TERMINATOR = rf"(?=, {_FIELD_NAME}{_SEPARATOR}|$)"
_RDN_TOKEN = re.compile(
    rf"(?:^|(?<=, ))(?P<name>{_FIELD_NAME}){_SEPARATOR}(?P<value>{_VALUE}){_TERMINATOR}"
)

# Label printed by `openssl x509 -subject` / `-issuer`
_TOOL_LABEL = re.compile(r"^\s*(?:subject|issuer)\s*=\s*", re.IGNORECASE)
_LINE_BREAKS = re.compile(r"[\r\n]")


class RdnToken(NamedTuple):
    """One NAME=VALUE component of a distinguished name."""

    name: str
    value: str


def find_pem_block(text: str) -> str | None:
    """Return the PEM certificate block in tool output, if any."""
    match = PEM_BLOCK.search(text)
    return match.group(0) if match else None


def tokenize_rdn_sequence(text: str) -> list[RdnToken]:
    """Split a distinguished name into its components, in order."""
    return [
        RdnToken(match.group("name"), match.group("value"))
        for match in _RDN_TOKEN.finditer(text)
    ]


def clean_subject_line(text: str) -> str:
    """Drop line breaks and a leading `subject=`/`issuer=` tool label."""
    return _TOOL_LABEL.sub("", _LINE_BREAKS.sub("", text), count=1)


def parse_subject(text: str) -> dict[str, str | None]:
    """Extract the known RDN fields from a subject line.

    Returns:
        Mapping of lowercase field name to value; missing fields map to None.
        When a field repeats, the first occurrence is kept.
    """
    fields: dict[str, str | None] = {name.lower(): None for name in RDN_FIELDS}
    for token in tokenize_rdn_sequence(clean_subject_line(text)):
        key = token.name.lower()
        if token.name in RDN_FIELDS and fields[key] is None:
            fields[key] = token.value
    return fields


def parse_date_line(text: str) -> str | None:
    """Return the text after the first '=' up to the end of that line."""
    _, separator, rest = text.partition("=")
    if not separator:
        return None
    return rest.splitlines()[0] if rest else ""


def parse_certificate(
    tool_output: str,
    subject_output: str,
    start_date_output: str,
    end_date_output: str,
) -> CertificateInfo:
    """Assemble certificate details from collected tool output.

    Args:
        tool_output: Output that should contain the PEM certificate block.
        subject_output: Output of the subject print operation.
        start_date_output: Output of the start-date print operation.
        end_date_output: Output of the end-date print operation.

    Returns:
        CertificateInfo with the fields that were found. When tool_output
        has no PEM block, an empty CertificateInfo.
    """
    if find_pem_block(tool_output) is None:
        return CertificateInfo()

    issuer_raw = clean_subject_line(subject_output).strip()
    return CertificateInfo(
        issuer_raw=issuer_raw or None,
        **parse_subject(subject_output),
        creation_date=parse_date_line(start_date_output),
        expiration_date=parse_date_line(end_date_output),
    )
