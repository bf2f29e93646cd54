"""Pydantic models for signing certificate details."""

from pydantic import BaseModel, ConfigDict


class CertificateInfo(BaseModel):
    """Subject fields and validity dates of a signing certificate.

    A record with every field set to None means no certificate was found.
    """

    model_config = ConfigDict(frozen=True)

    issuer_raw: str | None = None
    """Distinguished name text as printed by the tool, label stripped."""

    cn: str | None = None
    """Common name."""

    ou: str | None = None
    """Organizational unit."""

    o: str | None = None
    """Organization."""

    st: str | None = None
    """State or province."""

    l: str | None = None  # noqa: E741
    """Locality."""

    c: str | None = None
    """Country."""

    creation_date: str | None = None
    """Start of validity, verbatim from the tool."""

    expiration_date: str | None = None
    """End of validity, verbatim from the tool."""

    @property
    def is_empty(self) -> bool:
        """Check if no certificate data was found."""
        return all(value is None for value in self.model_dump().values())
