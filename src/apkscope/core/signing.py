"""Signing certificate inspection using keytool and openssl."""

from pathlib import Path

from apkscope.core.certificate import find_pem_block, parse_certificate
from apkscope.exceptions import CertificateError
from apkscope.models.certificate import CertificateInfo
from apkscope.utils.apk import validate_apk_path
from apkscope.utils.config import get_tool_timeout
from apkscope.utils.deps import get_tool_path, require
from apkscope.utils.logging import get_logger
from apkscope.utils.process import run_tool

logger = get_logger(__name__)

# openssl name format matching keytool's "CN=..., OU=..." owner lines
SUBJECT_NAME_OPTIONS = "sep_comma_plus_space,sname"


class CertificateInspector:
    """Collects certificate tool output for an APK and parses it."""

    def __init__(self, apk_path: Path):
        """Initialize certificate inspector.

        Args:
            apk_path: Path to the APK file.
        """
        self.apk_path = apk_path.resolve()

    def dump_certificate(self) -> str:
        """Print the APK's signing certificate in RFC (PEM) form.

        keytool exits non-zero for unsigned APKs; its output is returned
        either way and simply contains no PEM block.
        """
        cmd = [
            get_tool_path("keytool"),
            "-printcert",
            "-rfc",
            "-jarfile",
            str(self.apk_path),
        ]
        result = run_tool(cmd, check=False, timeout=get_tool_timeout())
        return result.combined_output

    def _openssl_x509(self, pem: str, *options: str) -> str:
        cmd = [get_tool_path("openssl"), "x509", "-noout", *options]
        try:
            result = run_tool(cmd, input_text=pem, timeout=get_tool_timeout())
        except Exception as e:
            raise CertificateError(f"openssl could not read certificate: {e}") from e
        return result.stdout

    def inspect(self) -> CertificateInfo:
        """Return the signing certificate details.

        Returns:
            CertificateInfo; empty when the APK carries no certificate.

        Raises:
            InvalidAPKError: If the APK path is invalid.
            ToolNotFoundError: If keytool or openssl is not installed.
            CertificateError: If openssl fails on the extracted certificate.
        """
        validate_apk_path(self.apk_path)
        require("keytool", "openssl")

        tool_output = self.dump_certificate()
        pem = find_pem_block(tool_output)
        if pem is None:
            logger.debug("no certificate found", apk=str(self.apk_path))
            return CertificateInfo()

        subject = self._openssl_x509(pem, "-subject", "-nameopt", SUBJECT_NAME_OPTIONS)
        start_date = self._openssl_x509(pem, "-startdate")
        end_date = self._openssl_x509(pem, "-enddate")

        return parse_certificate(tool_output, subject, start_date, end_date)
