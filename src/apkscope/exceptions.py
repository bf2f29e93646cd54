"""Typed exception hierarchy for apkscope."""


class ApkScopeError(Exception):
    """Base exception for all apkscope errors."""

    pass


class InvalidAPKError(ApkScopeError):
    """Raised when the input path is not a readable APK archive."""

    pass


class FormatError(ApkScopeError):
    """Raised when a manifest value is not in the expected encoding."""

    def __init__(self, value: str, expected: str = "hexadecimal text"):
        self.value = value
        self.expected = expected
        super().__init__(f"Expected {expected}, got: {value!r}")


class MissingEntryError(ApkScopeError):
    """Raised when a required entry does not exist in the APK."""

    def __init__(self, entry: str):
        self.entry = entry
        super().__init__(f"Manifest not found: no '{entry}' entry in APK")


class DecodeError(ApkScopeError):
    """Raised when the manifest entry cannot be decoded."""

    def __init__(self, entry: str, reason: str):
        self.entry = entry
        self.reason = reason
        super().__init__(f"Invalid package: cannot decode '{entry}': {reason}")


class ToolNotFoundError(ApkScopeError):
    """Raised when a required external tool is not installed."""

    def __init__(self, tool: str, install_hint: str | None = None):
        self.tool = tool
        self.install_hint = install_hint
        message = f"Required tool not found: {tool}"
        if install_hint:
            message += f"\nInstall: {install_hint}"
        super().__init__(message)


class ProcessError(ApkScopeError):
    """Raised when a subprocess command fails."""

    def __init__(self, command: list[str], returncode: int, stderr: str):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        cmd_str = " ".join(command)
        super().__init__(f"Command failed (exit {returncode}): {cmd_str}\n{stderr}")


class CertificateError(ApkScopeError):
    """Raised when the signing certificate cannot be inspected."""

    pass
