"""apkscope - APK manifest and signing certificate metadata extraction."""

__version__ = "0.1.0"
