"""Test configuration for apkscope."""

import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest
from lxml import etree

SAMPLE_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns:android="http://schemas.android.com/apk/res/android"
          package="com.example.app">
  <uses-sdk android:minSdkVersion="0x15" android:targetSdkVersion="0x21"/>
  <uses-permission android:name="android.permission.INTERNET"/>
  <uses-permission android:name="android.permission.CAMERA"/>
  <uses-permission-sdk-23 android:name="android.permission.READ_CONTACTS"/>
  <uses-feature android:glEsVersion="0x20000" android:required="0xffffffff"/>
  <uses-feature android:name="android.hardware.camera" android:required="0x0"/>
  <supports-screens android:smallScreens="0x0"
                    android:normalScreens="0xffffffff"
                    android:largeScreens="0xffffffff"/>
  <application android:name="com.example.app.App"
               android:allowBackup="0x0"
               android:debuggable="0xffffffff"
               android:label="@7f0b0001">
    <activity android:name=".MainActivity">
      <intent-filter>
        <action android:name="android.intent.action.MAIN"/>
        <category android:name="android.intent.category.LAUNCHER"/>
      </intent-filter>
      <intent-filter>
        <!-- declares nothing -->
      </intent-filter>
    </activity>
    <receiver android:name=".BootReceiver">
      <intent-filter>
        <action android:name="android.intent.action.BOOT_COMPLETED"/>
        <action android:name="android.intent.action.QUICKBOOT_POWERON"/>
      </intent-filter>
    </receiver>
  </application>
</manifest>
"""

# Same manifest as rendered by a decoder (decimal integers, literal booleans)
RENDERED_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns:android="http://schemas.android.com/apk/res/android"
          package="com.example.rendered">
  <uses-sdk android:minSdkVersion="21" android:targetSdkVersion="34"/>
  <uses-feature android:name="android.hardware.wifi" android:required="false"/>
  <supports-screens android:smallScreens="false" android:anyDensity="true"/>
  <application android:allowBackup="false" android:label="Example"/>
</manifest>
"""

ANDROID_NS_DECL = 'xmlns:android="http://schemas.android.com/apk/res/android"'


@pytest.fixture
def parse_xml() -> Callable[[str], etree._Element]:
    """Parse XML text into an lxml root element.

    Returns:
        A function accepting XML text (str) and returning the root element.
    """

    def _parse(text: str) -> etree._Element:
        return etree.fromstring(text.encode("utf-8"))

    return _parse


@pytest.fixture
def sample_tree(parse_xml):
    """Root element of the sample manifest (hex-encoded values)."""
    return parse_xml(SAMPLE_MANIFEST)


@pytest.fixture
def make_apk(tmp_path) -> Callable[..., Path]:
    """Factory that writes an APK-like ZIP archive into a temporary directory.

    Returns:
        A function taking a mapping of entry name to content (str or bytes)
        and an optional file name, returning the archive path.
    """

    def _make(entries: dict[str, str | bytes], name: str = "sample.apk") -> Path:
        apk_path = tmp_path / name
        with zipfile.ZipFile(apk_path, "w") as zf:
            for entry, content in entries.items():
                zf.writestr(entry, content)
        return apk_path

    return _make


@pytest.fixture
def sample_apk(make_apk) -> Path:
    """APK containing the sample manifest as plain-text XML."""
    return make_apk(
        {
            "AndroidManifest.xml": SAMPLE_MANIFEST,
            "classes.dex": b"dex\n035\x00",
        }
    )
