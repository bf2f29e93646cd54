"""Manifest metadata extraction: parsed manifest tree to ManifestRecord."""

from pathlib import Path

from lxml import etree

from apkscope.core.archive import ArchiveReader
from apkscope.core.decoder import ManifestDecoder
from apkscope.core.features import build_feature_list
from apkscope.core.intents import aggregate_intent_filters
from apkscope.core.normalize import (
    FALSE_TOKEN,
    is_tri_state_token,
    normalize_hex_integer,
    normalize_tri_state_bool,
)
from apkscope.core.tree import get_attribute, iter_attributes
from apkscope.exceptions import MissingEntryError
from apkscope.models.manifest import (
    ApplicationInfo,
    AttributeValue,
    ManifestRecord,
    SdkInfo,
)
from apkscope.utils.apk import validate_apk_path
from apkscope.utils.logging import get_logger

logger = get_logger(__name__)

MANIFEST_ENTRY = "AndroidManifest.xml"

PERMISSION_TAGS: tuple[str, ...] = ("uses-permission", "uses-permission-sdk-23")


class ManifestRecordBuilder:
    """Builds a ManifestRecord from a parsed manifest tree.

    The tree is only read, so building twice from the same tree gives
    equal records.
    """

    def __init__(self, tree: etree._Element | etree._ElementTree):
        """Initialize the builder.

        Args:
            tree: Parsed manifest, as a root element or element tree.
        """
        self.root = tree.getroot() if isinstance(tree, etree._ElementTree) else tree

    def _first(self, tag: str) -> etree._Element | None:
        return next(self.root.iter(tag), None)

    def _application_info(self) -> ApplicationInfo:
        attributes: dict[str, AttributeValue] = {}
        application = self._first("application")
        if application is not None:
            attributes = {
                name: normalize_tri_state_bool(raw) if is_tri_state_token(raw) else raw
                for name, raw in iter_attributes(application)
            }

        return ApplicationInfo(
            attributes=attributes,
            application_id=self.root.get("package"),
        )

    def _sdk_info(self) -> SdkInfo:
        uses_sdk = self._first("uses-sdk")
        if uses_sdk is None:
            return SdkInfo()

        def decode(name: str) -> int | None:
            raw = get_attribute(uses_sdk, name)
            return None if raw is None else normalize_hex_integer(raw)

        return SdkInfo(
            minimum_sdk_version=decode("minSdkVersion"),
            target_sdk_version=decode("targetSdkVersion"),
        )

    def _permissions(self) -> tuple[str, ...]:
        elements = self.root.iter(*PERMISSION_TAGS)
        names = (get_attribute(element, "name") for element in elements)
        return tuple(name for name in names if name is not None)

    def _supported_screens(self) -> tuple[str, ...]:
        supports_screens = self._first("supports-screens")
        if supports_screens is None:
            return ()

        enabled = (
            name
            for name, raw in iter_attributes(supports_screens)
            if raw != FALSE_TOKEN
        )
        return tuple(dict.fromkeys(enabled))

    def build(self, manifest_path: str) -> ManifestRecord:
        """Extract all manifest metadata.

        Args:
            manifest_path: Path of the manifest entry, for reporting.

        Returns:
            A new ManifestRecord.

        Raises:
            FormatError: If an SDK version is not hexadecimal text.
        """
        return ManifestRecord(
            manifest_path=manifest_path,
            application=self._application_info(),
            intents=aggregate_intent_filters(self.root.iter("intent-filter")),
            sdk=self._sdk_info(),
            permissions=self._permissions(),
            features=build_feature_list(self.root.iter("uses-feature")),
            supported_screens=self._supported_screens(),
        )


class ManifestExtractor:
    """Extract manifest metadata from an APK file."""

    def __init__(self, apk_path: Path, entry_name: str = MANIFEST_ENTRY):
        """Initialize manifest extractor.

        Args:
            apk_path: Path to the APK file.
            entry_name: Manifest entry to look for.
        """
        self.apk_path = apk_path.resolve()
        self.entry_name = entry_name

    def extract(self) -> ManifestRecord:
        """Locate, decode and normalize the APK's manifest.

        Raises:
            InvalidAPKError: If the APK path or archive is invalid.
            MissingEntryError: If the manifest entry does not exist.
            DecodeError: If the manifest cannot be decoded.
            FormatError: If a hex-encoded value is malformed.
        """
        validate_apk_path(self.apk_path)

        with ArchiveReader(self.apk_path) as archive:
            manifest_path = archive.find_entry(self.entry_name)
            if manifest_path is None:
                raise MissingEntryError(self.entry_name)

            logger.debug(
                "manifest entry located", apk=str(self.apk_path), entry=manifest_path
            )
            tree = ManifestDecoder(archive).parse(manifest_path)

        return ManifestRecordBuilder(tree).build(manifest_path)
