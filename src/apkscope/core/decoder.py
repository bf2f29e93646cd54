"""Manifest decoding: binary or plain-text AndroidManifest.xml to an lxml tree."""

from typing import Final

from lxml import etree
from pyaxmlparser.axmlprinter import AXMLPrinter  # type: ignore[import-untyped]

from apkscope.core.archive import ArchiveReader
from apkscope.core.normalize import FALSE_TOKEN, TRUE_TOKEN
from apkscope.core.tree import local_name
from apkscope.exceptions import DecodeError
from apkscope.utils.logging import get_logger

logger = get_logger(__name__)

# Integer-typed `uses-sdk` attributes the record builder decodes as hex
INTEGER_ATTRIBUTES: Final[frozenset[str]] = frozenset(
    {"minSdkVersion", "targetSdkVersion", "maxSdkVersion"}
)

# Elements whose every attribute may carry a boolean read by the record builder
BOOLEAN_ELEMENTS: Final[frozenset[str]] = frozenset(
    {"application", "supports-screens"}
)

# Individual boolean attributes, keyed by element
BOOLEAN_ATTRIBUTES: Final[dict[str, frozenset[str]]] = {
    "uses-feature": frozenset({"required"}),
}

_BOOLEAN_TOKENS: Final[dict[str, str]] = {"true": TRUE_TOKEN, "false": FALSE_TOKEN}


def _is_text_xml(raw: bytes) -> bool:
    return raw.lstrip(b"\xef\xbb\xbf \t\r\n").startswith(b"<")


def _xml_parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False, no_network=True, remove_blank_text=True
    )


def _is_boolean_attribute(tag: str, name: str) -> bool:
    return tag in BOOLEAN_ELEMENTS or name in BOOLEAN_ATTRIBUTES.get(tag, ())


def canonicalize_values(root: etree._Element) -> etree._Element:
    """Map rendered typed values back to their raw hex encoding, in place.

    Decoders render booleans as `true`/`false` and integers in decimal.
    Only the attributes the record builder interprets are rewritten:
    every attribute of `application` and `supports-screens`,
    `uses-feature@required` and the integer attributes of `uses-sdk`.
    Other values, such as a meta-data `android:value="true"`, keep
    their literal text.
    """
    for element in root.iter(tag=etree.Element):
        tag = local_name(element.tag)
        for key, value in element.attrib.items():
            name = local_name(key)
            if value in _BOOLEAN_TOKENS and _is_boolean_attribute(tag, name):
                element.set(key, _BOOLEAN_TOKENS[value])
            elif (
                tag == "uses-sdk"
                and name in INTEGER_ATTRIBUTES
                and value.isdecimal()
            ):
                element.set(key, hex(int(value)))
    return root


class ManifestDecoder:
    """Decodes manifest entries of an APK into navigable lxml trees."""

    def __init__(self, archive: ArchiveReader):
        self.archive = archive

    def _decode_binary(self, entry_name: str, raw: bytes) -> bytes:
        try:
            xml = AXMLPrinter(raw).get_buff()
        except Exception as e:
            raise DecodeError(entry_name, f"binary XML decoding failed: {e}") from e

        if not xml:
            raise DecodeError(entry_name, "binary XML decoder produced no output")
        return xml.encode("utf-8") if isinstance(xml, str) else xml

    def parse(self, entry_name: str) -> etree._Element:
        """Decode an entry and return the root element of its tree.

        Args:
            entry_name: Path of the entry inside the APK.

        Returns:
            Root element with hex-encoded typed values.

        Raises:
            MissingEntryError: If the entry does not exist.
            DecodeError: If the entry is not decodable XML.
        """
        raw = self.archive.read(entry_name)
        if not raw:
            raise DecodeError(entry_name, "entry is empty")

        if _is_text_xml(raw):
            logger.debug("decoding plain-text manifest", entry=entry_name)
            xml = raw
        else:
            logger.debug("decoding binary manifest", entry=entry_name, size=len(raw))
            xml = self._decode_binary(entry_name, raw)

        try:
            root = etree.fromstring(xml, parser=_xml_parser())
        except etree.XMLSyntaxError as e:
            raise DecodeError(entry_name, str(e)) from e

        return canonicalize_values(root)
