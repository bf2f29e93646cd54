"""Navigation helpers for parsed manifest trees (lxml elements)."""

from collections.abc import Iterator
from typing import Final

from lxml import etree

ANDROID_NS: Final[str] = "http://schemas.android.com/apk/res/android"


def local_name(key: str) -> str:
    """Strip the namespace from an attribute or tag name."""
    return etree.QName(key).localname


def get_attribute(element: etree._Element, name: str) -> str | None:
    """Look up an attribute by local name, preferring the Android namespace."""
    value = element.get(f"{{{ANDROID_NS}}}{name}")
    if value is not None:
        return value
    return element.get(name)


def iter_attributes(element: etree._Element) -> Iterator[tuple[str, str]]:
    """Yield (local name, value) pairs in declaration order."""
    for key, value in element.attrib.items():
        yield local_name(key), value


def element_children(element: etree._Element) -> Iterator[etree._Element]:
    """Yield direct element children, skipping comments and processing instructions."""
    for child in element:
        if isinstance(child.tag, str):
            yield child


def tag_name(element: etree._Element) -> str:
    return local_name(element.tag)
