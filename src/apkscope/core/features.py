"""Normalization of `uses-feature` declarations."""

from collections.abc import Callable, Iterable
from typing import NamedTuple

from lxml import etree

from apkscope.core.normalize import normalize_gpu_version, normalize_tri_state_bool
from apkscope.core.tree import iter_attributes
from apkscope.models.manifest import AttributeValue, FeatureInfo


class AttributeRule(NamedTuple):
    """How one source attribute maps into a feature record."""

    source: str
    """Attribute local name the rule applies to."""

    output_key: str
    """Key written to the feature record."""

    normalize: Callable[[str], AttributeValue]
    """Converts the raw attribute value."""


FEATURE_ATTRIBUTE_RULES: tuple[AttributeRule, ...] = (
    AttributeRule("required", "required", normalize_tri_state_bool),
    AttributeRule("glEsVersion", "name", normalize_gpu_version),
)

_RULES_BY_SOURCE: dict[str, AttributeRule] = {
    rule.source: rule for rule in FEATURE_ATTRIBUTE_RULES
}


def normalize_feature_attribute(name: str, raw: str) -> tuple[str, AttributeValue]:
    """Apply the matching rule, or pass the attribute through as a string."""
    rule = _RULES_BY_SOURCE.get(name)
    if rule is None:
        return name, raw
    return rule.output_key, rule.normalize(raw)


def build_feature(node: etree._Element) -> FeatureInfo:
    # dict() keeps first-insertion position and last value for repeated keys
    return dict(
        normalize_feature_attribute(name, raw) for name, raw in iter_attributes(node)
    )


def build_feature_list(
    nodes: Iterable[etree._Element],
) -> tuple[FeatureInfo, ...]:
    """Convert `uses-feature` elements into feature records, in input order."""
    return tuple(build_feature(node) for node in nodes)
