"""Pydantic models for extracted manifest metadata."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer

AttributeValue = str | bool
"""A normalized manifest attribute value."""


def _thaw(value: Mapping[str, AttributeValue]) -> dict[str, AttributeValue]:
    return dict(value)


FrozenAttributes = Annotated[
    Mapping[str, AttributeValue],
    AfterValidator(MappingProxyType),
    PlainSerializer(_thaw),
]
"""Read-only attribute mapping; serializes as a plain dict."""

FeatureInfo = FrozenAttributes
"""One `uses-feature` declaration, keyed by (possibly renamed) attribute."""


class ApplicationInfo(BaseModel):
    """Attributes declared on the manifest's `application` element."""

    model_config = ConfigDict(frozen=True)

    attributes: FrozenAttributes = Field(
        default_factory=lambda: MappingProxyType({})
    )
    """Attribute local name to normalized value, in declaration order."""

    application_id: str | None = None
    """Package identifier from `manifest/@package`, if declared."""

    def to_report(self) -> dict[str, Any]:
        report: dict[str, Any] = dict(self.attributes)
        if self.application_id is not None:
            report["application_id"] = self.application_id
        return report


class IntentFilterInfo(BaseModel):
    """Summary of a single `intent-filter` element."""

    model_config = ConfigDict(frozen=True)

    actions: tuple[str, ...] | None = None
    """Action names in document order; None when the filter has none."""

    category: str | None = None
    """Name of the last `category` child, if any."""

    def to_report(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class SdkInfo(BaseModel):
    """SDK bounds from the `uses-sdk` element."""

    model_config = ConfigDict(frozen=True)

    minimum_sdk_version: int | None = None
    """Decoded `minSdkVersion`; None when not declared."""

    target_sdk_version: int | None = None
    """Decoded `targetSdkVersion`; None when not declared."""


class ManifestRecord(BaseModel):
    """Aggregate metadata extracted from one manifest."""

    model_config = ConfigDict(frozen=True)

    manifest_path: str
    """Path of the manifest entry inside the APK."""

    application: ApplicationInfo
    """Application element attributes and package identifier."""

    intents: tuple[IntentFilterInfo, ...] = ()
    """Non-empty intent filters in document order."""

    sdk: SdkInfo = SdkInfo()
    """Minimum and target SDK versions."""

    permissions: tuple[str, ...] = ()
    """Requested permission names in document order."""

    features: tuple[FeatureInfo, ...] = ()
    """Normalized `uses-feature` declarations."""

    supported_screens: tuple[str, ...] = ()
    """Enabled `supports-screens` attributes, unique, in document order."""

    def to_report(self) -> dict[str, Any]:
        """Project the record into its JSON report shape."""
        return {
            "manifest_path": self.manifest_path,
            "content": {
                "application_info": self.application.to_report(),
                "intents": [intent.to_report() for intent in self.intents],
                "uses_sdk": self.sdk.model_dump(),
                "uses_permissions": list(self.permissions),
                "uses_features": [dict(feature) for feature in self.features],
                "supports_screens": list(self.supported_screens),
            },
        }
