"""Data model for a Fab library listing as returned by the library endpoint."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

LISTING_IDENTIFIER_KEY = "ListingIdentifier"


@dataclass
class ProjectVersion:
    """One downloadable artifact of a listing, tied to engine versions and platforms."""

    artifact_id: str = ""
    engine_versions: list[str] = field(default_factory=list)
    target_platforms: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ProjectVersion:
        """Build a project version from its JSON object."""
        return cls(
            artifact_id=str(data.get("artifactId") or ""),
            engine_versions=[str(v) for v in data.get("engineVersions") or []],
            target_platforms=[str(p) for p in data.get("targetPlatforms") or []],
        )


@dataclass
class FabAsset:
    """An owned asset in the user's Fab library."""

    asset_id: str = ""
    asset_namespace: str = ""
    custom_attributes: list[dict[str, str]] = field(default_factory=list)
    url: str = ""
    project_versions: list[ProjectVersion] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FabAsset:
        """Build an asset from its JSON object."""
        return cls(
            asset_id=str(data.get("assetId") or ""),
            asset_namespace=str(data.get("assetNamespace") or ""),
            custom_attributes=[
                {str(k): str(v) for k, v in attrs.items()}
                for attrs in data.get("customAttributes") or []
            ],
            url=str(data.get("url") or ""),
            project_versions=[
                ProjectVersion.from_dict(v) for v in data.get("projectVersions") or []
            ],
        )

    def listing_uid_from_url(self) -> str | None:
        """Return the trailing path segment of the listing URL, or None if it is empty."""
        segment = self.url.rsplit("/", 1)[-1]
        return segment or None

    def matches_uid(self, uid: str) -> bool:
        """True if this asset is the given Fab listing.

        The ``ListingIdentifier`` custom attributes are checked first,
        then the trailing segment of the listing URL.
        """
        if any(attrs.get(LISTING_IDENTIFIER_KEY) == uid for attrs in self.custom_attributes):
            return True
        return self.listing_uid_from_url() == uid


@dataclass
class FabLibrary:
    """The user's library: every owned asset."""

    results: list[FabAsset] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FabLibrary:
        """Build a library from the JSON response."""
        return cls(results=[FabAsset.from_dict(e) for e in data.get("results") or []])

    def find(self, uid: str) -> FabAsset | None:
        """Return the first asset matching the listing UID, or None."""
        return next((entry for entry in self.results if entry.matches_uid(uid)), None)