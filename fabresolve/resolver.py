"""Map a Fab listing UID to the catalog coordinates needed for a download."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from fabresolve.library import FabAsset, FabLibrary, ProjectVersion


@dataclass(frozen=True)
class ResolvedCoords:
    """Download coordinates for one artifact."""

    artifact_id: str
    namespace: str
    asset_id: str
    platform: str | None


@dataclass(frozen=True)
class AvailableVariant:
    """One project version offered by a listing, reported on ambiguity."""

    engine_versions: tuple[str, ...]
    target_platforms: tuple[str, ...]


class FabCliError(Exception):
    """Base class for resolution errors."""

    def __init__(self, message: str, uid: str) -> None:
        super().__init__(message)
        self.message = message
        self.uid = uid


class NotOwnedError(FabCliError):
    """The listing is not in the user's library."""


class AmbiguousArtifactError(FabCliError):
    """The listing cannot be narrowed down to a single artifact."""

    def __init__(
        self, message: str, uid: str, available: Iterable[AvailableVariant] = ()
    ) -> None:
        super().__init__(message, uid)
        self.available = list(available)


def resolve(
    uid: str,
    engine: str | None,
    platform: str | None,
    library: FabLibrary,
) -> ResolvedCoords:
    """Resolve a listing UID against an already-fetched library."""
    entry = library.find(uid)
    if entry is None:
        raise NotOwnedError(
            f"listing {uid} is not in your library; run `fabcli claim {uid}` "
            "if it's free, or purchase it on Fab",
            uid,
        )
    version = _select_project_version(entry, uid, engine)
    resolved_platform = _select_platform(version, entry, uid, platform)
    return ResolvedCoords(
        artifact_id=version.artifact_id,
        namespace=entry.asset_namespace,
        asset_id=entry.asset_id,
        platform=resolved_platform,
    )


def _select_project_version(entry: FabAsset, uid: str, engine: str | None) -> ProjectVersion:
    versions = entry.project_versions
    if not versions:
        raise AmbiguousArtifactError("library entry has no project versions", uid)

    if engine is None:
        if len(versions) == 1:
            return versions[0]
        raise AmbiguousArtifactError(
            f"listing has {len(versions)} project versions; specify --engine",
            uid,
            _available_variants(versions),
        )

    matches = [v for v in versions if engine in v.engine_versions]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        raise AmbiguousArtifactError(
            f"--engine {engine} matches none of the listing's project versions; "
            f"available: {_available_engines_summary(versions)}",
            uid,
            _available_variants(versions),
        )
    raise AmbiguousArtifactError(
        f"--engine {engine} matches {len(matches)} project versions; "
        "refine with --platform or pick a more specific engine",
        uid,
        _available_variants(versions),
    )


def _select_platform(
    version: ProjectVersion, entry: FabAsset, uid: str, platform: str | None
) -> str | None:
    platforms = version.target_platforms
    if not platforms:
        return None
    if len(platforms) == 1:
        return platforms[0]
    if platform is not None:
        if platform in platforms:
            return platform
        raise AmbiguousArtifactError(
            f"--platform {platform} not available for the selected version; "
            f"available: {', '.join(platforms)}",
            uid,
            _available_variants(entry.project_versions),
        )
    raise AmbiguousArtifactError(
        f"selected version supports {len(platforms)} platforms; specify --platform",
        uid,
        _available_variants(entry.project_versions),
    )


def _available_variants(versions: Iterable[ProjectVersion]) -> list[AvailableVariant]:
    return [
        AvailableVariant(tuple(v.engine_versions), tuple(v.target_platforms)) for v in versions
    ]


def _available_engines_summary(versions: Iterable[ProjectVersion]) -> str:
    return ", ".join(sorted({e for v in versions for e in v.engine_versions}))