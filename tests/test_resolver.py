import pytest

from fabresolve.library import FabAsset, FabLibrary, ProjectVersion
from fabresolve.resolver import (
    AmbiguousArtifactError,
    AvailableVariant,
    FabCliError,
    NotOwnedError,
    ResolvedCoords,
    resolve,
)


def entry(listing_uid, asset_id, namespace, versions):
    return FabAsset(
        asset_id=asset_id,
        asset_namespace=namespace,
        custom_attributes=[{"ListingIdentifier": listing_uid}],
        url=f"https://www.fab.com/listings/{listing_uid}",
        project_versions=versions,
    )


def version(artifact, engines, platforms):
    return ProjectVersion(
        artifact_id=artifact,
        engine_versions=list(engines),
        target_platforms=list(platforms),
    )


def lib(entries):
    return FabLibrary(results=entries)


def test_single_version_single_platform_resolves():
    library = lib([entry("uid-1", "asset-A", "ns-A", [version("art-1", ["UE_5.4"], ["Windows"])])])
    r = resolve("uid-1", None, None, library)
    assert r == ResolvedCoords("art-1", "ns-A", "asset-A", "Windows")


def test_uid_not_in_library_is_not_owned():
    library = lib([entry("uid-1", "asset-A", "ns-A", [])])
    with pytest.raises(NotOwnedError) as info:
        resolve("uid-other", None, None, library)
    assert info.value.uid == "uid-other"
    assert isinstance(info.value, FabCliError)


def test_url_fallback_matches_when_custom_attributes_missing():
    e = entry("stale-listing-id", "asset-A", "ns-A", [version("art-1", ["UE_5.4"], ["Windows"])])
    e.custom_attributes.clear()
    e.url = "https://www.fab.com/listings/url-uid"
    r = resolve("url-uid", None, None, lib([e]))
    assert r.artifact_id == "art-1"


def test_multi_version_no_engine_is_ambiguous():
    library = lib([
        entry("uid-1", "a", "n", [
            version("art-A", ["UE_4.27"], ["Windows"]),
            version("art-B", ["UE_5.4"], ["Windows"]),
        ])
    ])
    with pytest.raises(AmbiguousArtifactError) as info:
        resolve("uid-1", None, None, library)
    assert len(info.value.available) == 2
    assert info.value.available[0] == AvailableVariant(("UE_4.27",), ("Windows",))


def test_multi_version_engine_disambiguates():
    library = lib([
        entry("uid-1", "a", "n", [
            version("art-A", ["UE_4.27"], ["Windows"]),
            version("art-B", ["UE_5.4"], ["Windows"]),
        ])
    ])
    r = resolve("uid-1", "UE_5.4", None, library)
    assert r.artifact_id == "art-B"


def test_engine_matching_nothing_is_ambiguous():
    library = lib([entry("uid-1", "a", "n", [version("art-A", ["UE_5.4"], ["Windows"])])])
    with pytest.raises(AmbiguousArtifactError) as info:
        resolve("uid-1", "UE_5.0", None, library)
    assert len(info.value.available) == 1
    assert "UE_5.4" in info.value.message


def test_engine_matching_several_versions_is_ambiguous():
    library = lib([
        entry("uid-1", "a", "n", [
            version("art-A", ["UE_5.4"], ["Windows"]),
            version("art-B", ["UE_5.4"], ["Linux"]),
        ])
    ])
    with pytest.raises(AmbiguousArtifactError) as info:
        resolve("uid-1", "UE_5.4", None, library)
    assert len(info.value.available) == 2


def test_multi_platform_no_flag_is_ambiguous():
    library = lib([entry("uid-1", "a", "n", [version("art-A", ["UE_5.4"], ["Windows", "Linux"])])])
    with pytest.raises(AmbiguousArtifactError) as info:
        resolve("uid-1", None, None, library)
    assert info.value.uid == "uid-1"


def test_multi_platform_flag_disambiguates():
    library = lib([entry("uid-1", "a", "n", [version("art-A", ["UE_5.4"], ["Windows", "Linux"])])])
    r = resolve("uid-1", None, "Linux", library)
    assert r.platform == "Linux"


def test_platform_matching_nothing_is_ambiguous():
    library = lib([entry("uid-1", "a", "n", [version("art-A", ["UE_5.4"], ["Windows", "Linux"])])])
    with pytest.raises(AmbiguousArtifactError) as info:
        resolve("uid-1", None, "Mac", library)
    assert "Windows, Linux" in info.value.message


def test_no_platforms_resolves_to_none():
    library = lib([entry("uid-1", "a", "n", [version("art-A", ["UE_5.4"], [])])])
    r = resolve("uid-1", None, None, library)
    assert r.platform is None


def test_single_platform_ignores_platform_flag():
    library = lib([entry("uid-1", "a", "n", [version("art-A", ["UE_5.4"], ["Windows"])])])
    r = resolve("uid-1", None, "Mac", library)
    assert r.platform == "Windows"


def test_no_project_versions_is_ambiguous():
    library = lib([entry("uid-1", "a", "n", [])])
    with pytest.raises(AmbiguousArtifactError) as info:
        resolve("uid-1", None, None, library)
    assert info.value.available == []
    assert str(info.value) == "library entry has no project versions"