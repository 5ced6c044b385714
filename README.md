# fabresolve

`fabresolve` maps a Fab listing UID to the Epic catalog coordinates that
are needed to download an owned asset. These coordinates are the artifact
id, the namespace, the asset id and, where it applies, the target
platform.

The user's library response is the source of truth. Resolution is a pure
function. It works on a library that has already been fetched, plus an
optional engine choice and an optional platform choice.

## Installation

```
pip install fabresolve
```

The package has no runtime dependencies.

## Usage

```python
from fabresolve.library import FabLibrary
from fabresolve.resolver import resolve, NotOwnedError, AmbiguousArtifactError

library = FabLibrary.from_dict(library_json)  # the decoded library response

try:
    coords = resolve("some-listing-uid", "UE_5.4", None, library)
except NotOwnedError as err:
    print(err.message, err.uid)
except AmbiguousArtifactError as err:
    print(err.message)
    for variant in err.available:
        print(variant.engine_versions, variant.target_platforms)
else:
    print(coords.artifact_id, coords.namespace, coords.asset_id, coords.platform)
```

## The library model

The library model lives in `fabresolve.library`.

- `FabLibrary.from_dict(data)` reads the `results` list.
- `FabAsset.from_dict(data)` reads these fields:
  - `assetId`
  - `assetNamespace`
  - `customAttributes`, which is a list of string maps
  - `url`
  - `projectVersions`
- `ProjectVersion.from_dict(data)` reads these fields:
  - `artifactId`
  - `engineVersions`
  - `targetPlatforms`

Missing fields become empty strings or empty lists.

Three methods match an asset against a listing UID:

- `FabAsset.matches_uid(uid)` first checks every custom-attribute map for a `ListingIdentifier` equal to the UID. If none matches, it compares the UID with the last path segment of `url`.
- `FabAsset.listing_uid_from_url()` returns that last segment. It returns `None` if the segment is empty.
- `FabLibrary.find(uid)` returns the first matching asset, or `None`.

## How a choice is made

`resolve(uid, engine, platform, library)` works in `fabresolve.resolver`. It returns a frozen `ResolvedCoords`.

Choosing a project version:

- If the entry has exactly one project version and no engine is given, that version is used.
- If an engine is given, it must appear in the engine versions of exactly one project version.
- If the entry has several versions and no engine is given, the choice is ambiguous.
- If the entry has no project versions at all, the choice is ambiguous.

Choosing a platform:

- If the chosen version lists no target platforms, `platform` is `None`.
- If it lists one platform, that platform is used, whatever `platform` was passed.
- If it lists several, a `platform` must be given, and it must be one of them.

Errors:

- `NotOwnedError` is raised when no library entry matches the UID.
- `AmbiguousArtifactError` is raised when a choice cannot be made.
  - Its `available` lists an `AvailableVariant` for each project version of the entry. Each variant holds the version's engine versions and target platforms as tuples.
  - When the entry has no project versions, `available` is empty.
- Both errors derive from `FabCliError`, which carries `message` and `uid`.

## What this package does not do

This package does not fetch the library. It does not claim listings and does not download artifacts. It has no command-line interface.

The caller must obtain the library response, build a `FabLibrary` from it, and then use the returned `ResolvedCoords` to perform the download.

## Running the tests

```
pip install -e ".[test]"
pytest
```