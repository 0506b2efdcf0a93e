"""Profile catalog for Avid DNxHD/DNxHR encoding profiles.

This module defines the immutable profile record, the read-only catalog that
holds them, and loading of replacement catalogs from YAML configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import cast

import yaml

from .codec_type import CodecType

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Exception raised for catalog-related errors."""

    pass


class ColorDepth(str, Enum):
    """Bit depth a profile encodes at."""

    BIT_8 = "8-bit"
    BIT_10 = "10-bit"
    BIT_12 = "12-bit"


class Chroma(str, Enum):
    """Chroma subsampling a profile encodes with."""

    YUV422 = "4:2:2"
    YUV444 = "4:4:4"


class PreferenceClass(str, Enum):
    """Trade-off between file size and visual fidelity."""

    SPACE = "Space"
    BALANCED = "Balanced"
    QUALITY = "Quality"


@dataclass(frozen=True)
class ProfileDefinition:
    """A single DNxHD/DNxHR profile and the formats it supports."""

    codec: CodecType
    profile_name: str
    supported_resolutions: frozenset[str]
    supported_frame_rates: frozenset[str]
    color_depth: ColorDepth
    chroma: Chroma
    preference_class: PreferenceClass
    description: str = ""

    def __post_init__(self) -> None:
        if not self.profile_name:
            raise CatalogError(f"{self.codec.value} profile name is required")
        if not self.supported_resolutions:
            raise CatalogError(f"Profile '{self.label}': no supported resolutions")
        if not self.supported_frame_rates:
            raise CatalogError(f"Profile '{self.label}': no supported frame rates")

    @property
    def key(self) -> tuple[CodecType, str]:
        """Catalog identity of this profile."""
        return (self.codec, self.profile_name)

    @property
    def label(self) -> str:
        """Display label, e.g. 'DNxHR HQX'."""
        return f"{self.codec.value} {self.profile_name}"


class ProfileCatalog:
    """Read-only, ordered collection of profile definitions.

    The catalog is built once and shared; nothing mutates it after
    construction, so it can be used from several threads without locking.
    """

    def __init__(self, profiles: Iterable[ProfileDefinition]) -> None:
        """Initialize a catalog.

        Args:
            profiles: Profile definitions in display/match order

        Raises:
            CatalogError: If the catalog is empty or two profiles share
                          the same codec and name
        """
        self._profiles: tuple[ProfileDefinition, ...] = tuple(profiles)

        if not self._profiles:
            raise CatalogError("Catalog contains no profiles")

        seen: set[tuple[CodecType, str]] = set()
        for profile in self._profiles:
            if profile.key in seen:
                raise CatalogError(f"Duplicate profile '{profile.label}' found")
            seen.add(profile.key)

    def __iter__(self) -> Iterator[ProfileDefinition]:
        return iter(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    def __contains__(self, profile: object) -> bool:
        return profile in self._profiles

    @property
    def profiles(self) -> tuple[ProfileDefinition, ...]:
        return self._profiles

    def by_codec(self, codec: CodecType) -> tuple[ProfileDefinition, ...]:
        """Get all profiles of one codec family, in catalog order."""
        return tuple(p for p in self._profiles if p.codec == codec)

    def get(self, codec: CodecType, profile_name: str) -> ProfileDefinition:
        """Get a specific profile by codec and name.

        Args:
            codec: Codec family of the profile
            profile_name: Name of the profile within that family

        Returns:
            The requested ProfileDefinition

        Raises:
            CatalogError: If no such profile exists
        """
        for profile in self._profiles:
            if profile.key == (codec, profile_name):
                return profile

        available = ", ".join(p.profile_name for p in self.by_codec(codec)) or "(none)"
        raise CatalogError(
            f"Profile '{codec.value} {profile_name}' not found.\nAvailable {codec.value} profiles: {available}"
        )


def _parse_enum(
    enum_type: type[Enum],
    value: object,
    field_name: str,
    context: str,
) -> Enum:
    valid = ", ".join(str(member.value) for member in enum_type)
    if not isinstance(value, str):
        # Unquoted 4:2:2 is read by YAML as a base-60 integer
        raise CatalogError(
            f"{context}: '{field_name}' must be a quoted string (one of {valid}), got {value!r}"
        )
    try:
        return enum_type(value)
    except ValueError:
        raise CatalogError(f"{context}: invalid {field_name} '{value}'. Valid values: {valid}")


def _parse_string_set(value: object, field_name: str, context: str) -> frozenset[str]:
    if not isinstance(value, list):
        raise CatalogError(f"{context}: '{field_name}' must be a list")
    items: list[str] = []
    for item in cast(list[object], value):
        # Frame rates are commonly written as bare YAML integers
        if isinstance(item, bool) or not isinstance(item, (str, int)):
            raise CatalogError(f"{context}: '{field_name}' entries must be strings")
        items.append(str(item))
    return frozenset(items)


def _parse_profile(entry: object, index: int) -> ProfileDefinition:
    if not isinstance(entry, dict):
        raise CatalogError(f"Profile #{index}: each profile must be a dictionary")
    data = cast(dict[str, object], entry)

    name_val = data.get("name")
    # Names like "36" or "444" come back from YAML as integers
    if isinstance(name_val, int) and not isinstance(name_val, bool):
        name_val = str(name_val)
    if not isinstance(name_val, str) or not name_val:
        raise CatalogError(f"Profile #{index}: missing 'name' field or name is not a string")
    context = f"Profile '{name_val}'"

    for required in ("codec", "resolutions", "frame_rates", "color_depth", "chroma", "preference"):
        if required not in data:
            raise CatalogError(f"{context}: missing '{required}' field")

    description_val = data.get("description", "")
    description = description_val if isinstance(description_val, str) else ""

    return ProfileDefinition(
        codec=cast(CodecType, _parse_enum(CodecType, data["codec"], "codec", context)),
        profile_name=name_val,
        supported_resolutions=_parse_string_set(data["resolutions"], "resolutions", context),
        supported_frame_rates=_parse_string_set(data["frame_rates"], "frame_rates", context),
        color_depth=cast(ColorDepth, _parse_enum(ColorDepth, data["color_depth"], "color_depth", context)),
        chroma=cast(Chroma, _parse_enum(Chroma, data["chroma"], "chroma", context)),
        preference_class=cast(
            PreferenceClass,
            _parse_enum(PreferenceClass, data["preference"], "preference", context),
        ),
        description=description,
    )


def load_catalog(catalog_file: Path) -> ProfileCatalog:
    """Load a profile catalog from a YAML configuration file.

    The file must contain a ``profiles`` list; each entry needs ``codec``,
    ``name``, ``resolutions``, ``frame_rates``, ``color_depth``, ``chroma``
    and ``preference`` keys, and may carry a ``description``.

    Args:
        catalog_file: Path to the catalog YAML file

    Returns:
        ProfileCatalog with the profiles in file order

    Raises:
        CatalogError: If the file is missing, malformed, or contains invalid data
    """
    if not catalog_file.exists():
        raise CatalogError(f"Catalog file not found: {catalog_file}")

    try:
        with open(catalog_file, "r", encoding="utf-8") as f:
            data = cast(object, yaml.safe_load(f))
    except yaml.YAMLError as e:
        raise CatalogError(f"Failed to parse catalog file: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(f"Failed to read catalog file: {e}")

    if not isinstance(data, dict):
        raise CatalogError("Catalog file must contain a dictionary at root level")

    root = cast(dict[str, object], data)
    if "profiles" not in root:
        raise CatalogError("Catalog file must contain a 'profiles' key")

    if not isinstance(root["profiles"], list):
        raise CatalogError("'profiles' must be a list")

    entries = cast(list[object], root["profiles"])
    catalog = ProfileCatalog(_parse_profile(entry, i) for i, entry in enumerate(entries, start=1))
    logger.debug("Loaded %d profiles from %s", len(catalog), catalog_file)
    return catalog


def list_catalog(catalog: ProfileCatalog) -> str:
    """Generate a plain-text listing of the catalog.

    Args:
        catalog: Catalog to list

    Returns:
        Formatted string listing all profiles with their key attributes
    """
    lines = ["Available DNxHD/DNxHR profiles:", ""]

    for profile in catalog:
        lines.append(
            f"  {profile.label} ({profile.color_depth.value} {profile.chroma.value}, {profile.preference_class.value})"
        )
        if profile.description:
            lines.append(f"    {profile.description}")

    return "\n".join(lines)
