"""Profile matching for dnxmatch.

Matching runs in two tiers. The exact tier requires every query field to be
supported by a profile. When it finds nothing, the relaxed tier accepts a
profile whose resolution, chroma, bit depth or frame rate supports either the
query value or the standard broadcast default for that field (1080p, 4:2:2,
8-bit, 30 fps). The preference rule is the same in both tiers.

Callers must normalize chroma "4:2:0" to "4:2:2" before building a query.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .constants import (
    DEFAULT_BIT_DEPTH,
    DEFAULT_CHROMA,
    DEFAULT_FRAMERATE,
    DEFAULT_RESOLUTION,
    PREFERENCE_SKIP,
)
from .profiles import PreferenceClass, ProfileCatalog, ProfileDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchQuery:
    """Media parameters to find profiles for.

    Values are compared as plain strings; nothing is validated.
    """

    framerate: str
    resolution: str
    chroma: str
    bit_depth: str
    preference: str = PREFERENCE_SKIP


@dataclass(frozen=True)
class MatchDefaults:
    """Fallback value per field for the relaxed tier."""

    resolution: str
    chroma: str
    bit_depth: str
    framerate: str


STANDARD_DEFAULTS = MatchDefaults(
    resolution=DEFAULT_RESOLUTION,
    chroma=DEFAULT_CHROMA,
    bit_depth=DEFAULT_BIT_DEPTH,
    framerate=DEFAULT_FRAMERATE,
)


class MatchTier(str, Enum):
    """Which tier produced a match result."""

    EXACT = "exact"
    RELAXED = "relaxed"
    NONE = "none"


@dataclass(frozen=True)
class MatchOutcome:
    """Matching profiles plus the tier that found them."""

    profiles: tuple[ProfileDefinition, ...]
    tier: MatchTier

    @property
    def found(self) -> bool:
        return bool(self.profiles)


def preference_accepts(profile: ProfileDefinition, preference: str) -> bool:
    """Check whether a profile's preference class satisfies a query preference.

    Balanced profiles satisfy every preference, and "Skip" accepts every
    profile. Any other string only matches a profile of the same class.
    """
    return (
        profile.preference_class == preference
        or profile.preference_class == PreferenceClass.BALANCED
        or preference == PREFERENCE_SKIP
    )


def profile_matches(
    profile: ProfileDefinition,
    query: MatchQuery,
    defaults: MatchDefaults | None = None,
) -> bool:
    """Check whether a profile satisfies a query.

    Args:
        profile: Catalog entry to test
        query: Requested media parameters
        defaults: None for the exact tier. For the relaxed tier, the fallback
                  value of each field; a field passes if the profile supports
                  either the query value or the fallback value.

    Returns:
        True if all five criteria pass
    """
    resolution_ok = query.resolution in profile.supported_resolutions
    chroma_ok = profile.chroma == query.chroma
    depth_ok = profile.color_depth == query.bit_depth
    framerate_ok = query.framerate in profile.supported_frame_rates

    if defaults is not None:
        resolution_ok = resolution_ok or defaults.resolution in profile.supported_resolutions
        chroma_ok = chroma_ok or profile.chroma == defaults.chroma
        depth_ok = depth_ok or profile.color_depth == defaults.bit_depth
        framerate_ok = framerate_ok or defaults.framerate in profile.supported_frame_rates

    return (
        resolution_ok
        and chroma_ok
        and depth_ok
        and framerate_ok
        and preference_accepts(profile, query.preference)
    )


def filter_profiles(
    catalog: ProfileCatalog,
    query: MatchQuery,
    defaults: MatchDefaults | None = None,
) -> tuple[ProfileDefinition, ...]:
    """Run a single matching tier over the catalog, preserving catalog order."""
    return tuple(p for p in catalog if profile_matches(p, query, defaults))


def match_outcome(
    catalog: ProfileCatalog,
    query: MatchQuery,
    defaults: MatchDefaults = STANDARD_DEFAULTS,
) -> MatchOutcome:
    """Find matching profiles, falling back to the relaxed tier if needed.

    Args:
        catalog: Profiles to search
        query: Requested media parameters
        defaults: Fallback values for the relaxed tier

    Returns:
        MatchOutcome with the profiles in catalog order and the tier used.
        An empty result is a normal outcome, not an error.
    """
    exact = filter_profiles(catalog, query)
    if exact:
        logger.debug("Exact match: %d profile(s) for %s", len(exact), query)
        return MatchOutcome(profiles=exact, tier=MatchTier.EXACT)

    relaxed = filter_profiles(catalog, query, defaults)
    if relaxed:
        logger.debug(
            "No exact match for %s; relaxed match with %s found %d profile(s)",
            query,
            defaults,
            len(relaxed),
        )
        return MatchOutcome(profiles=relaxed, tier=MatchTier.RELAXED)

    logger.debug("No profile matches %s", query)
    return MatchOutcome(profiles=(), tier=MatchTier.NONE)


def match(catalog: ProfileCatalog, query: MatchQuery) -> tuple[ProfileDefinition, ...]:
    """Find the profiles recommended for a query, in catalog order."""
    return match_outcome(catalog, query).profiles
