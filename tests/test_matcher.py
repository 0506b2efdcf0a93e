"""Tests for the two-tier profile matcher."""

from __future__ import annotations

from dnxmatch.catalog_data import BUILTIN_CATALOG
from dnxmatch.codec_type import CodecType
from dnxmatch.matcher import (
    STANDARD_DEFAULTS,
    MatchDefaults,
    MatchQuery,
    MatchTier,
    filter_profiles,
    match,
    match_outcome,
    preference_accepts,
    profile_matches,
)
from dnxmatch.profiles import (
    Chroma,
    ColorDepth,
    PreferenceClass,
    ProfileCatalog,
    ProfileDefinition,
)


def _profile(
    name: str = "P",
    *,
    codec: CodecType = CodecType.DNXHD,
    resolutions: tuple[str, ...] = ("1920x1080",),
    frame_rates: tuple[str, ...] = ("29970",),
    depth: ColorDepth = ColorDepth.BIT_8,
    chroma: Chroma = Chroma.YUV422,
    preference: PreferenceClass = PreferenceClass.QUALITY,
) -> ProfileDefinition:
    return ProfileDefinition(
        codec=codec,
        profile_name=name,
        supported_resolutions=frozenset(resolutions),
        supported_frame_rates=frozenset(frame_rates),
        color_depth=depth,
        chroma=chroma,
        preference_class=preference,
    )


def _labels(profiles: tuple[ProfileDefinition, ...]) -> list[str]:
    return [p.label for p in profiles]


class TestPreferenceAccepts:
    """Tests for the preference rule shared by both tiers."""

    def test_same_class_accepted(self):
        """Test that a profile is accepted for its own preference class."""
        assert preference_accepts(_profile(preference=PreferenceClass.SPACE), "Space")

    def test_other_class_rejected(self):
        """Test that a Space profile is rejected for a Quality query."""
        assert not preference_accepts(_profile(preference=PreferenceClass.SPACE), "Quality")

    def test_balanced_profile_accepted_for_any_preference(self):
        """Test that Balanced profiles satisfy every preference."""
        profile = _profile(preference=PreferenceClass.BALANCED)
        for preference in ("Space", "Quality", "Balanced", "anything"):
            assert preference_accepts(profile, preference)

    def test_skip_accepts_every_class(self):
        """Test that Skip accepts every preference class."""
        for cls in PreferenceClass:
            assert preference_accepts(_profile(preference=cls), "Skip")

    def test_unknown_preference_is_not_an_error(self):
        """Test that an unrecognized preference string is evaluated, not rejected."""
        assert not preference_accepts(_profile(preference=PreferenceClass.QUALITY), "skip")


class TestProfileMatchesExact:
    """Tests for the exact tier of profile_matches."""

    QUERY = MatchQuery(
        framerate="29970",
        resolution="1920x1080",
        chroma="4:2:2",
        bit_depth="8-bit",
        preference="Quality",
    )

    def test_all_fields_match(self):
        """Test that a profile supporting every field matches."""
        assert profile_matches(_profile(), self.QUERY)

    def test_resolution_mismatch(self):
        """Test that an unsupported resolution fails the exact tier."""
        assert not profile_matches(_profile(resolutions=("1280x720",)), self.QUERY)

    def test_framerate_mismatch(self):
        """Test that an unsupported frame rate fails the exact tier."""
        assert not profile_matches(_profile(frame_rates=("25000",)), self.QUERY)

    def test_chroma_mismatch(self):
        """Test that a different chroma fails the exact tier."""
        assert not profile_matches(_profile(chroma=Chroma.YUV444), self.QUERY)

    def test_bit_depth_mismatch(self):
        """Test that a different bit depth fails the exact tier."""
        assert not profile_matches(_profile(depth=ColorDepth.BIT_10), self.QUERY)

    def test_preference_mismatch(self):
        """Test that an incompatible preference fails the exact tier."""
        assert not profile_matches(_profile(preference=PreferenceClass.SPACE), self.QUERY)


class TestProfileMatchesRelaxed:
    """Tests for the relaxed tier of profile_matches."""

    def _query(self, **overrides: str) -> MatchQuery:
        values = {
            "framerate": "29970",
            "resolution": "1920x1080",
            "chroma": "4:2:2",
            "bit_depth": "8-bit",
            "preference": "Quality",
        }
        values.update(overrides)
        return MatchQuery(**values)

    def test_resolution_falls_back_to_default(self):
        """Test that an unknown resolution passes when the profile supports 1920x1080."""
        query = self._query(resolution="640x480")
        assert not profile_matches(_profile(), query)
        assert profile_matches(_profile(), query, STANDARD_DEFAULTS)

    def test_resolution_without_default_support_fails(self):
        """Test that the fallback needs the profile to support the default resolution."""
        query = self._query(resolution="640x480")
        assert not profile_matches(_profile(resolutions=("1280x720",)), query, STANDARD_DEFAULTS)

    def test_chroma_falls_back_to_default(self):
        """Test that an unsupported chroma passes for 4:2:2 profiles."""
        query = self._query(chroma="4:1:1")
        assert profile_matches(_profile(chroma=Chroma.YUV422), query, STANDARD_DEFAULTS)
        assert not profile_matches(_profile(chroma=Chroma.YUV444), query, STANDARD_DEFAULTS)

    def test_query_chroma_still_matches(self):
        """Test that the relaxed tier keeps accepting the requested chroma."""
        query = self._query(chroma="4:4:4")
        assert profile_matches(_profile(chroma=Chroma.YUV444), query, STANDARD_DEFAULTS)

    def test_bit_depth_falls_back_to_default(self):
        """Test that a 10-bit query also accepts 8-bit profiles in the relaxed tier."""
        query = self._query(bit_depth="10-bit")
        assert profile_matches(_profile(depth=ColorDepth.BIT_8), query, STANDARD_DEFAULTS)
        assert profile_matches(_profile(depth=ColorDepth.BIT_10), query, STANDARD_DEFAULTS)
        assert not profile_matches(_profile(depth=ColorDepth.BIT_12), query, STANDARD_DEFAULTS)

    def test_framerate_falls_back_to_default(self):
        """Test that an unknown frame rate passes for profiles supporting 30000."""
        query = self._query(framerate="12000")
        assert profile_matches(_profile(frame_rates=("30000",)), query, STANDARD_DEFAULTS)
        assert not profile_matches(_profile(frame_rates=("29970",)), query, STANDARD_DEFAULTS)

    def test_preference_is_not_relaxed(self):
        """Test that the relaxed tier applies the same preference rule."""
        query = self._query(preference="Quality")
        assert not profile_matches(_profile(preference=PreferenceClass.SPACE), query, STANDARD_DEFAULTS)

    def test_custom_defaults(self):
        """Test that the fallback values come from the defaults table."""
        defaults = MatchDefaults(
            resolution="1280x720",
            chroma="4:4:4",
            bit_depth="12-bit",
            framerate="59940",
        )
        profile = _profile(
            resolutions=("1280x720",),
            frame_rates=("59940",),
            depth=ColorDepth.BIT_12,
            chroma=Chroma.YUV444,
        )
        query = self._query(resolution="1x1", chroma="1:1:1", bit_depth="16-bit", framerate="1")
        assert profile_matches(profile, query, defaults)
        assert not profile_matches(profile, query, STANDARD_DEFAULTS)


class TestMatchBuiltinCatalog:
    """Tests for match() against the built-in Avid catalog."""

    def test_exact_match_1080p_24_quality(self):
        """Test that 1080p 24 fps 8-bit Quality returns DNxHD 175, 220 and DNxHR HQ only."""
        query = MatchQuery(
            framerate="24000",
            resolution="1920x1080",
            chroma="4:2:2",
            bit_depth="8-bit",
            preference="Quality",
        )
        outcome = match_outcome(BUILTIN_CATALOG, query)

        assert outcome.tier == MatchTier.EXACT
        assert _labels(outcome.profiles) == ["DNxHD 175", "DNxHD 220", "DNxHR HQ"]

    def test_relaxed_tier_not_used_when_exact_tier_matches(self):
        """Test that exact results are returned without relaxed additions."""
        query = MatchQuery(
            framerate="24000",
            resolution="1920x1080",
            chroma="4:2:2",
            bit_depth="10-bit",
            preference="Quality",
        )
        relaxed = filter_profiles(BUILTIN_CATALOG, query, STANDARD_DEFAULTS)
        result = match(BUILTIN_CATALOG, query)

        assert len(relaxed) > len(result)
        assert _labels(result) == ["DNxHD 175x", "DNxHD 220x"]

    def test_fallback_for_unsupported_resolution(self):
        """Test that 640x480 falls back to the 1080p Balanced-compatible profiles."""
        query = MatchQuery(
            framerate="29970",
            resolution="640x480",
            chroma="4:2:2",
            bit_depth="8-bit",
            preference="Balanced",
        )
        assert filter_profiles(BUILTIN_CATALOG, query) == ()

        outcome = match_outcome(BUILTIN_CATALOG, query)

        expected = [
            p.label
            for p in BUILTIN_CATALOG
            if "1920x1080" in p.supported_resolutions
            and p.chroma == "4:2:2"
            and p.color_depth == "8-bit"
            and ({"29970", "30000"} & p.supported_frame_rates)
            and p.preference_class == PreferenceClass.BALANCED
        ]
        assert outcome.tier == MatchTier.RELAXED
        assert _labels(outcome.profiles) == expected
        assert _labels(outcome.profiles) == ["DNxHD 145"]

    def test_skip_widens_exact_tier(self):
        """Test that Skip returns profiles of every preference class in the exact tier."""
        base = dict(framerate="24000", resolution="1920x1080", chroma="4:2:2", bit_depth="8-bit")
        quality = match(BUILTIN_CATALOG, MatchQuery(preference="Quality", **base))
        skip = match(BUILTIN_CATALOG, MatchQuery(preference="Skip", **base))

        assert set(quality) < set(skip)
        assert _labels(skip) == [
            "DNxHD 36",
            "DNxHD 175",
            "DNxHD 220",
            "DNxHR LB",
            "DNxHR SQ",
            "DNxHR HQ",
        ]

    def test_skip_widens_relaxed_tier(self):
        """Test that Skip also widens the relaxed tier."""
        base = dict(framerate="29970", resolution="640x480", chroma="4:2:2", bit_depth="8-bit")
        balanced = match_outcome(BUILTIN_CATALOG, MatchQuery(preference="Balanced", **base))
        skip = match_outcome(BUILTIN_CATALOG, MatchQuery(preference="Skip", **base))

        assert skip.tier == MatchTier.RELAXED
        assert set(balanced.profiles) < set(skip.profiles)
        assert {p.preference_class for p in skip.profiles} == set(PreferenceClass)

    def test_unmatchable_query_returns_empty(self):
        """Test that a query matching nothing in either tier returns an empty result."""
        query = MatchQuery(
            framerate="999",
            resolution="1x1",
            chroma="1:1:1",
            bit_depth="16-bit",
            preference="Quality",
        )
        outcome = match_outcome(BUILTIN_CATALOG, query)

        assert outcome.profiles == ()
        assert outcome.tier == MatchTier.NONE
        assert not outcome.found
        assert match(BUILTIN_CATALOG, query) == ()

    def test_exact_match_for_every_catalog_entry(self):
        """Test that each profile is found by a query built from its own values."""
        for profile in BUILTIN_CATALOG:
            query = MatchQuery(
                framerate=sorted(profile.supported_frame_rates)[0],
                resolution=sorted(profile.supported_resolutions)[0],
                chroma=profile.chroma.value,
                bit_depth=profile.color_depth.value,
                preference=profile.preference_class.value,
            )
            outcome = match_outcome(BUILTIN_CATALOG, query)
            assert outcome.tier == MatchTier.EXACT
            assert profile in outcome.profiles

    def test_idempotent(self):
        """Test that repeated calls return identical ordered results."""
        query = MatchQuery(
            framerate="25000",
            resolution="1920x1080",
            chroma="4:2:2",
            bit_depth="10-bit",
            preference="Skip",
        )
        assert match(BUILTIN_CATALOG, query) == match(BUILTIN_CATALOG, query)

    def test_results_are_catalog_objects(self):
        """Test that results reference catalog entries rather than copies."""
        query = MatchQuery(
            framerate="25000",
            resolution="3840x2160",
            chroma="4:4:4",
            bit_depth="12-bit",
            preference="Quality",
        )
        result = match(BUILTIN_CATALOG, query)

        assert len(result) == 1
        assert result[0] is BUILTIN_CATALOG.get(CodecType.DNXHR, "444")


class TestMatchOrdering:
    """Tests for result ordering with a custom catalog."""

    def test_results_preserve_catalog_order(self):
        """Test that results follow catalog order, not preference or name."""
        catalog = ProfileCatalog(
            [
                _profile("Z", preference=PreferenceClass.QUALITY),
                _profile("A", preference=PreferenceClass.BALANCED),
                _profile("M", preference=PreferenceClass.SPACE),
            ]
        )
        query = MatchQuery(
            framerate="29970",
            resolution="1920x1080",
            chroma="4:2:2",
            bit_depth="8-bit",
            preference="Skip",
        )
        assert [p.profile_name for p in match(catalog, query)] == ["Z", "A", "M"]

    def test_default_preference_is_skip(self):
        """Test that a query without a preference accepts every class."""
        catalog = ProfileCatalog([_profile("S", preference=PreferenceClass.SPACE)])
        query = MatchQuery(
            framerate="29970",
            resolution="1920x1080",
            chroma="4:2:2",
            bit_depth="8-bit",
        )
        assert len(match(catalog, query)) == 1
