"""Built-in Avid DNxHD/DNxHR profile catalog.

Capabilities follow the Avid DNxHD and DNxHR specification tables. Frame rates
are frames per 1000 seconds. DNxHD profiles are bound to HD rasters and to the
frame rates their bitrate family was defined for; DNxHR profiles are resolution
independent and accept every listed rate.
"""

from __future__ import annotations

from .codec_type import CodecType
from .profiles import (
    Chroma,
    ColorDepth,
    PreferenceClass,
    ProfileCatalog,
    ProfileDefinition,
)

FR_23_976 = "23976"
FR_24 = "24000"
FR_25 = "25000"
FR_29_97 = "29970"
FR_50 = "50000"
FR_59_94 = "59940"

DNXHR_FRAME_RATES = frozenset({FR_23_976, FR_24, FR_25, FR_29_97, FR_50, FR_59_94})

DNXHR_RESOLUTIONS = frozenset(
    {
        "1280x720",
        "1920x1080",
        "2048x1080",
        "2560x1440",
        "3840x2160",
        "4096x2160",
    }
)

_HD_1080 = frozenset({"1920x1080"})


def _dnxhd(
    name: str,
    depth: ColorDepth,
    preference: PreferenceClass,
    resolutions: frozenset[str],
    frame_rates: frozenset[str],
    description: str,
) -> ProfileDefinition:
    return ProfileDefinition(
        codec=CodecType.DNXHD,
        profile_name=name,
        supported_resolutions=resolutions,
        supported_frame_rates=frame_rates,
        color_depth=depth,
        chroma=Chroma.YUV422,
        preference_class=preference,
        description=description,
    )


def _dnxhr(
    name: str,
    depth: ColorDepth,
    chroma: Chroma,
    preference: PreferenceClass,
    description: str,
) -> ProfileDefinition:
    return ProfileDefinition(
        codec=CodecType.DNXHR,
        profile_name=name,
        supported_resolutions=DNXHR_RESOLUTIONS,
        supported_frame_rates=DNXHR_FRAME_RATES,
        color_depth=depth,
        chroma=chroma,
        preference_class=preference,
        description=description,
    )


_8 = ColorDepth.BIT_8
_10 = ColorDepth.BIT_10
_12 = ColorDepth.BIT_12

_SPACE = PreferenceClass.SPACE
_BALANCED = PreferenceClass.BALANCED
_QUALITY = PreferenceClass.QUALITY

BUILTIN_PROFILES: tuple[ProfileDefinition, ...] = (
    # DNxHD: offline / proxy
    _dnxhd("36", _8, _SPACE, _HD_1080, frozenset({FR_23_976, FR_24, FR_25, FR_29_97}), "Offline editing at 36 Mbps"),
    _dnxhd("60", _8, _SPACE, frozenset({"1280x720"}), frozenset({FR_23_976, FR_24, FR_25}), "720p offline at 60 Mbps"),
    # DNxHD: mid bitrate
    _dnxhd("115", _8, _BALANCED, _HD_1080, frozenset({FR_23_976}), "1080p 23.976 at 115 Mbps"),
    _dnxhd("120", _8, _BALANCED, _HD_1080, frozenset({FR_25}), "1080p 25 at 120 Mbps"),
    _dnxhd(
        "145",
        _8,
        _BALANCED,
        frozenset({"1920x1080", "1440x1080"}),
        frozenset({FR_29_97}),
        "1080i/p 29.97 at 145 Mbps, also thin-raster 1440",
    ),
    # DNxHD: mastering
    _dnxhd("175", _8, _QUALITY, _HD_1080, frozenset({FR_23_976, FR_24}), "1080p 23.976/24 at 175 Mbps"),
    _dnxhd("175x", _10, _QUALITY, _HD_1080, frozenset({FR_23_976, FR_24}), "10-bit 1080p 23.976/24 at 175 Mbps"),
    _dnxhd("185", _8, _QUALITY, _HD_1080, frozenset({FR_25}), "1080p 25 at 185 Mbps"),
    _dnxhd("185x", _10, _QUALITY, _HD_1080, frozenset({FR_25}), "10-bit 1080p 25 at 185 Mbps"),
    _dnxhd(
        "220",
        _8,
        _QUALITY,
        frozenset({"1920x1080", "1280x720"}),
        frozenset({FR_24, FR_29_97, FR_59_94}),
        "1080p 29.97 and 720p 59.94 at 220 Mbps",
    ),
    _dnxhd(
        "220x",
        _10,
        _QUALITY,
        frozenset({"1920x1080", "1280x720"}),
        frozenset({FR_24, FR_29_97, FR_59_94}),
        "10-bit 1080p 29.97 and 720p 59.94 at 220 Mbps",
    ),
    _dnxhd("440", _8, _QUALITY, _HD_1080, frozenset({FR_50, FR_59_94}), "1080p 50/59.94 at 440 Mbps"),
    _dnxhd("440x", _10, _QUALITY, _HD_1080, frozenset({FR_50, FR_59_94}), "10-bit 1080p 50/59.94 at 440 Mbps"),
    # DNxHR
    _dnxhr("LB", _8, Chroma.YUV422, _SPACE, "Low Bandwidth, offline quality"),
    _dnxhr("SQ", _8, Chroma.YUV422, _SPACE, "Standard Quality, delivery formats"),
    _dnxhr("HQ", _8, Chroma.YUV422, _QUALITY, "High Quality, 8-bit mastering"),
    _dnxhr("HQX", _12, Chroma.YUV422, _QUALITY, "High Quality, 12-bit finishing"),
    _dnxhr("444", _12, Chroma.YUV444, _QUALITY, "Cinema quality 4:4:4"),
)

BUILTIN_CATALOG = ProfileCatalog(BUILTIN_PROFILES)
