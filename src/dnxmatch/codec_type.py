"""Codec type enumeration for dnxmatch."""

from __future__ import annotations

from enum import Enum


class CodecType(str, Enum):
    """Supported Avid codec families."""

    DNXHD = "DNxHD"
    DNXHR = "DNxHR"

    @property
    def ffmpeg_encoder(self) -> str:
        """FFmpeg encoder name (both families share the dnxhd encoder)."""
        return "dnxhd"

    @property
    def is_resolution_independent(self) -> bool:
        """Whether profiles of this family scale to arbitrary frame sizes."""
        return self == CodecType.DNXHR

    def ffmpeg_profile(self, profile_name: str) -> str:
        """Value for FFmpeg's ``-profile:v`` option for a profile of this family.

        DNxHD profiles are selected by bitrate rather than by name, so they all
        map to the plain ``dnxhd`` profile.
        """
        if self == CodecType.DNXHR:
            return f"dnxhr_{profile_name.lower()}"
        return "dnxhd"

    def ffmpeg_bitrate(self, profile_name: str) -> str | None:
        """Value for FFmpeg's ``-b:v`` option, or None when the profile sets it.

        DNxHD names are the bitrate in Mbps, with an "x" suffix on 10-bit
        variants ("220x" -> "220M").
        """
        if self == CodecType.DNXHD:
            return f"{profile_name.rstrip('x')}M"
        return None
