"""Display utilities for dnxmatch.

This module provides Rich console display functions for match results and
catalog listings.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .matcher import STANDARD_DEFAULTS, MatchOutcome, MatchQuery, MatchTier
from .profiles import PreferenceClass, ProfileDefinition
from .utils import format_frame_rate

_PREFERENCE_STYLES: dict[PreferenceClass, str] = {
    PreferenceClass.SPACE: "yellow",
    PreferenceClass.BALANCED: "cyan",
    PreferenceClass.QUALITY: "green",
}


def _sorted_resolutions(resolutions: Iterable[str]) -> list[str]:
    def pixel_count(res: str) -> tuple[int, str]:
        width, _, height = res.partition("x")
        try:
            return (int(width) * int(height), res)
        except ValueError:
            return (0, res)

    return sorted(resolutions, key=pixel_count)


def _sorted_frame_rates(frame_rates: Iterable[str]) -> list[str]:
    return sorted(frame_rates, key=lambda fr: (len(fr), fr))


def _profile_table(title: str, profiles: Iterable[ProfileDefinition], show_description: bool) -> Table:
    table = Table(
        title=f"[bold cyan]{title}[/bold cyan]",
        show_header=True,
        header_style="bold cyan",
        title_justify="left",
    )
    table.add_column("Codec", style="white")
    table.add_column("Profile", style="bold white")
    table.add_column("Resolutions")
    table.add_column("Frame Rates")
    table.add_column("Depth", justify="center")
    table.add_column("Chroma", justify="center")
    table.add_column("Preference", justify="center")
    if show_description:
        table.add_column("Description", style="dim")

    for profile in profiles:
        style = _PREFERENCE_STYLES.get(profile.preference_class, "white")
        if profile.codec.is_resolution_independent:
            resolutions = "any (" + ", ".join(_sorted_resolutions(profile.supported_resolutions)) + ")"
        else:
            resolutions = ", ".join(_sorted_resolutions(profile.supported_resolutions))
        row = [
            profile.codec.value,
            profile.profile_name,
            resolutions,
            ", ".join(format_frame_rate(fr) for fr in _sorted_frame_rates(profile.supported_frame_rates)),
            profile.color_depth.value,
            profile.chroma.value,
            f"[{style}]{profile.preference_class.value}[/{style}]",
        ]
        if show_description:
            row.append(profile.description)
        table.add_row(*row)

    return table


def display_match_results(console: Console, query: MatchQuery, outcome: MatchOutcome) -> None:
    """Display matching profiles in the order the matcher returned them.

    Args:
        console: Rich console for output
        query: The query that was matched
        outcome: Result of the matcher
    """
    console.print(
        f"[bold]Query:[/bold] {escape(format_frame_rate(query.framerate))} fps, {escape(query.resolution)}, "
        + f"{escape(query.chroma)}, {escape(query.bit_depth)}, preference {escape(query.preference)}"
    )

    if not outcome.found:
        console.print("\n[bold red]No matching profile found.[/bold red]\n")
        return

    if outcome.tier == MatchTier.RELAXED:
        d = STANDARD_DEFAULTS
        console.print(
            "[yellow]No exact match; showing profiles for the closest standard delivery spec "
            + f"({d.resolution}, {d.chroma}, {d.bit_depth}, {format_frame_rate(d.framerate)} fps).[/yellow]"
        )

    console.print()
    console.print(_profile_table("Recommended Profiles", outcome.profiles, show_description=False))
    for profile in outcome.profiles:
        codec = profile.codec
        hint = f"ffmpeg -c:v {codec.ffmpeg_encoder} -profile:v {codec.ffmpeg_profile(profile.profile_name)}"
        bitrate = codec.ffmpeg_bitrate(profile.profile_name)
        if bitrate is not None:
            hint += f" -b:v {bitrate}"
        console.print(f"  [dim]{escape(profile.label)}: {escape(hint)}[/dim]")


def display_catalog(console: Console, profiles: Iterable[ProfileDefinition]) -> None:
    """Display every catalog profile with its description.

    Args:
        console: Rich console for output
        profiles: Catalog profiles in catalog order
    """
    console.print(_profile_table("Available Profiles", profiles, show_description=True))
