"""Version information and release notes for dnxmatch."""

__version__ = "0.1.0"

RELEASE_NOTES = """
## 0.1.0

Initial release.

- Built-in Avid DNxHD/DNxHR capability catalog
- Exact matching on frame rate, resolution, chroma, bit depth and preference
- Relaxed fallback to the standard 1080p 4:2:2 8-bit 30 fps delivery spec
- YAML catalog overrides
- Rich console result tables
""".strip()
