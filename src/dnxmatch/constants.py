"""Constants used throughout dnxmatch."""

from __future__ import annotations

# =============================================================================
# Fallback Defaults
# =============================================================================

# Most common broadcast delivery spec, substituted by the relaxed match pass
DEFAULT_RESOLUTION: str = "1920x1080"
DEFAULT_CHROMA: str = "4:2:2"
DEFAULT_BIT_DEPTH: str = "8-bit"
DEFAULT_FRAMERATE: str = "30000"

# =============================================================================
# Preference Constants
# =============================================================================

# Query preference that accepts every profile regardless of preference class
PREFERENCE_SKIP: str = "Skip"

# =============================================================================
# Chroma Constants
# =============================================================================

# 4:2:0 is not offered by DNxHD/DNxHR; callers map it to this value
UNSUPPORTED_CHROMA: str = "4:2:0"
UNSUPPORTED_CHROMA_REPLACEMENT: str = "4:2:2"

# =============================================================================
# Frame Rate Constants
# =============================================================================

# Frame rates are written as frames per 1000 seconds (29.97 fps -> "29970")
FPS_DENOMINATOR: int = 1000

# =============================================================================
# Display Constants
# =============================================================================

# Log section separator width
LOG_SEPARATOR_WIDTH: int = 60

# Log section separator character
LOG_SEPARATOR_CHAR: str = "="
