"""
Central Configuration
All constants, tag names, and token tables in one place
"""

# === DOCUMENT TAGS ===
# Stable for compatibility with presets written by other installations.
CHAIN_TAG = "Chain"
CHAIN_ID_TAG = "Id"
CHAIN_NAME_TAG = "Name"
CHAIN_DESCRIPTION_TAG = "Description"
CHAIN_MIX_MODE_TAG = "MixMode"
CHAIN_SUPER_PARAMETER_TAG = "SuperParameter"
EFFECTS_ROOT_TAG = "Effects"

EFFECT_TAG = "Effect"
EFFECT_ID_TAG = "Id"
EFFECT_VERSION_TAG = "Version"
EFFECT_META_PARAMETER_TAG = "MetaParameter"
PARAMETERS_ROOT_TAG = "Parameters"

PARAMETER_TAG = "Parameter"
PARAMETER_ID_TAG = "Id"
PARAMETER_VALUE_TAG = "Value"
PARAMETER_LINK_TYPE_TAG = "LinkType"
PARAMETER_LINK_INVERSION_TAG = "LinkInversion"
PARAMETER_HIDDEN_TAG = "Hidden"

# === MIX MODES ===
# Order matches EffectChainMixMode values
MIX_MODES = ["DRY/WET", "DRY+WET"]
MIX_MODE_INDEX = {mode: i for i, mode in enumerate(MIX_MODES)}
MIX_MODE_DEFAULT_INDEX = 0  # DRY/WET

# === PARAMETER LINKING ===
LINK_TYPES = ["NONE", "LINKED", "LINKED_LEFT", "LINKED_RIGHT", "LINKED_LEFT_RIGHT"]
LINK_TYPE_INDEX = {link: i for i, link in enumerate(LINK_TYPES)}
LINK_TYPE_DEFAULT_INDEX = 0  # NONE

LINK_INVERSIONS = ["NONE", "INVERTED"]
LINK_INVERSION_INDEX = {inv: i for i, inv in enumerate(LINK_INVERSIONS)}
LINK_INVERSION_DEFAULT_INDEX = 0  # NONE

# Accepted spellings for <Hidden>; anything else reads as False
TRUE_TOKENS = ("true", "1", "yes")

# === DEFAULTS ===
SUPER_PARAMETER_DEFAULT = 0.0
META_PARAMETER_DEFAULT = 0.0
PARAMETER_VALUE_DEFAULT = 0.0

# === FILES ===
PRESET_FILE_EXTENSION = ".xml"
PRESET_FILE_ENCODING = "utf-8"
PRESET_INDENT = "  "
