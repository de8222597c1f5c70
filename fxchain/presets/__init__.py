"""
Presets module - save/load effect chain configuration.
"""

from .mix_mode import (
    EffectChainMixMode,
    EffectParameterLinkType,
    EffectParameterLinkInversion,
    DEFAULT_MIX_MODE,
    mix_mode_from_string,
    mix_mode_to_string,
)

from .effect_preset import (
    EffectParameterPreset,
    EffectPreset,
)

from .chain_preset import EffectChainPreset

from .validation import (
    PresetValidationError,
    validate_chain_element,
)

from .preset_manager import (
    ChainPresetManager,
    PresetError,
    to_xml_string,
    from_xml_string,
)

__all__ = [
    "EffectChainMixMode",
    "EffectParameterLinkType",
    "EffectParameterLinkInversion",
    "DEFAULT_MIX_MODE",
    "mix_mode_from_string",
    "mix_mode_to_string",
    "EffectParameterPreset",
    "EffectPreset",
    "EffectChainPreset",
    "PresetValidationError",
    "validate_chain_element",
    "ChainPresetManager",
    "PresetError",
    "to_xml_string",
    "from_xml_string",
]
