"""
Effect chain preset - snapshot of one chain's configuration.

Three ways in (empty, from a <Chain> element, from a live chain) and one
way out (to_xml). Documents may be hand-edited or truncated, so from_xml
substitutes defaults for anything missing instead of raising.
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Optional

from fxchain.config import (
    CHAIN_TAG,
    CHAIN_ID_TAG,
    CHAIN_NAME_TAG,
    CHAIN_DESCRIPTION_TAG,
    CHAIN_MIX_MODE_TAG,
    CHAIN_SUPER_PARAMETER_TAG,
    EFFECTS_ROOT_TAG,
    SUPER_PARAMETER_DEFAULT,
)
from fxchain.utils.logger import logger
from .effect_preset import EffectPreset
from .mix_mode import (
    EffectChainMixMode,
    DEFAULT_MIX_MODE,
    is_known_mix_mode,
    mix_mode_from_string,
    mix_mode_to_string,
)
from .xml_utils import (
    add_element,
    finite_or_default,
    format_float,
    has_child_nodes,
    iter_child_elements,
    select_element,
    select_node_float,
    select_node_text,
)


@dataclass
class EffectChainPreset:
    id: str = ""
    name: str = ""
    description: str = ""
    mix_mode: EffectChainMixMode = DEFAULT_MIX_MODE
    super_parameter: float = SUPER_PARAMETER_DEFAULT
    effect_presets: list = field(default_factory=list)  # EffectPreset, signal order

    @classmethod
    def from_xml(cls, element: Optional[ET.Element]) -> "EffectChainPreset":
        """
        Build a preset from a <Chain> element.

        Wrong tag or an element with no content gives the empty preset.
        Each field is read on its own, so one missing child never hides the
        others. Every element under <Effects> becomes one EffectPreset, in
        document order; comments and processing instructions are skipped.
        """
        if getattr(element, "tag", None) != CHAIN_TAG:
            logger.preset("Not a chain element, using empty preset",
                          details=repr(getattr(element, "tag", None)))
            return cls()
        if not has_child_nodes(element):
            logger.preset("Chain element has no content, using empty preset")
            return cls()

        mix_mode_token = select_node_text(element, CHAIN_MIX_MODE_TAG)
        if mix_mode_token and not is_known_mix_mode(mix_mode_token):
            logger.warning(f"Unknown mix mode '{mix_mode_token}', using "
                           f"{mix_mode_to_string(DEFAULT_MIX_MODE)}", component="PRESET")

        effects_element = select_element(element, EFFECTS_ROOT_TAG)
        effect_presets = [
            EffectPreset.from_xml(child) for child in iter_child_elements(effects_element)
        ]

        return cls(
            id=select_node_text(element, CHAIN_ID_TAG),
            name=select_node_text(element, CHAIN_NAME_TAG),
            description=select_node_text(element, CHAIN_DESCRIPTION_TAG),
            mix_mode=mix_mode_from_string(mix_mode_token),
            super_parameter=select_node_float(element, CHAIN_SUPER_PARAMETER_TAG,
                                              SUPER_PARAMETER_DEFAULT),
            effect_presets=effect_presets,
        )

    @classmethod
    def from_chain_slot(cls, chain) -> "EffectChainPreset":
        """
        Snapshot a live chain through its read accessors.

        The chain is not modified. Effect slots are captured in their
        current order, empty slots included. A non-finite super parameter is
        stored as the default, the same value a saved "nan" reads back as.
        """
        return cls(
            id=chain.get_id(),
            name=chain.get_name(),
            description=chain.get_description(),
            mix_mode=EffectChainMixMode(chain.get_mix_mode()),
            super_parameter=finite_or_default(chain.get_super_parameter(),
                                              SUPER_PARAMETER_DEFAULT),
            effect_presets=[
                EffectPreset.from_effect_slot(slot) for slot in chain.get_effect_slots()
            ],
        )

    def to_xml(self) -> ET.Element:
        """Return a new, unattached <Chain> element. Attaching it is up to the caller."""
        element = ET.Element(CHAIN_TAG)
        add_element(element, CHAIN_ID_TAG, self.id)
        add_element(element, CHAIN_NAME_TAG, self.name)
        add_element(element, CHAIN_DESCRIPTION_TAG, self.description)
        add_element(element, CHAIN_MIX_MODE_TAG, mix_mode_to_string(self.mix_mode))
        add_element(element, CHAIN_SUPER_PARAMETER_TAG, format_float(self.super_parameter))

        effects_element = ET.SubElement(element, EFFECTS_ROOT_TAG)
        for effect_preset in self.effect_presets:
            effects_element.append(effect_preset.to_xml())
        return element

    def is_empty(self) -> bool:
        return self == EffectChainPreset()
