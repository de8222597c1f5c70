"""
Effect unit preset - saved configuration of one effect slot in a chain.

An empty preset (no effect id) still takes up its position in the chain
and is written as a bare <Effect/> element.
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Optional

from fxchain.config import (
    EFFECT_TAG,
    EFFECT_ID_TAG,
    EFFECT_VERSION_TAG,
    EFFECT_META_PARAMETER_TAG,
    PARAMETERS_ROOT_TAG,
    PARAMETER_TAG,
    PARAMETER_ID_TAG,
    PARAMETER_VALUE_TAG,
    PARAMETER_LINK_TYPE_TAG,
    PARAMETER_LINK_INVERSION_TAG,
    PARAMETER_HIDDEN_TAG,
    META_PARAMETER_DEFAULT,
    PARAMETER_VALUE_DEFAULT,
)
from fxchain.utils.logger import logger
from .mix_mode import (
    EffectParameterLinkType,
    EffectParameterLinkInversion,
    DEFAULT_LINK_TYPE,
    DEFAULT_LINK_INVERSION,
    link_type_from_string,
    link_type_to_string,
    link_inversion_from_string,
    link_inversion_to_string,
)
from .xml_utils import (
    add_element,
    finite_or_default,
    format_bool,
    format_float,
    has_child_nodes,
    iter_child_elements,
    select_element,
    select_node_bool,
    select_node_float,
    select_node_text,
)


@dataclass
class EffectParameterPreset:
    id: str = ""
    value: float = PARAMETER_VALUE_DEFAULT
    link_type: EffectParameterLinkType = DEFAULT_LINK_TYPE
    link_inversion: EffectParameterLinkInversion = DEFAULT_LINK_INVERSION
    hidden: bool = False

    @classmethod
    def from_xml(cls, element: Optional[ET.Element]) -> "EffectParameterPreset":
        if getattr(element, "tag", None) != PARAMETER_TAG:
            return cls()
        return cls(
            id=select_node_text(element, PARAMETER_ID_TAG),
            value=select_node_float(element, PARAMETER_VALUE_TAG, PARAMETER_VALUE_DEFAULT),
            link_type=link_type_from_string(
                select_node_text(element, PARAMETER_LINK_TYPE_TAG)),
            link_inversion=link_inversion_from_string(
                select_node_text(element, PARAMETER_LINK_INVERSION_TAG)),
            hidden=select_node_bool(element, PARAMETER_HIDDEN_TAG),
        )

    @classmethod
    def from_parameter(cls, parameter) -> "EffectParameterPreset":
        """Snapshot a live parameter handle."""
        return cls(
            id=parameter.get_id() or "",
            value=finite_or_default(parameter.get_value(), PARAMETER_VALUE_DEFAULT),
            link_type=EffectParameterLinkType(parameter.get_link_type()),
            link_inversion=EffectParameterLinkInversion(parameter.get_link_inversion()),
            hidden=bool(parameter.is_hidden()),
        )

    def to_xml(self) -> ET.Element:
        element = ET.Element(PARAMETER_TAG)
        add_element(element, PARAMETER_ID_TAG, self.id)
        add_element(element, PARAMETER_VALUE_TAG, format_float(self.value))
        add_element(element, PARAMETER_LINK_TYPE_TAG, link_type_to_string(self.link_type))
        add_element(element, PARAMETER_LINK_INVERSION_TAG,
                    link_inversion_to_string(self.link_inversion))
        add_element(element, PARAMETER_HIDDEN_TAG, format_bool(self.hidden))
        return element


@dataclass
class EffectPreset:
    id: str = ""
    version: str = ""
    meta_parameter: float = META_PARAMETER_DEFAULT
    parameters: list = field(default_factory=list)  # EffectParameterPreset, slot order

    def is_empty(self) -> bool:
        return not self.id

    @classmethod
    def from_xml(cls, element: Optional[ET.Element]) -> "EffectPreset":
        """
        Build from an <Effect> element.

        Wrong tag or no content gives an empty preset. Never raises.
        """
        if getattr(element, "tag", None) != EFFECT_TAG:
            logger.xml("Ignoring effect element with unexpected tag",
                       details=repr(getattr(element, "tag", None)))
            return cls()
        if not has_child_nodes(element):
            return cls()

        parameters = [
            EffectParameterPreset.from_xml(child)
            for child in iter_child_elements(select_element(element, PARAMETERS_ROOT_TAG))
        ]
        return cls(
            id=select_node_text(element, EFFECT_ID_TAG),
            version=select_node_text(element, EFFECT_VERSION_TAG),
            meta_parameter=select_node_float(element, EFFECT_META_PARAMETER_TAG,
                                             META_PARAMETER_DEFAULT),
            parameters=parameters,
        )

    @classmethod
    def from_effect_slot(cls, slot) -> "EffectPreset":
        """Snapshot a live effect slot. An unloaded slot gives an empty preset."""
        effect_id = slot.get_effect_id()
        if not effect_id:
            return cls()
        return cls(
            id=effect_id,
            version=slot.get_version() or "",
            meta_parameter=finite_or_default(slot.get_meta_parameter(), META_PARAMETER_DEFAULT),
            parameters=[EffectParameterPreset.from_parameter(p) for p in slot.get_parameters()],
        )

    def to_xml(self) -> ET.Element:
        element = ET.Element(EFFECT_TAG)
        if self.is_empty():
            return element

        add_element(element, EFFECT_ID_TAG, self.id)
        add_element(element, EFFECT_VERSION_TAG, self.version)
        add_element(element, EFFECT_META_PARAMETER_TAG, format_float(self.meta_parameter))
        parameters_element = ET.SubElement(element, PARAMETERS_ROOT_TAG)
        for parameter in self.parameters:
            parameters_element.append(parameter.to_xml())
        return element
