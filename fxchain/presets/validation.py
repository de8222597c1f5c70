"""
Chain preset document validation.

Loading never depends on this; it reports what from_xml would silently
replace with defaults, for tooling and bug reports.
"""

import xml.etree.ElementTree as ET
from typing import Optional

from fxchain.config import (
    CHAIN_TAG,
    CHAIN_ID_TAG,
    CHAIN_MIX_MODE_TAG,
    CHAIN_SUPER_PARAMETER_TAG,
    EFFECTS_ROOT_TAG,
    EFFECT_TAG,
    EFFECT_META_PARAMETER_TAG,
    PARAMETERS_ROOT_TAG,
    PARAMETER_TAG,
    PARAMETER_VALUE_TAG,
    PARAMETER_LINK_TYPE_TAG,
    PARAMETER_LINK_INVERSION_TAG,
    LINK_TYPE_INDEX,
    LINK_INVERSION_INDEX,
)
from .mix_mode import is_known_mix_mode
from .xml_utils import (
    has_child_nodes,
    iter_child_elements,
    parse_float,
    select_element,
    select_node_text,
)


class PresetValidationError(Exception):
    """Raised when preset validation fails in strict mode."""
    pass


def _check_float(parent: ET.Element, tag: str, prefix: str) -> Optional[str]:
    text = select_node_text(parent, tag)
    if not text:
        return None
    if parse_float(text, None) is None:
        return f"{prefix}.{tag} is not a finite number: {text!r}"
    return None


def validate_chain_element(element: Optional[ET.Element], strict: bool = False) -> tuple:
    """
    Validate a <Chain> element.

    Args:
        element: Parsed chain element
        strict: If True, raise PresetValidationError on any error

    Returns:
        (is_valid, errors_and_warnings)
    """
    errors = []
    warnings = []

    if element is None:
        errors.append("no element")
    elif element.tag != CHAIN_TAG:
        errors.append(f"root tag must be {CHAIN_TAG}, got {element.tag!r}")
    elif not has_child_nodes(element):
        warnings.append(f"{CHAIN_TAG} is empty")
    else:
        if not select_node_text(element, CHAIN_ID_TAG):
            warnings.append(f"{CHAIN_TAG}.{CHAIN_ID_TAG} is missing")

        mix_mode = select_node_text(element, CHAIN_MIX_MODE_TAG)
        if mix_mode and not is_known_mix_mode(mix_mode):
            warnings.append(f"{CHAIN_TAG}.{CHAIN_MIX_MODE_TAG} unknown token {mix_mode!r}")

        warning = _check_float(element, CHAIN_SUPER_PARAMETER_TAG, CHAIN_TAG)
        if warning:
            warnings.append(warning)

        effects = select_element(element, EFFECTS_ROOT_TAG)
        if effects is None:
            warnings.append(f"{CHAIN_TAG}.{EFFECTS_ROOT_TAG} is missing")
        for i, effect in enumerate(iter_child_elements(effects)):
            warnings.extend(_validate_effect(effect, f"{EFFECTS_ROOT_TAG}[{i}]"))

    is_valid = len(errors) == 0

    if strict and not is_valid:
        raise PresetValidationError(f"Invalid chain preset: {'; '.join(errors)}")

    return is_valid, errors + warnings


def _validate_effect(effect: ET.Element, prefix: str) -> list:
    """Warnings for a single <Effect>."""
    warnings = []

    if effect.tag != EFFECT_TAG:
        warnings.append(f"{prefix} unexpected tag {effect.tag!r}, loads as empty slot")
        return warnings
    if not has_child_nodes(effect):
        return warnings  # empty slot

    warning = _check_float(effect, EFFECT_META_PARAMETER_TAG, prefix)
    if warning:
        warnings.append(warning)

    parameters = select_element(effect, PARAMETERS_ROOT_TAG)
    for j, parameter in enumerate(iter_child_elements(parameters)):
        param_prefix = f"{prefix}.{PARAMETERS_ROOT_TAG}[{j}]"
        if parameter.tag != PARAMETER_TAG:
            warnings.append(f"{param_prefix} unexpected tag {parameter.tag!r}")
            continue
        warning = _check_float(parameter, PARAMETER_VALUE_TAG, param_prefix)
        if warning:
            warnings.append(warning)
        link_type = select_node_text(parameter, PARAMETER_LINK_TYPE_TAG).strip()
        if link_type and link_type not in LINK_TYPE_INDEX:
            warnings.append(f"{param_prefix}.{PARAMETER_LINK_TYPE_TAG} unknown token {link_type!r}")
        inversion = select_node_text(parameter, PARAMETER_LINK_INVERSION_TAG).strip()
        if inversion and inversion not in LINK_INVERSION_INDEX:
            warnings.append(
                f"{param_prefix}.{PARAMETER_LINK_INVERSION_TAG} unknown token {inversion!r}")

    return warnings
