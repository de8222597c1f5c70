"""
Token codecs for chain mix modes and parameter link settings.

Each codec is a fixed table in both directions with an explicit default,
so an unknown token from disk always lands on a real enum member.
"""

from enum import IntEnum

from fxchain.config import (
    MIX_MODES,
    MIX_MODE_INDEX,
    MIX_MODE_DEFAULT_INDEX,
    LINK_TYPES,
    LINK_TYPE_INDEX,
    LINK_TYPE_DEFAULT_INDEX,
    LINK_INVERSIONS,
    LINK_INVERSION_INDEX,
    LINK_INVERSION_DEFAULT_INDEX,
)


class EffectChainMixMode(IntEnum):
    """How a chain's wet output is blended with its dry input."""
    DRY_SLASH_WET = 0  # crossfade dry against wet
    DRY_PLUS_WET = 1   # dry stays at unity, wet is added on top


class EffectParameterLinkType(IntEnum):
    """How an effect parameter follows the chain's meta/super knob."""
    NONE = 0
    LINKED = 1
    LINKED_LEFT = 2
    LINKED_RIGHT = 3
    LINKED_LEFT_RIGHT = 4


class EffectParameterLinkInversion(IntEnum):
    NONE = 0
    INVERTED = 1


DEFAULT_MIX_MODE = EffectChainMixMode(MIX_MODE_DEFAULT_INDEX)
DEFAULT_LINK_TYPE = EffectParameterLinkType(LINK_TYPE_DEFAULT_INDEX)
DEFAULT_LINK_INVERSION = EffectParameterLinkInversion(LINK_INVERSION_DEFAULT_INDEX)


def _token_to_member(token, index: dict, enum_cls, default):
    if not isinstance(token, str):
        return default
    i = index.get(token.strip())
    if i is None:
        return default
    return enum_cls(i)


def _member_to_token(member, tokens: list, enum_cls, default) -> str:
    try:
        member = enum_cls(member)
    except (ValueError, TypeError):
        member = default
    return tokens[int(member)]


def mix_mode_from_string(token) -> EffectChainMixMode:
    """
    'DRY/WET' or 'DRY+WET' -> mix mode; anything else gives DEFAULT_MIX_MODE.

    Surrounding whitespace is ignored, so a hand-indented " DRY+WET " still
    matches. Matching is otherwise exact and case sensitive.
    """
    return _token_to_member(token, MIX_MODE_INDEX, EffectChainMixMode, DEFAULT_MIX_MODE)


def mix_mode_to_string(mode) -> str:
    return _member_to_token(mode, MIX_MODES, EffectChainMixMode, DEFAULT_MIX_MODE)


def is_known_mix_mode(token) -> bool:
    return isinstance(token, str) and token.strip() in MIX_MODE_INDEX


def link_type_from_string(token) -> EffectParameterLinkType:
    return _token_to_member(token, LINK_TYPE_INDEX, EffectParameterLinkType, DEFAULT_LINK_TYPE)


def link_type_to_string(link_type) -> str:
    return _member_to_token(link_type, LINK_TYPES, EffectParameterLinkType, DEFAULT_LINK_TYPE)


def link_inversion_from_string(token) -> EffectParameterLinkInversion:
    return _token_to_member(
        token, LINK_INVERSION_INDEX, EffectParameterLinkInversion, DEFAULT_LINK_INVERSION
    )


def link_inversion_to_string(inversion) -> str:
    return _member_to_token(
        inversion, LINK_INVERSIONS, EffectParameterLinkInversion, DEFAULT_LINK_INVERSION
    )
