#!/usr/bin/env python3
"""
Display name formatting for Remnant 2 asset identifiers.

Raw identifiers arrive from the telemetry snapshot as blueprint class names,
e.g. 'Weapon_Weapon_Sword01_C' or 'Quest_Injectable_FindTheKey_C'. This module
classifies them by naming convention and rewrites them into the names shown
in the viewer.

Everything here is a pure function of its input: no caching, no I/O.
"""

import re
from enum import Enum


# =============================================================================
# Constants
# =============================================================================

# Blueprint class marker; identifiers without it are already display names
CLASS_SUFFIX = '_C'

MATERIAL_PREFIX = 'Material_'
ARCHETYPE_ITEM_PREFIX = 'Item_HiddenContainer_Material_Engram_'
QUEST_PREFIX = 'Quest_'
CHAR_PREFIX = 'Char_'
CHARACTER_PREFIX = 'Character_'
GEM_CONTAINER_PREFIX = 'GemContainer_'

# Equipment category tokens, in the order their doubled form is collapsed
EQUIPMENT_TOKENS = ('Amulet', 'Armor', 'Ring', 'Weapon')

ARCHETYPE_ITEM_TAG = '{Archetype Item} '

ARCHETYPE_PREFIX = 'Archetype_'
ARCHETYPE_SUFFIX = '_UI_C'
CHARACTER_TYPE_SCOPE = 'ERemnantCharacterType::'


class NamingCategory(Enum):
    """Naming conventions recognised in raw identifiers."""
    MATERIAL = 'material'
    EQUIPMENT_AMULET = 'equipment_amulet'
    EQUIPMENT_ARMOR = 'equipment_armor'
    EQUIPMENT_RING = 'equipment_ring'
    EQUIPMENT_WEAPON = 'equipment_weapon'
    ARCHETYPE_ITEM = 'archetype_item'
    QUEST = 'quest'
    QUEST_INJECTABLE = 'quest_injectable'
    QUEST_SIDE_DUNGEON = 'quest_side_dungeon'
    QUEST_POINT_OF_INTEREST = 'quest_point_of_interest'
    QUEST_MINIBOSS = 'quest_miniboss'
    CHAR = 'char'
    CHARACTER = 'character'
    GEM_CONTAINER_BLUE = 'gem_container_blue'
    GEM_CONTAINER_YELLOW = 'gem_container_yellow'
    GEM_CONTAINER_RED = 'gem_container_red'
    GEM_CONTAINER_OTHER = 'gem_container_other'
    UNCLASSIFIED = 'unclassified'


# Prefix rules in priority order, first match wins
NAMING_RULES = (
    (MATERIAL_PREFIX, NamingCategory.MATERIAL),
    ('Amulet_', NamingCategory.EQUIPMENT_AMULET),
    ('Armor_', NamingCategory.EQUIPMENT_ARMOR),
    ('Ring_', NamingCategory.EQUIPMENT_RING),
    ('Weapon_', NamingCategory.EQUIPMENT_WEAPON),
    (ARCHETYPE_ITEM_PREFIX, NamingCategory.ARCHETYPE_ITEM),
    (QUEST_PREFIX, NamingCategory.QUEST),
    (CHAR_PREFIX, NamingCategory.CHAR),
    (CHARACTER_PREFIX, NamingCategory.CHARACTER),
    (GEM_CONTAINER_PREFIX, NamingCategory.GEM_CONTAINER_OTHER),
)

# First quest token -> (category, display tag)
QUEST_TAGS = {
    'Injectable': (NamingCategory.QUEST_INJECTABLE, ' (Injectable)'),
    'SideD': (NamingCategory.QUEST_SIDE_DUNGEON, ' (Side Dungeon)'),
    'OverworldPOI': (NamingCategory.QUEST_POINT_OF_INTEREST, ' (Point of Interest)'),
    'Miniboss': (NamingCategory.QUEST_MINIBOSS, ' (Miniboss)'),
}

# Gem container remainder -> (category, display name)
GEM_DISPLAY_NAMES = {
    'BlueGems': (NamingCategory.GEM_CONTAINER_BLUE, 'Blue Relic Fragment'),
    'YellowGems': (NamingCategory.GEM_CONTAINER_YELLOW, 'Yellow Relic Fragment'),
    'RedGems': (NamingCategory.GEM_CONTAINER_RED, 'Red Relic Fragment'),
}

EQUIPMENT_CATEGORIES = frozenset({
    NamingCategory.EQUIPMENT_AMULET,
    NamingCategory.EQUIPMENT_ARMOR,
    NamingCategory.EQUIPMENT_RING,
    NamingCategory.EQUIPMENT_WEAPON,
})

QUEST_CATEGORIES = frozenset({NamingCategory.QUEST} | {
    category for category, _ in QUEST_TAGS.values()
})

GEM_CATEGORIES = frozenset({NamingCategory.GEM_CONTAINER_OTHER} | {
    category for category, _ in GEM_DISPLAY_NAMES.values()
})

# A capitalised word, digits included ('Sword01', 'Mk2')
_WORD_PATTERN = re.compile(r'[A-Z][^A-Z\s]*')

# Model number closing the text ('Sword01' -> 'Sword', '01')
_TRAILING_NUMBER = re.compile(r'(?<=[A-Za-z])([0-9]+)$')


# =============================================================================
# Rewrite Steps
# =============================================================================

def strip_prefix(name: str, prefix: str) -> str:
    """Remove a leading prefix if present."""
    if prefix and name.startswith(prefix):
        return name[len(prefix):]
    return name


def strip_class_suffix(name: str) -> str:
    """Remove the trailing '_C' blueprint class marker if present."""
    if name.endswith(CLASS_SUFFIX):
        return name[:-len(CLASS_SUFFIX)]
    return name


def collapse_doubled_tokens(name: str, tokens=EQUIPMENT_TOKENS) -> str:
    """
    Collapse a repeated category token: 'Weapon_Weapon_X' -> 'Weapon X'.

    Only the first '<Token>_<Token>_' occurrence of each token is rewritten.
    A token that appears once is left alone.
    """
    for token in tokens:
        name = name.replace(f'{token}_{token}_', f'{token} ', 1)
    return name


def replace_separator(name: str, separator: str = '_') -> str:
    """Turn underscore separators into spaces."""
    return name.replace(separator, ' ')


def _space_word(match) -> str:
    word = match.group(0)
    if match.end() == len(match.string):
        word = _TRAILING_NUMBER.sub(r' \1', word)
    if len(word) > 1:
        return word + ' '
    return word


def segment(text: str) -> str:
    """
    Insert spaces between concatenated PascalCase words.

    A word starts at an uppercase letter and runs until the next uppercase
    letter or whitespace. Words longer than one character are followed by a
    space, so single capitals stay together ('ABTest' -> 'ABTest').
    A number that ends the text is split off its word ('Sword01' ->
    'Sword 01'). Numbers anywhere else stay with their word
    ('Mk2Upgrade' -> 'Mk2 Upgrade', 'Mk2 Upgrade' is unchanged).
    Whitespace is collapsed and trimmed, so segmenting twice is harmless.
    """
    spaced = _WORD_PATTERN.sub(_space_word, text)
    return ' '.join(spaced.split())


# =============================================================================
# Classification
# =============================================================================

def _quest_category(body: str) -> NamingCategory:
    first_token = body.split('_')[0]
    tagged = QUEST_TAGS.get(first_token)
    return tagged[0] if tagged else NamingCategory.QUEST


def _gem_category(body: str) -> NamingCategory:
    known = GEM_DISPLAY_NAMES.get(body)
    return known[0] if known else NamingCategory.GEM_CONTAINER_OTHER


def classify(raw: str) -> NamingCategory:
    """
    Determine which naming convention a raw identifier follows.

    Identifiers without the '_C' class marker are always UNCLASSIFIED.
    """
    if not raw.endswith(CLASS_SUFFIX):
        return NamingCategory.UNCLASSIFIED

    for prefix, category in NAMING_RULES:
        if not raw.startswith(prefix):
            continue
        body = strip_class_suffix(strip_prefix(raw, prefix))
        if category is NamingCategory.QUEST:
            return _quest_category(body)
        if category is NamingCategory.GEM_CONTAINER_OTHER:
            return _gem_category(body)
        return category

    return NamingCategory.UNCLASSIFIED


# =============================================================================
# Per-Category Rewrites
# =============================================================================

def _humanize_material(raw, category):
    return segment(strip_class_suffix(strip_prefix(raw, MATERIAL_PREFIX)))


def _humanize_equipment(raw, category):
    # The category word is kept: 'Weapon_Sword01_C' -> 'Weapon Sword 01'
    name = collapse_doubled_tokens(raw)
    name = strip_class_suffix(name)
    return segment(replace_separator(name))


def _humanize_archetype_item(raw, category):
    name = strip_class_suffix(strip_prefix(raw, ARCHETYPE_ITEM_PREFIX))
    return ARCHETYPE_ITEM_TAG + segment(name)


def _humanize_quest(raw, category):
    tokens = strip_class_suffix(strip_prefix(raw, QUEST_PREFIX)).split('_')
    tag = ''
    if category is not NamingCategory.QUEST:
        tag = QUEST_TAGS[tokens[0]][1]
        tokens = tokens[1:]
    return segment(' '.join(tokens)) + tag


def _humanize_character(raw, category):
    prefix = CHAR_PREFIX if category is NamingCategory.CHAR else CHARACTER_PREFIX
    name = strip_class_suffix(strip_prefix(raw, prefix))
    return segment(replace_separator(name))


def _humanize_gem_container(raw, category):
    body = strip_class_suffix(strip_prefix(raw, GEM_CONTAINER_PREFIX))
    if category is NamingCategory.GEM_CONTAINER_OTHER:
        return segment(body)
    return GEM_DISPLAY_NAMES[body][1]


def _rewriter_for(category: NamingCategory):
    if category is NamingCategory.MATERIAL:
        return _humanize_material
    if category in EQUIPMENT_CATEGORIES:
        return _humanize_equipment
    if category is NamingCategory.ARCHETYPE_ITEM:
        return _humanize_archetype_item
    if category in QUEST_CATEGORIES:
        return _humanize_quest
    if category in (NamingCategory.CHAR, NamingCategory.CHARACTER):
        return _humanize_character
    if category in GEM_CATEGORIES:
        return _humanize_gem_container
    return None


# =============================================================================
# Public API
# =============================================================================

def humanize(raw: str) -> str:
    """
    Convert a raw asset identifier into its display name.

    Args:
        raw: Identifier from the snapshot, e.g. 'Material_IronOre_C'

    Returns:
        The display name, e.g. 'Iron Ore'. Identifiers that match no known
        convention (or lack the '_C' marker) are returned unchanged.
    """
    category = classify(raw)
    rewrite = _rewriter_for(category)
    if rewrite is None:
        return raw
    return rewrite(raw, category)


def archetype_name(raw: str) -> str:
    """'Archetype_Hunter_UI_C' -> 'Hunter'."""
    name = strip_prefix(raw, ARCHETYPE_PREFIX)
    if name.endswith(ARCHETYPE_SUFFIX):
        name = name[:-len(ARCHETYPE_SUFFIX)]
    return name


def character_type_label(raw: str) -> str:
    """'ERemnantCharacterType::Hardcore' -> 'Hardcore'."""
    return strip_prefix(raw, CHARACTER_TYPE_SCOPE)


def zone_link_label(link: dict) -> str:
    """Pick the best available label for a zone link."""
    for key in ('label', 'destinationLink', 'destinationZone', 'nameId'):
        value = link.get(key)
        if value:
            return value
    return ''
