#!/usr/bin/env python3
"""
Unit tests for refinder.naming display name formatting.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from refinder.naming import (
    NAMING_RULES,
    NamingCategory,
    archetype_name,
    character_type_label,
    classify,
    collapse_doubled_tokens,
    humanize,
    replace_separator,
    segment,
    strip_class_suffix,
    strip_prefix,
    zone_link_label,
)


class TestSegment(unittest.TestCase):
    """Tests for segment() word splitting."""

    def test_two_words(self):
        """PascalCase words should be split with a space."""
        self.assertEqual(segment("BlueGems"), "Blue Gems")

    def test_single_capital(self):
        """A lone capital letter is returned as is."""
        self.assertEqual(segment("A"), "A")

    def test_single_capitals_stay_together(self):
        """Single-letter runs get no trailing space."""
        self.assertEqual(segment("ABTest"), "ABTest")

    def test_empty(self):
        self.assertEqual(segment(""), "")

    def test_digits_after_letters(self):
        """A number glued to a word is split off."""
        self.assertEqual(segment("Sword01"), "Sword 01")

    def test_leading_lowercase_kept(self):
        """Characters before the first capital are left in place."""
        self.assertEqual(segment("lowerCase"), "lowerCase")

    def test_inner_numbers_kept(self):
        """Only a number at the very end is split off its word."""
        self.assertEqual(segment("Mk2Upgrade"), "Mk2 Upgrade")
        self.assertEqual(segment("Sword01Fire"), "Sword01 Fire")
        self.assertEqual(segment("Mk2 Upgrade"), "Mk2 Upgrade")

    def test_already_segmented(self):
        """Segmenting readable text should not add extra spaces."""
        self.assertEqual(segment("Blue Gems"), "Blue Gems")
        self.assertEqual(segment("Weapon Sword 01"), "Weapon Sword 01")

    def test_idempotent(self):
        """Segmenting twice gives the same result as once."""
        for text in ("FindTheKey", "Weapon Sword01", "ABTest", "Iron Ore", "Ring ZaniasMalice", "Mk2Upgrade"):
            once = segment(text)
            self.assertEqual(segment(once), once)


class TestRewriteSteps(unittest.TestCase):
    """Tests for the individual rewrite steps."""

    def test_strip_prefix(self):
        self.assertEqual(strip_prefix("Material_IronOre_C", "Material_"), "IronOre_C")

    def test_strip_prefix_absent(self):
        """A missing prefix leaves the name untouched."""
        self.assertEqual(strip_prefix("IronOre_C", "Material_"), "IronOre_C")

    def test_strip_class_suffix(self):
        self.assertEqual(strip_class_suffix("IronOre_C"), "IronOre")
        self.assertEqual(strip_class_suffix("IronOre"), "IronOre")

    def test_collapse_doubled_tokens(self):
        """'<Token>_<Token>_' collapses to '<Token> '."""
        self.assertEqual(collapse_doubled_tokens("Weapon_Weapon_Sword01_C"), "Weapon Sword01_C")
        self.assertEqual(collapse_doubled_tokens("Amulet_Amulet_Ring_C"), "Amulet Ring_C")

    def test_collapse_single_token_untouched(self):
        """A token that appears once is not removed."""
        self.assertEqual(collapse_doubled_tokens("Weapon_Sword01_C"), "Weapon_Sword01_C")

    def test_replace_separator(self):
        self.assertEqual(replace_separator("Old_Man"), "Old Man")


class TestClassify(unittest.TestCase):
    """Tests for classify() naming categories."""

    def test_rule_order(self):
        """Rules are checked in a fixed priority order."""
        prefixes = [prefix for prefix, _ in NAMING_RULES]
        self.assertEqual(prefixes, [
            'Material_', 'Amulet_', 'Armor_', 'Ring_', 'Weapon_',
            'Item_HiddenContainer_Material_Engram_', 'Quest_', 'Char_',
            'Character_', 'GemContainer_',
        ])

    def test_without_class_suffix(self):
        self.assertIs(classify("Material_IronOre"), NamingCategory.UNCLASSIFIED)

    def test_material(self):
        self.assertIs(classify("Material_IronOre_C"), NamingCategory.MATERIAL)

    def test_equipment(self):
        self.assertIs(classify("Amulet_Amulet_X_C"), NamingCategory.EQUIPMENT_AMULET)
        self.assertIs(classify("Armor_Body_X_C"), NamingCategory.EQUIPMENT_ARMOR)
        self.assertIs(classify("Ring_X_C"), NamingCategory.EQUIPMENT_RING)
        self.assertIs(classify("Weapon_Weapon_X_C"), NamingCategory.EQUIPMENT_WEAPON)

    def test_archetype_item(self):
        self.assertIs(
            classify("Item_HiddenContainer_Material_Engram_FireRune_C"),
            NamingCategory.ARCHETYPE_ITEM,
        )

    def test_quest_variants(self):
        """Only the first quest token selects the variant."""
        self.assertIs(classify("Quest_MainStoryBeat_C"), NamingCategory.QUEST)
        self.assertIs(classify("Quest_Injectable_X_C"), NamingCategory.QUEST_INJECTABLE)
        self.assertIs(classify("Quest_SideD_X_C"), NamingCategory.QUEST_SIDE_DUNGEON)
        self.assertIs(classify("Quest_OverworldPOI_X_C"), NamingCategory.QUEST_POINT_OF_INTEREST)
        self.assertIs(classify("Quest_Miniboss_X_C"), NamingCategory.QUEST_MINIBOSS)
        self.assertIs(classify("Quest_X_Miniboss_C"), NamingCategory.QUEST)

    def test_characters(self):
        self.assertIs(classify("Char_Smith_C"), NamingCategory.CHAR)
        self.assertIs(classify("Character_VillageElder_C"), NamingCategory.CHARACTER)

    def test_gem_containers(self):
        self.assertIs(classify("GemContainer_BlueGems_C"), NamingCategory.GEM_CONTAINER_BLUE)
        self.assertIs(classify("GemContainer_YellowGems_C"), NamingCategory.GEM_CONTAINER_YELLOW)
        self.assertIs(classify("GemContainer_RedGems_C"), NamingCategory.GEM_CONTAINER_RED)
        self.assertIs(classify("GemContainer_PurpleGems_C"), NamingCategory.GEM_CONTAINER_OTHER)

    def test_unknown_prefix(self):
        self.assertIs(classify("Relic_Consumable_DragonHeart_C"), NamingCategory.UNCLASSIFIED)


class TestHumanize(unittest.TestCase):
    """Tests for humanize() display names."""

    def test_material(self):
        self.assertEqual(humanize("Material_IronOre_C"), "Iron Ore")

    def test_doubled_weapon(self):
        self.assertEqual(humanize("Weapon_Weapon_Sword01_C"), "Weapon Sword 01")

    def test_single_weapon_token_kept(self):
        """Equipment named with one category token keeps the token."""
        self.assertEqual(humanize("Weapon_Sword01_C"), "Weapon Sword 01")

    def test_equipment_underscores(self):
        self.assertEqual(humanize("Ring_Ring_ZaniasMalice_C"), "Ring Zanias Malice")
        self.assertEqual(humanize("Armor_Body_Leto_C"), "Armor Body Leto")
        self.assertEqual(humanize("Amulet_Amulet_Ring_C"), "Amulet Ring")

    def test_archetype_item(self):
        self.assertEqual(
            humanize("Item_HiddenContainer_Material_Engram_FireRune_C"),
            "{Archetype Item} Fire Rune",
        )

    def test_quest_tags(self):
        self.assertEqual(humanize("Quest_Injectable_FindTheKey_C"), "Find The Key (Injectable)")
        self.assertEqual(humanize("Quest_Miniboss_SwampBoss_C"), "Swamp Boss (Miniboss)")
        self.assertEqual(humanize("Quest_SideD_Forlorn_Coast_C"), "Forlorn Coast (Side Dungeon)")
        self.assertEqual(humanize("Quest_OverworldPOI_Tower_C"), "Tower (Point of Interest)")

    def test_quest_without_tag(self):
        self.assertEqual(humanize("Quest_MainStoryBeat_C"), "Main Story Beat")

    def test_quest_tag_only(self):
        """A quest with nothing after its tag keeps just the tag."""
        self.assertEqual(humanize("Quest_Injectable_C"), " (Injectable)")

    def test_weapon_tokens_only(self):
        """The collapse takes the separator before '_C', so the class marker stays as 'C'."""
        self.assertEqual(humanize("Weapon_Weapon_C"), "Weapon C")

    def test_characters(self):
        self.assertEqual(humanize("Char_Smith_C"), "Smith")
        self.assertEqual(humanize("Char_Old_Man_C"), "Old Man")
        self.assertEqual(humanize("Character_VillageElder_C"), "Village Elder")

    def test_gem_containers(self):
        self.assertEqual(humanize("GemContainer_BlueGems_C"), "Blue Relic Fragment")
        self.assertEqual(humanize("GemContainer_YellowGems_C"), "Yellow Relic Fragment")
        self.assertEqual(humanize("GemContainer_RedGems_C"), "Red Relic Fragment")
        self.assertEqual(humanize("GemContainer_PurpleGems_C"), "Purple Gems")

    def test_empty(self):
        self.assertEqual(humanize(""), "")

    def test_no_class_suffix_unchanged(self):
        """Anything not ending in '_C' is returned byte for byte."""
        for raw in ("Material_IronOre", "Iron Ore", "_c", "Quest_X_C ", "ERemnantCharacterType::Standard"):
            self.assertEqual(humanize(raw), raw)

    def test_unknown_prefix_unchanged(self):
        """Unclassified identifiers keep their class suffix."""
        self.assertEqual(humanize("Relic_Consumable_DragonHeart_C"), "Relic_Consumable_DragonHeart_C")
        self.assertEqual(humanize("_C"), "_C")

    def test_deterministic(self):
        for raw in ("Material_IronOre_C", "Quest_SideD_Forlorn_Coast_C", "Nope_C"):
            self.assertEqual(humanize(raw), humanize(raw))

    def test_humanized_name_passes_through(self):
        """Feeding a display name back in doesn't corrupt it."""
        name = humanize("Material_IronOre_C")
        self.assertEqual(humanize(name), name)


class TestDisplayHelpers(unittest.TestCase):
    """Tests for archetype, character type and zone link labels."""

    def test_archetype_name(self):
        self.assertEqual(archetype_name("Archetype_Hunter_UI_C"), "Hunter")

    def test_archetype_name_plain(self):
        self.assertEqual(archetype_name("Medic"), "Medic")

    def test_character_type_label(self):
        self.assertEqual(character_type_label("ERemnantCharacterType::Hardcore"), "Hardcore")
        self.assertEqual(character_type_label("Standard"), "Standard")

    def test_zone_link_label_fallbacks(self):
        """The first non-empty of label, destinationLink, destinationZone, nameId wins."""
        self.assertEqual(zone_link_label({'label': 'Outpost', 'nameId': 'WP'}), "Outpost")
        self.assertEqual(zone_link_label({'label': '', 'destinationLink': 'Parish'}), "Parish")
        self.assertEqual(zone_link_label({'destinationZone': 'Zone2'}), "Zone2")
        self.assertEqual(zone_link_label({'nameId': 'WP_1'}), "WP_1")
        self.assertEqual(zone_link_label({}), "")


if __name__ == '__main__':
    unittest.main()
