"""The stock cheat-code catalog of the platformer."""
from __future__ import annotations

import random
from enum import Enum

from tick_unlock.catalog import UnlockCatalog
from tick_unlock.types import AbilityTemplate, Rarity


class Ability(Enum):
    """Abilities the player can unlock with cheat codes."""

    # Mandatory
    JUMP = "jump"

    # Common
    CROUCH = "crouch"
    ATTACK = "attack"
    ATTACK_DMG_BOOST = "attack_dmg_boost"
    ATTACK_FIRE_RATE_BOOST = "attack_fire_rate_boost"
    MOVE_LEFT = "move_left"
    SPEED_BOOST_1 = "speed_boost_1"
    SPEED_BOOST_2 = "speed_boost_2"
    SPEED_BOOST_3 = "speed_boost_3"
    ARMOR = "armor"
    DASH = "dash"

    # Rare
    DOUBLE_JUMP = "double_jump"
    SPEED_BOOST_4 = "speed_boost_4"
    SPEED_BOOST_5 = "speed_boost_5"
    SHIELD = "shield"

    # Legendary
    EXTRA_LIFE = "extra_life"
    TEMP_INVINCIBILITY = "temp_invincibility"
    FLY = "fly"


def _t(
    ability: Ability,
    rarity: Rarity,
    asset_ref: str,
    *dependencies: Ability,
) -> AbilityTemplate:
    return AbilityTemplate(
        id=ability,
        rarity=rarity,
        dependencies=frozenset(dependencies),
        asset_ref=asset_ref,
    )


DEFAULT_TEMPLATES: tuple[AbilityTemplate, ...] = (
    _t(Ability.JUMP, Rarity.MANDATORY, "jump.png"),
    _t(Ability.CROUCH, Rarity.COMMON, "crouch.png"),
    _t(Ability.ATTACK, Rarity.COMMON, "attack.png"),
    _t(Ability.ATTACK_DMG_BOOST, Rarity.COMMON, "attack_dmg_boost.png",
       Ability.ATTACK),
    _t(Ability.ATTACK_FIRE_RATE_BOOST, Rarity.COMMON, "attack_fr_boost.png",
       Ability.ATTACK),
    _t(Ability.MOVE_LEFT, Rarity.COMMON, "move_left.png"),
    _t(Ability.SPEED_BOOST_1, Rarity.COMMON, "speed.png"),
    _t(Ability.SPEED_BOOST_2, Rarity.COMMON, "speed.png",
       Ability.SPEED_BOOST_1),
    _t(Ability.SPEED_BOOST_3, Rarity.COMMON, "speed.png",
       Ability.SPEED_BOOST_1, Ability.SPEED_BOOST_2),
    _t(Ability.ARMOR, Rarity.COMMON, "armor.png"),
    _t(Ability.DASH, Rarity.COMMON, "dash.png"),
    _t(Ability.DOUBLE_JUMP, Rarity.RARE, "double_jump.png",
       Ability.JUMP),
    _t(Ability.SPEED_BOOST_4, Rarity.RARE, "speed.png",
       Ability.SPEED_BOOST_1, Ability.SPEED_BOOST_2, Ability.SPEED_BOOST_3),
    _t(Ability.SPEED_BOOST_5, Rarity.RARE, "speed.png",
       Ability.SPEED_BOOST_1, Ability.SPEED_BOOST_2, Ability.SPEED_BOOST_3,
       Ability.SPEED_BOOST_4),
    _t(Ability.SHIELD, Rarity.RARE, "shield.png",
       Ability.JUMP),
    _t(Ability.EXTRA_LIFE, Rarity.LEGENDARY, "extra_life.png"),
    _t(Ability.TEMP_INVINCIBILITY, Rarity.LEGENDARY, "temp_invincibility.png",
       Ability.ARMOR, Ability.SHIELD),
    _t(Ability.FLY, Rarity.LEGENDARY, "fly.png",
       Ability.JUMP, Ability.DOUBLE_JUMP),
)


def build_default_catalog(rng: random.Random | None = None) -> UnlockCatalog:
    """Fresh catalog of every ``Ability`` with newly generated codes."""
    return UnlockCatalog.from_templates(DEFAULT_TEMPLATES, rng=rng)
