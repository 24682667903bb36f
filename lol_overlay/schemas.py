"""Typed models for the Live Client Data API payloads.

Field names are snake_case; the wire names (camelCase for most documents,
PascalCase for the event feed) are mapped through aliases. Unknown keys are
ignored so new upstream fields never break decoding.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr
from pydantic.alias_generators import to_camel, to_pascal


class _LiveModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class _PascalModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True, frozen=True)


class GameData(_LiveModel):
    game_mode: StrictStr
    game_time: float


class Event(_PascalModel):
    event_id: StrictInt = Field(alias="EventID")
    event_name: StrictStr
    event_time: float


class EventList(_PascalModel):
    events: Tuple[Event, ...] = ()


class Item(_LiveModel):
    name: StrictStr = Field(alias="displayName")
    can_use: StrictBool
    slot: StrictInt
    count: StrictInt
    price: StrictInt
    id: StrictInt = Field(alias="itemID")


class AbilityInfo(_LiveModel):
    ability_level: StrictInt = 0  # passive has no level
    display_name: StrictStr
    id: StrictStr


class Abilities(_LiveModel):
    passive: AbilityInfo = Field(alias="Passive")
    q: AbilityInfo = Field(alias="Q")
    w: AbilityInfo = Field(alias="W")
    e: AbilityInfo = Field(alias="E")
    r: AbilityInfo = Field(alias="R")


class SummonerSpell(_LiveModel):
    display_name: StrictStr
    raw_description: StrictStr
    raw_display_name: StrictStr


class SummonerSpells(_LiveModel):
    summoner_spell_one: SummonerSpell
    summoner_spell_two: SummonerSpell


class RuneType(_LiveModel):
    name: StrictStr = Field(alias="displayName")
    id: StrictInt
    description: StrictStr = Field(alias="rawDescription")


class Runes(_LiveModel):
    keystone: RuneType
    primary_rune_tree: RuneType
    secondary_rune_tree: RuneType


class Score(_LiveModel):
    assists: StrictInt
    deaths: StrictInt
    kills: StrictInt
    creep_score: StrictInt
    ward_score: float


class ChampionStats(_LiveModel):
    """Combat attributes of the active player.

    Penetration comes in pairs: a flat amount (lethality) and a "percent" that
    is really the fraction of resistance left after reduction (1.0 = none).
    Both halves are kept; see ``stats.effective_resist``.
    """

    ability_haste: float
    ability_power: float
    armor: float
    lethality: float = Field(alias="armorPenetrationFlat")
    armor_pen: float = Field(alias="armorPenetrationPercent")
    attack_damage: float
    attack_range: float
    attack_speed: float
    bonus_armor_pen: float = Field(alias="bonusArmorPenetrationPercent")
    bonus_magic_pen: float = Field(alias="bonusMagicPenetrationPercent")
    crit_chance: float
    crit_damage: float
    current_health: float
    heal_shield_power: float
    health_regen_rate: float
    life_steal: float
    magic_lethality: float
    magic_pen: float = Field(alias="magicPenetrationFlat")
    magic_pen_percent: float = Field(alias="magicPenetrationPercent")
    magic_resist: float
    max_health: float
    move_speed: float
    omnivamp: float
    physical_lethality: float
    physical_vamp: float
    resource_max: float
    resource_regen_rate: float
    resource_type: StrictStr
    resource_value: float
    spell_vamp: float
    tenacity: float


class Player(_LiveModel):
    champion_name: StrictStr
    is_bot: StrictBool
    is_dead: StrictBool
    level: StrictInt
    position: StrictStr
    respawn_timer: float
    riot_id: StrictStr
    team: StrictStr
    items: Tuple[Item, ...] = ()
    runes: Runes
    scores: Score
    spells: SummonerSpells = Field(alias="summonerSpells")
    # the player list does not carry abilities; filled in by enrichment only
    abilities: Optional[Abilities] = None


class ActivePlayer(_LiveModel):
    riot_id: StrictStr
    champion_stats: ChampionStats
    level: StrictInt
    team_relative_colors: StrictBool
    current_gold: float
    abilities: Optional[Abilities] = None


class GameInfo(_LiveModel):
    """One poll cycle worth of game state (``/allgamedata``)."""

    active_player: ActivePlayer
    all_players: Tuple[Player, ...]
    events: EventList
    game_data: GameData

    def find_active_player(self) -> Optional[Player]:
        """Scoreboard entry of the local player, or None if it is not listed this cycle."""
        riot_id = self.active_player.riot_id
        for player in self.all_players:
            if player.riot_id == riot_id:
                return player
        return None
