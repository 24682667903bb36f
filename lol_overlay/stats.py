"""Numbers the overlay shows for the local player, derived from one snapshot."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .schemas import ChampionStats, GameInfo


@dataclass(frozen=True)
class PlayerSummary:
    riot_id: str
    name: str
    champion_name: str
    level: int
    cs_per_min: Optional[float]
    item_gold: float
    total_gold: float
    is_dead: bool
    respawn_timer: float
    stats: ChampionStats


def summarize(info: GameInfo) -> Optional[PlayerSummary]:
    """Join the active player with its scoreboard entry.

    Returns None when the active player is missing from ``all_players`` so
    that nothing is computed from the wrong row.
    """
    player = info.find_active_player()
    if player is None:
        return None
    active = info.active_player
    minutes = info.game_data.game_time / 60.0
    cs_per_min = player.scores.creep_score / minutes if minutes > 0 else None
    item_gold = float(sum(item.price for item in player.items))
    return PlayerSummary(
        riot_id=active.riot_id,
        name=active.riot_id.split("#")[0] or "Unknown",
        champion_name=player.champion_name,
        level=active.level,
        cs_per_min=cs_per_min,
        item_gold=item_gold,
        total_gold=active.current_gold + item_gold,
        is_dead=player.is_dead,
        respawn_timer=player.respawn_timer,
        stats=active.champion_stats,
    )


def effective_resist(resist: float, flat: float, percent_remaining: float) -> float:
    """Resistance left after penetration: percent reduction first, then flat."""
    if resist <= 0:
        return resist
    return max(0.0, resist * percent_remaining - flat)


def armor_penetration_label(stats: ChampionStats) -> str:
    no_flat = stats.physical_lethality == 0.0 or stats.lethality == 0.0
    if no_flat and stats.armor_pen == 1.0:
        return "LDR?"
    return f"{stats.lethality:.0f} | %{100.0 * (1.0 - stats.armor_pen):.2f}"


def magic_penetration_label(stats: ChampionStats) -> str:
    flat = stats.magic_lethality + stats.magic_pen
    if flat == 0.0 and stats.magic_pen_percent == 1.0:
        return "Void?"
    return f"{flat:.0f} | %{100.0 * (1.0 - stats.magic_pen_percent):.2f}"


def respawn_label(summary: PlayerSummary) -> str:
    if summary.is_dead and summary.respawn_timer > 0.0:
        return f"{summary.respawn_timer:.1f}s"
    return "ALIVE"


def overlay_rows(summary: PlayerSummary) -> List[Tuple[str, str]]:
    s = summary.stats
    cs = "-" if summary.cs_per_min is None else f"{summary.cs_per_min:.1f}"
    return [
        ("Attack Damage", f"{s.attack_damage:.0f}"),
        ("Ability Power", f"{s.ability_power:.0f}"),
        ("Armor", f"{s.armor:.0f}"),
        ("Magic Resist", f"{s.magic_resist:.0f}"),
        ("CS/min", cs),
        ("Move Speed", f"{s.move_speed:.0f}"),
        ("Crit Chance", f"{s.crit_chance:.0f}%"),
        ("Lethality", armor_penetration_label(s)),
        ("Mag Pen", magic_penetration_label(s)),
        ("Att. Sp.", f"{s.attack_speed:.2f} atk/s"),
        ("HP Regen", f"{s.health_regen_rate:.1f} hp/s"),
        ("Life Steal", f"{s.life_steal:.0f}%"),
        ("Total Gold", f"{summary.total_gold:.0f}"),
        ("Status", respawn_label(summary)),
    ]
