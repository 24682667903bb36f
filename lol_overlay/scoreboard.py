"""Tabular views of a snapshot: per-player scoreboard, team totals, event log."""

from typing import Optional

import numpy as np
import pandas as pd

from .schemas import GameInfo

SCOREBOARD_COLUMNS = [
    "riot_id","champion_name","team","position","level","is_bot",
    "kills","deaths","assists","kda","creep_score","cs_per_min","ward_score",
    "item_gold","item_count","is_dead","respawn_timer","is_active",
]

TEAM_SUM_COLUMNS = ["kills","deaths","assists","creep_score","ward_score","item_gold"]

EVENT_COLUMNS = ["event_id","event_name","event_time"]


def scoreboard_frame(info: GameInfo) -> pd.DataFrame:
    minutes = info.game_data.game_time / 60.0
    me = info.active_player.riot_id
    rows = []
    for p in info.all_players:
        sc = p.scores
        rows.append(dict(
            riot_id=p.riot_id, champion_name=p.champion_name, team=p.team, position=p.position,
            level=p.level, is_bot=p.is_bot,
            kills=sc.kills, deaths=sc.deaths, assists=sc.assists,
            kda=(sc.kills + sc.assists) / max(1, sc.deaths),
            creep_score=sc.creep_score,
            cs_per_min=sc.creep_score / minutes if minutes > 0 else np.nan,
            ward_score=sc.ward_score,
            item_gold=float(sum(it.price for it in p.items)), item_count=len(p.items),
            is_dead=p.is_dead, respawn_timer=p.respawn_timer,
            is_active=p.riot_id == me,
        ))
    return pd.DataFrame(rows, columns=SCOREBOARD_COLUMNS)


def team_summary(frame: pd.DataFrame) -> pd.DataFrame:
    """Per-team sums plus players alive; indexed by team name."""
    if frame.empty:
        return pd.DataFrame(columns=TEAM_SUM_COLUMNS + ["alive"])
    grp = frame.groupby("team", sort=True)
    out = grp[TEAM_SUM_COLUMNS].sum()
    out["alive"] = grp["is_dead"].apply(lambda s: int((~s.astype(bool)).sum()))
    return out


def gold_diff(frame: pd.DataFrame, team: str) -> Optional[float]:
    """Item gold of ``team`` minus the other teams combined; None if the team is absent."""
    if frame.empty or team not in set(frame["team"]):
        return None
    mine = frame.loc[frame["team"] == team, "item_gold"].sum()
    theirs = frame.loc[frame["team"] != team, "item_gold"].sum()
    return float(mine - theirs)


def events_frame(info: GameInfo) -> pd.DataFrame:
    rows = [dict(event_id=e.event_id, event_name=e.event_name, event_time=e.event_time)
            for e in info.events.events]
    df = pd.DataFrame(rows, columns=EVENT_COLUMNS)
    if not df.empty:
        df = df.sort_values("event_time", kind="stable").reset_index(drop=True)
    return df
