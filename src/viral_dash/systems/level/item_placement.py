"""
item_placement.py
-----------------
Rejection-sampling placement of collectibles.

Each collectible gets up to `max_attempts` uniform candidates inside the
playable band. A candidate is rejected when it lands in a HUD exclusion
rectangle or too close to the player spawn, the target zone or a live
rival's spawn. Collectibles that never find a spot are left out; the
shortfall is reported, not raised.
"""

import random

from viral_dash.core.debug.debug_logger import DebugLogger
from viral_dash.core.results import PlacementReport
from viral_dash.entities.items.collectible import Collectible
from viral_dash.systems.collision.collision_shapes import distance


DEFAULT_PLACEMENT = {
    "max_attempts": 100,
    "top_margin": 40,
    "bottom_margin": 50,
    "bottom_margin_narrow": 150,
    "narrow_breakpoint": 768,
    "zone_clearance": 1.5,
}


def is_narrow(width, cfg=None) -> bool:
    cfg = {**DEFAULT_PLACEMENT, **(cfg or {})}
    return width <= cfg["narrow_breakpoint"]


def exclusion_zones(width, height, narrow=False):
    """
    HUD rectangles (x, y, w, h) that collectibles must avoid.

    Narrow canvases add a full-width band at the bottom for the
    on-screen joystick.
    """
    zones = [
        (0, 0, width * 0.3, 50),
        (width * 0.7, 0, width * 0.3, 100),
    ]
    if narrow:
        zones.append((0, height - 150, width, 150))
    zones.append((width * 0.7, height - 100, width * 0.3, 100))
    return zones


def _in_zone(x, y, zone) -> bool:
    zx, zy, zw, zh = zone
    return zx <= x <= zx + zw and zy <= y <= zy + zh


def generate_collectibles(count, canvas_size, player_spawn, player_half_width,
                          rivals, zone, item_cfg=None, cfg=None, rng=None) -> PlacementReport:
    """
    Place up to `count` collectibles.

    Args:
        count: Requested number of collectibles
        canvas_size: (width, height)
        player_spawn: Player spawn center
        player_half_width: Half the player's width
        rivals: Rivals whose spawn points are kept clear (destroyed ones ignored)
        zone: TargetZone to keep clear
        item_cfg: "collectible" section of game.json
        cfg: "placement" section of game.json
        rng: Random source

    Returns:
        PlacementReport with the placed collectibles
    """
    cfg = {**DEFAULT_PLACEMENT, **(cfg or {})}
    item_cfg = item_cfg or {}
    rng = rng or random

    width, height = canvas_size
    radius = item_cfg.get("radius", 10)
    item_size = (item_cfg.get("width", 15), item_cfg.get("height", 10))
    color = item_cfg.get("color", (0, 255, 160))

    narrow = is_narrow(width, cfg)
    zones = exclusion_zones(width, height, narrow)
    top = cfg["top_margin"]
    bottom = cfg["bottom_margin_narrow"] if narrow else cfg["bottom_margin"]

    min_player = 2 * player_half_width
    min_zone = cfg["zone_clearance"] * zone.radius
    live_rivals = [r for r in rivals if not r.destroyed]

    report = PlacementReport(requested=count)

    for _ in range(count):
        for _attempt in range(cfg["max_attempts"]):
            report.attempts += 1
            x = radius + rng.random() * (width - radius * 2)
            y = top + rng.random() * (height - top - bottom)

            if any(_in_zone(x, y, z) for z in zones):
                continue
            if distance((x, y), player_spawn) < min_player:
                continue
            if distance((x, y), zone.pos) < min_zone:
                continue
            if any(distance((x, y), r.spawn) < 2 * r.half_width for r in live_rivals):
                continue

            report.collectibles.append(Collectible(x, y, radius=radius, size=item_size, color=color))
            break

    DebugLogger.state(
        f"Placed {report.placed}/{count} collectibles in {report.attempts} attempts",
        category="placement",
    )
    return report
