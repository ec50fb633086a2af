"""
entity_types.py
---------------
String labels carried by every entity. They show up in logs and repr
output; collision checks are explicit per pair and do not read them.
"""


class EntityCategory:
    PLAYER = "player"
    RIVAL = "rival"
    PICKUP = "pickup"
    ZONE = "zone"
    NONE = "none"


class CollisionTags:
    NEUTRAL = "neutral"
    PLAYER = "player"
    RIVAL = "rival"
    PICKUP = "pickup"
    ZONE = "zone"
