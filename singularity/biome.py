"""Routing from deployment environment to downstream function names."""

from enum import Enum


class Biome(str, Enum):
    """Logical deployment groups that host the downstream gates."""

    STAGING = "biome-staging"
    KRUSH = "biome-krush"


class GateRole(str, Enum):
    """Role of the function a gateway forwards to."""

    JUMPGATE = "jumpgate"
    WARPGATE = "warpgate"


STAGING_ENVS = frozenset({"dev", "test"})


def resolve_biome(env: str | None) -> Biome:
    """Map an environment identifier to its biome; unknown tiers fall to krush."""
    if env in STAGING_ENVS:
        return Biome.STAGING
    # TODO: add the supercollider biome once that tier has its own ENV value
    return Biome.KRUSH


def target_function_name(env: str | None, role: GateRole) -> str:
    return f"{resolve_biome(env).value}-{role.value}"
