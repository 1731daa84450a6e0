"""String helpers: zero padding and zombie mesh asset paths."""

from __future__ import annotations

import random
from typing import Optional, Union

from outbreak.defines import CharacterBodyType, enum_to_string


def pad_left(source: str, total_length: int, pad_char: str) -> str:
    """Prefix ``source`` with ``pad_char`` once per missing character."""
    if len(source) >= total_length:
        return source
    return pad_char * (total_length - len(source)) + source


def to_padded_string(number: int, total_digits: int) -> str:
    """Write ``number`` with leading zeros up to ``total_digits`` characters."""
    return pad_left(str(number), total_digits, "0")


def zombie_mesh_type_to_string(body_type: CharacterBodyType) -> str:
    """Return the mesh-type name of a body type."""
    return enum_to_string(body_type)


def zombie_mesh_path(
    base_mesh_ref: str,
    base_mesh_asset_name: str,
    mesh_type: Union[str, CharacterBodyType],
    mesh_index: int,
) -> str:
    """Build the asset path of one numbered zombie mesh."""
    if isinstance(mesh_type, CharacterBodyType):
        mesh_type = zombie_mesh_type_to_string(mesh_type)
    asset_name = f"{base_mesh_asset_name}_{mesh_type}_{to_padded_string(mesh_index, 3)}"
    return f"{base_mesh_ref}/{asset_name}.{asset_name}'"


def random_zombie_mesh_path(
    base_mesh_ref: str,
    base_mesh_asset_name: str,
    mesh_type: Union[str, CharacterBodyType],
    mesh_count: int,
    rng: Optional[random.Random] = None,
) -> str:
    """Pick one of ``mesh_count`` meshes (numbered from 1) at random."""
    if mesh_count < 1:
        raise ValueError("mesh_count must be at least 1")
    chooser = rng if rng is not None else random
    index = chooser.randint(1, mesh_count)
    return zombie_mesh_path(base_mesh_ref, base_mesh_asset_name, mesh_type, index)