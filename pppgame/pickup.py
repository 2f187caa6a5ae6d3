"""Weapon pick-ups lying in the world and the zone that detects players."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Mapping, Optional

from .defines import Event
from .weapons import EquipWeapon, WeaponRow

_log = logging.getLogger(__name__)


def _is_character(actor: Any) -> bool:
    return actor is not None and hasattr(actor, "overlapping_pick_up_actor")


def _destroy(actor: Any) -> None:
    world = getattr(actor, "world", None)
    if world is None or not world.destroy(actor):
        actor.destroyed = True


class PickUpComponent:
    """Overlap zone around a pick-up that notices characters and relays pick-ups."""

    def __init__(self, owner: Any = None) -> None:
        self.owner = owner
        self.weapon_pick_up = Event()

    def on_begin_overlap(self, other: Any) -> None:
        """Link an entering character and the owning weapon to each other."""
        weapon = self.owner
        if _is_character(other) and isinstance(weapon, PickUpWeapon):
            _log.warning("PickUpComponent: overlap detected")
            weapon.overlapping_character = other
            other.overlapping_pick_up_actor = weapon

    def on_end_overlap(self, other: Any) -> None:
        """Forget the link when the character that held it leaves."""
        weapon = self.owner
        if _is_character(other) and isinstance(weapon, PickUpWeapon):
            if other.overlapping_pick_up_actor is weapon:
                other.overlapping_pick_up_actor = None

    def try_pick_up(self, character: Any) -> None:
        """Announce that ``character`` wants to pick this weapon up."""
        self.weapon_pick_up.emit(character)


class PickUpWeapon:
    """A weapon lying in the world that a character can pick up and equip."""

    def __init__(
        self,
        *,
        data_table: Optional[Mapping[str, WeaponRow]] = None,
        row_name: Optional[str] = None,
        row: Optional[WeaponRow] = None,
        location: Any = (0.0, 0.0, 0.0),
        rotation: Any = (0.0, 0.0, 0.0),
    ) -> None:
        self.pick_up_comp = PickUpComponent(self)
        self.data_table = data_table
        self.row_name = row_name
        self.row = row if row is not None else WeaponRow()
        self.overlapping_character: Any = None
        self.location = location
        self.rotation = rotation
        self.world: Any = None
        self.destroyed = False

    def begin_play(self) -> None:
        """Load the weapon row from the data table and listen for pick-ups."""
        if self.data_table is not None and self.row_name:
            loaded = self.data_table.get(self.row_name)
            if loaded is not None:
                self.row = dataclasses.replace(loaded)
            else:
                _log.error("Row %r not found in the weapon data table", self.row_name)
        else:
            _log.error("Weapon data table or row name is not set")

        self.pick_up_comp.weapon_pick_up.subscribe(self.handle_pick_up)

    def handle_pick_up(self, character: Any) -> Optional[EquipWeapon]:
        """Swap the character's weapon for this one; return the newly equipped weapon."""
        if character is None:
            return None

        previous = getattr(character, "equipped_weapon", None)
        if previous is not None:
            character.drop_weapon_to_world(
                previous.row, previous.location, previous.rotation
            )
            _destroy(previous)

        new_weapon: Optional[EquipWeapon] = None
        weapon_class = self.row.equip_weapon
        if weapon_class is not None:
            _log.warning("Spawning equipped weapon: %s", weapon_class.__name__)
            new_weapon = weapon_class()
            new_weapon.owner = character
            world = getattr(character, "world", None)
            if world is not None:
                world.spawn(new_weapon)
            new_weapon.on_equipped(character, self.row)
            character.set_equipped_weapon(new_weapon)
        else:
            _log.error("The weapon row has no equip weapon class")

        _destroy(self)
        character.overlapping_pick_up_actor = None
        return new_weapon