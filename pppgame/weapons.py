"""Weapon data rows and the weapon a character carries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .defines import Event

Vector = tuple[float, float, float]
Rotator = tuple[float, float, float]

ZERO_VECTOR: Vector = (0.0, 0.0, 0.0)
ZERO_ROTATOR: Rotator = (0.0, 0.0, 0.0)
HAND_SOCKET = "hand_r"

_log = logging.getLogger(__name__)


class WeaponType(Enum):
    """Kind of weapon a data row describes."""

    PISTOL = "Pistol"
    ASSAULT_RIFLE = "Assault_Rifle"
    SHOTGUN = "Shotgun"
    ROCKET_LAUNCHER = "Rocket_Launcher"
    UNARMED = "UnArmed"


class FireMode(Enum):
    """Firing mode, with its display label as value."""

    SINGLE = "Single"
    BURST = "Burst"
    AUTO = "Auto"


@dataclass
class WeaponRow:
    """One row of the weapon data table."""

    weapon_name: str = ""
    weapon_index: int = 0
    weapon_type: WeaponType = WeaponType.PISTOL
    damage: float = 0.0
    magazine_size: int = 0
    reload_time: float = 0.0
    fire_range: float = 0.0
    pick_up_weapon: Optional[type] = None
    equip_weapon: Optional[type] = None
    weapon_offset: Vector = ZERO_VECTOR
    weapon_rotation: Rotator = ZERO_ROTATOR
    reserve_ammo: int = 0


@dataclass
class HitResult:
    """Outcome of a line trace."""

    trace_start: Vector
    trace_end: Vector
    actor: Any = None
    location: Optional[Vector] = None
    component: Optional[str] = None
    blocking_hit: bool = False


class EquipWeapon:
    """A weapon held by a character: fires, reloads, is equipped and dropped."""

    def __init__(
        self,
        *,
        row: Optional[WeaponRow] = None,
        fire_mode: FireMode = FireMode.SINGLE,
        display_name: str = "",
        image: Any = None,
        ammo_image: Any = None,
        fire_anim: Any = None,
        muzzle_location: Optional[Vector] = ZERO_VECTOR,
    ) -> None:
        self.on_weapon_fired = Event()
        self.on_weapon_dropped = Event()
        self.on_ammo_changed = Event()

        self.row = row if row is not None else WeaponRow()
        self.fire_mode = fire_mode
        self.display_name = display_name
        self.image = image
        self.ammo_image = ammo_image
        self.fire_anim = fire_anim
        self.muzzle_location = muzzle_location

        self.damage = self.row.damage
        self.magazine_size = self.row.magazine_size
        self.reload_time = self.row.reload_time
        self.weapon_name = self.row.weapon_name
        self.fire_range = self.row.fire_range
        self.weapon_index = self.row.weapon_index

        self.current_ammo_in_mag = 0
        self.reserve_ammo = 0

        self.owner: Any = None
        self.world: Any = None
        self.destroyed = False
        self.attached_to: Any = None
        self.attach_socket: Optional[str] = None
        self.location: Vector = ZERO_VECTOR
        self.rotation: Rotator = ZERO_ROTATOR
        self.relative_location: Vector = ZERO_VECTOR
        self.relative_rotation: Rotator = ZERO_ROTATOR
        self.simulate_physics = False
        self.gravity_enabled = False
        self.playing_animation: Any = None
        self.last_trace_color: Optional[str] = None

    @property
    def icon(self) -> Any:
        """Image shown for this weapon in the HUD."""
        return self.image

    def fire(self) -> bool:
        """Fire one round toward the view centre; return whether a shot was made."""
        if self.current_ammo_in_mag <= 0:
            _log.warning("Out of ammo")
            return False

        owner = self.owner
        if owner is None:
            return False
        controller = getattr(owner, "controller", None)
        if controller is None:
            return False

        if self.fire_anim is not None:
            self.playing_animation = self.fire_anim

        if self.muzzle_location is None:
            _log.warning("Muzzle socket does not exist")
            return False
        start = self.muzzle_location

        direction = getattr(controller, "view_direction", None)
        if direction is None:
            _log.warning("Could not deproject the screen centre")
            return False

        end = tuple(s + d * self.fire_range for s, d in zip(start, direction))

        world = self.world if self.world is not None else getattr(owner, "world", None)
        tracer = getattr(world, "tracer", None)
        hit = tracer(start, end, {self, owner}) if tracer is not None else None

        color = "red"
        if hit is not None and hit.actor is not None:
            take_damage = getattr(hit.actor, "take_damage", None)
            if callable(take_damage):
                take_damage(self.damage)
                color = "green"
                _log.warning("Hit target took damage")
            else:
                _log.warning("Hit actor cannot take damage")
        else:
            _log.warning("Nothing was hit")
        self.last_trace_color = color

        if hit is None:
            hit = HitResult(trace_start=start, trace_end=end)

        self.current_ammo_in_mag -= 1
        self.on_weapon_fired.emit(hit)
        self.on_ammo_changed.emit(self.current_ammo_in_mag, self.reserve_ammo)
        return True

    def on_equipped(self, owner: Any, row: WeaponRow) -> None:
        """Take stats from ``row``, attach to the owner's hand and fill the magazine."""
        self.damage = row.damage
        self.magazine_size = row.magazine_size
        self.reload_time = row.reload_time
        self.weapon_name = row.weapon_name
        self.fire_range = row.fire_range
        self.row = row
        self.weapon_index = row.weapon_index

        self.attached_to = owner
        self.attach_socket = HAND_SOCKET
        self.relative_location = row.weapon_offset
        self.relative_rotation = row.weapon_rotation
        self.owner = owner
        if self.world is None:
            self.world = getattr(owner, "world", None)

        self.current_ammo_in_mag = self.magazine_size
        self.reserve_ammo = row.reserve_ammo
        self.on_ammo_changed.emit(self.current_ammo_in_mag, self.reserve_ammo)
        _log.warning("Weapon equipped: %s", row.weapon_name)

    def drop(self) -> None:
        """Detach from the owner and let physics take over."""
        self.attached_to = None
        self.attach_socket = None
        self.owner = None
        self.simulate_physics = True
        self.gravity_enabled = True
        self.on_weapon_dropped.emit(self)

    def reload(self) -> bool:
        """Refill the magazine from reserve ammo; return whether anything moved."""
        max_in_mag = self.row.magazine_size
        needed = max_in_mag - self.current_ammo_in_mag
        if self.reserve_ammo <= 0 or needed <= 0:
            _log.warning("No ammo to reload or magazine already full")
            return False

        if self.reserve_ammo < needed:
            self.current_ammo_in_mag += self.reserve_ammo
            self.reserve_ammo = 0
        else:
            self.reserve_ammo -= needed
            self.current_ammo_in_mag = max_in_mag

        if self.on_ammo_changed.is_bound():
            self.on_ammo_changed.emit(self.current_ammo_in_mag, self.reserve_ammo)
        return True