"""The player character: movement, cameras, weapons and health."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional

from .defines import Event
from .weapons import EquipWeapon, Rotator, Vector, WeaponRow

_log = logging.getLogger(__name__)

_SMALL_NUMBER = 1e-8
_LOOK_RATE = 100.0
_TPS_PITCH_LIMITS = (-60.0, 80.0)
_FPS_PITCH_LIMITS = (-40.0, 40.0)
ZOOMED_FIELD_OF_VIEW = 45.0
DEFAULT_FIELD_OF_VIEW = 90.0


def _nearly_zero(value: float) -> bool:
    return abs(value) <= _SMALL_NUMBER


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


@dataclass
class _SpringArm:
    """A camera boom attached to a socket of the character mesh."""

    socket: str
    target_arm_length: float
    socket_offset: Vector = (0.0, 0.0, 0.0)
    use_pawn_control_rotation: bool = True
    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0


@dataclass
class _Camera:
    """A camera at the end of a spring arm."""

    relative_rotation: Rotator = (0.0, 0.0, 0.0)
    field_of_view: float = DEFAULT_FIELD_OF_VIEW
    active: bool = True


class PppCharacter:
    """The playable character with third- and first-person cameras."""

    def __init__(self, controller: Any = None) -> None:
        self.spring_arm: Optional[_SpringArm] = _SpringArm(
            socket="Neck", target_arm_length=135.0, socket_offset=(0.0, 40.0, 0.0)
        )
        self.tps_camera = _Camera()
        self.fps_spring_arm: Optional[_SpringArm] = _SpringArm(
            socket="Head", target_arm_length=-20.0
        )
        self.fps_camera: Optional[_Camera] = _Camera(relative_rotation=(0.0, 0.0, 90.0))

        self.capsule_radius = 42.0
        self.capsule_half_height = 96.0
        self.mesh_relative_location: Vector = (0.0, 0.0, -90.0)
        self.mesh_relative_rotation: Rotator = (0.0, -90.0, 0.0)

        self.normal_speed = 250.0
        self.sprint_speed_multiplier = 4.0
        self.sprint_speed = self.normal_speed * self.sprint_speed_multiplier
        self.crouch_movement_speed = self.normal_speed / 50.0
        self.max_walk_speed = self.normal_speed

        self.max_health = 100.0
        self.current_health = self.max_health
        self.current_weapon_index = 0
        self.attack_damage = 0

        self.is_crouched = False
        self.crouch_key_pressed = False
        self.wants_to_crouch = False
        self.is_camera_changed = False
        self.is_zoomed = False
        self.is_jumping = False

        self.overlapping_pick_up_actor: Any = None
        self.equipped_weapon: Optional[EquipWeapon] = None

        self.on_weapon_changed = Event()
        self.on_ammo_changed = Event()
        self.on_character_dead = Event()

        self.controller = controller
        self.world: Any = None
        self.destroyed = False
        self.location: Vector = (0.0, 0.0, 0.0)
        self.rotation: Rotator = (0.0, 0.0, 0.0)
        self.control_yaw = 0.0
        self.control_pitch = 0.0
        self.pending_movement: Vector = (0.0, 0.0, 0.0)

    # -- basics -----------------------------------------------------------

    @property
    def health(self) -> float:
        """Current health."""
        return self.current_health

    @property
    def can_jump(self) -> bool:
        """Whether a jump may start now."""
        return not self.is_crouched and not self.is_jumping

    @property
    def forward_vector(self) -> Vector:
        yaw = math.radians(self.rotation[1])
        return (math.cos(yaw), math.sin(yaw), 0.0)

    @property
    def right_vector(self) -> Vector:
        yaw = math.radians(self.rotation[1])
        return (-math.sin(yaw), math.cos(yaw), 0.0)

    def _delta_seconds(self) -> float:
        return getattr(self.world, "delta_seconds", 0.0) if self.world is not None else 0.0

    def _add_movement_input(self, direction: Vector, scale: float) -> None:
        self.pending_movement = tuple(
            p + d * scale for p, d in zip(self.pending_movement, direction)
        )

    def begin_play(self) -> None:
        """Start play by switching to the first-person camera."""
        self.toggle_camera()

    # -- input ------------------------------------------------------------

    def move(self, value: tuple[float, float]) -> None:
        """Walk forward/back by ``value[0]`` and sideways by ``value[1]``."""
        if self.controller is None:
            return
        x, y = value
        if self.crouch_key_pressed and not self.is_crouched:
            return
        if not _nearly_zero(x):
            self._add_movement_input(self.forward_vector, x)
        if not _nearly_zero(y):
            self._add_movement_input(self.right_vector, y)

    def start_jump(self, value: Any = True) -> None:
        """Jump unless crouched."""
        if self.is_crouched:
            return
        if self.can_jump:
            self.is_jumping = True
            _log.warning("Jump")

    def stop_jump(self, value: Any = False) -> None:
        """Stop jumping when the button is released."""
        if not value:
            self.is_jumping = False

    def start_sprint(self, value: Any = True) -> None:
        """Switch to sprint speed unless crouched."""
        if self.is_crouched:
            return
        self.max_walk_speed = self.sprint_speed
        _log.warning("Fast : %f", self.max_walk_speed)

    def stop_sprint(self, value: Any = False) -> None:
        """Return to normal walking speed."""
        self.max_walk_speed = self.normal_speed
        _log.warning("Slow : %f", self.max_walk_speed)

    def zoom_in(self, value: Any) -> None:
        """Narrow the first-person field of view."""
        if not value:
            if self.fps_camera is not None:
                self.fps_camera.field_of_view = ZOOMED_FIELD_OF_VIEW
            _log.warning("Zoom In")
            self.is_zoomed = True

    def zoom_out(self, value: Any) -> None:
        """Restore the first-person field of view."""
        if value:
            if self.fps_camera is not None:
                self.fps_camera.field_of_view = DEFAULT_FIELD_OF_VIEW
            _log.warning("Zoom Out")
            self.is_zoomed = False

    def look(self, value: tuple[float, float]) -> None:
        """Turn the view by a mouse delta ``(yaw, pitch)``."""
        x, y = value
        if self.controller is not None:
            self.control_yaw += x
            self.control_pitch += y

        if self.spring_arm is None and self.fps_spring_arm is None:
            return

        delta = self._delta_seconds()
        if self.spring_arm is not None:
            arm, limits = self.spring_arm, _TPS_PITCH_LIMITS
        else:
            arm, limits = self.fps_spring_arm, _FPS_PITCH_LIMITS
        if not _nearly_zero(y):
            arm.pitch = _clamp(arm.pitch - y * delta * _LOOK_RATE, *limits)

        if not _nearly_zero(x):
            pitch, yaw, roll = self.rotation
            self.rotation = (pitch, yaw + x * delta * _LOOK_RATE, roll)

    def on_crouch_pressed(self, value: Any = True) -> None:
        """Remember that the crouch key is held."""
        self.crouch_key_pressed = True
        _log.warning("Crouch Button Pressed")

    def on_crouch_released(self, value: Any = False) -> None:
        """Toggle crouching when the crouch key is released."""
        self.crouch_key_pressed = False
        if not self.is_crouched:
            self.wants_to_crouch = True
            self.is_crouched = True
            self.max_walk_speed = self.crouch_movement_speed
        else:
            self.wants_to_crouch = False
            self.is_crouched = False
            self.max_walk_speed = self.normal_speed
        _log.warning("CrouchEnd")

    def begin_crouch(self, value: Any = True) -> None:
        """Ask the movement system to crouch."""
        self.wants_to_crouch = True

    def end_crouch(self, value: Any = False) -> None:
        """Ask the movement system to stand up."""
        self.wants_to_crouch = False

    def toggle_camera(self) -> None:
        """Switch between first- and third-person view."""
        self.is_camera_changed = not self.is_camera_changed
        if self.fps_camera is not None:
            self.fps_camera.active = self.is_camera_changed
        self.tps_camera.active = not self.is_camera_changed

    # -- weapons ----------------------------------------------------------

    def set_equipped_weapon(self, weapon: Optional[EquipWeapon]) -> None:
        """Equip ``weapon`` (or nothing), rewiring ammo notifications."""
        if self.equipped_weapon is weapon:
            return
        if self.equipped_weapon is not None:
            self.equipped_weapon.on_ammo_changed.unsubscribe(self._on_weapon_ammo_changed)

        self.equipped_weapon = weapon
        self.on_weapon_changed.emit(weapon)

        if weapon is not None:
            weapon.on_ammo_changed.subscribe(self._on_weapon_ammo_changed)
            self._on_weapon_ammo_changed(weapon.current_ammo_in_mag, weapon.reserve_ammo)
        else:
            self._on_weapon_ammo_changed(0, 0)

    def on_interact(self) -> bool:
        """Try to pick up the overlapped weapon; return whether one was there."""
        actor = self.overlapping_pick_up_actor
        component = getattr(actor, "pick_up_comp", None) if actor is not None else None
        if component is None:
            _log.warning("Interact pressed but no weapon overlapped")
            return False
        component.try_pick_up(self)
        return True

    def fire(self) -> bool:
        """Fire the equipped weapon; return whether a shot was made."""
        if self.equipped_weapon is None:
            _log.warning("No weapon equipped!")
            return False
        return bool(self.equipped_weapon.fire())

    def drop_weapon_to_world(
        self, row: WeaponRow, location: Vector, rotation: Rotator
    ) -> Any:
        """Spawn the pick-up version of ``row`` at the given place; return it."""
        if row.pick_up_weapon is None:
            return None
        pick_up = row.pick_up_weapon()
        pick_up.location = location
        pick_up.rotation = rotation
        if self.world is not None:
            self.world.spawn(pick_up)
        return pick_up

    def _on_weapon_ammo_changed(self, in_mag: int, reserve: int) -> None:
        self.on_ammo_changed.emit(in_mag, reserve)
        _log.warning("Ammo changed: magazine %d, reserve %d", in_mag, reserve)

    # -- health -----------------------------------------------------------

    def add_health(self, amount: float) -> None:
        """Heal (or hurt) by ``amount``, kept within ``0..max_health``."""
        self.current_health = _clamp(self.current_health + amount, 0.0, self.max_health)

    def take_damage(self, amount: float) -> float:
        """Lose health; die when it reaches zero. Return the damage dealt."""
        self.current_health = _clamp(self.current_health - amount, 0.0, self.max_health)
        if self.current_health <= 0.0:
            self.on_death()
        return amount

    def on_death(self) -> None:
        """Announce the character's death when a game is running."""
        world = self.world
        if world is not None and getattr(world, "game_state", None) is not None:
            self.on_character_dead.emit()
            _log.warning("You Died!")