from pppgame.defines import World
from pppgame.pickup import PickUpComponent, PickUpWeapon
from pppgame.weapons import EquipWeapon, WeaponRow


class FakeCharacter:
    def __init__(self, world=None):
        self.world = world
        self.overlapping_pick_up_actor = None
        self.equipped_weapon = None
        self.dropped = []
        self.controller = None

    def drop_weapon_to_world(self, row, location, rotation):
        self.dropped.append((row, location, rotation))

    def set_equipped_weapon(self, weapon):
        self.equipped_weapon = weapon


def _rifle_row(**extra):
    values = dict(
        weapon_name="Rifle",
        magazine_size=30,
        reserve_ammo=90,
        damage=12.0,
        equip_weapon=EquipWeapon,
    )
    values.update(extra)
    return WeaponRow(**values)


def test_try_pick_up_broadcasts_character():
    comp = PickUpComponent()
    seen = []
    comp.weapon_pick_up.subscribe(seen.append)
    character = FakeCharacter()
    comp.try_pick_up(character)
    assert seen == [character]


def test_begin_overlap_links_character_and_weapon():
    pickup = PickUpWeapon(row=_rifle_row())
    character = FakeCharacter()
    pickup.pick_up_comp.on_begin_overlap(character)
    assert character.overlapping_pick_up_actor is pickup
    assert pickup.overlapping_character is character


def test_begin_overlap_ignores_non_characters():
    pickup = PickUpWeapon()
    pickup.pick_up_comp.on_begin_overlap(object())
    assert pickup.overlapping_character is None


def test_begin_overlap_needs_weapon_owner():
    comp = PickUpComponent(owner=object())
    character = FakeCharacter()
    comp.on_begin_overlap(character)
    assert character.overlapping_pick_up_actor is None


def test_end_overlap_clears_only_matching_weapon():
    first = PickUpWeapon()
    second = PickUpWeapon()
    character = FakeCharacter()
    first.pick_up_comp.on_begin_overlap(character)
    second.pick_up_comp.on_end_overlap(character)
    assert character.overlapping_pick_up_actor is first
    first.pick_up_comp.on_end_overlap(character)
    assert character.overlapping_pick_up_actor is None


def test_begin_play_loads_row_copy_from_table():
    table_row = _rifle_row()
    pickup = PickUpWeapon(data_table={"Rifle": table_row}, row_name="Rifle")
    World().spawn(pickup)
    assert pickup.row == table_row
    assert pickup.row is not table_row


def test_begin_play_missing_row_keeps_default():
    pickup = PickUpWeapon(data_table={"Rifle": _rifle_row()}, row_name="Pistol")
    pickup.begin_play()
    assert pickup.row == WeaponRow()


def test_pick_up_equips_new_weapon_and_removes_pickup():
    world = World()
    character = FakeCharacter(world)
    pickup = world.spawn(PickUpWeapon(row=_rifle_row()))
    pickup.pick_up_comp.on_begin_overlap(character)

    pickup.pick_up_comp.try_pick_up(character)

    weapon = character.equipped_weapon
    assert isinstance(weapon, EquipWeapon)
    assert weapon.owner is character
    assert weapon.current_ammo_in_mag == 30
    assert weapon.reserve_ammo == 90
    assert weapon.attached_to is character
    assert pickup.destroyed is True
    assert pickup not in world.actors
    assert weapon in world.actors
    assert character.overlapping_pick_up_actor is None
    assert character.dropped == []


def test_pick_up_drops_previous_weapon():
    world = World()
    character = FakeCharacter(world)
    old_row = _rifle_row(weapon_name="Pistol", magazine_size=8)
    old = world.spawn(EquipWeapon())
    old.on_equipped(character, old_row)
    old.location = (1.0, 2.0, 3.0)
    character.equipped_weapon = old

    pickup = world.spawn(PickUpWeapon(row=_rifle_row()))
    new_weapon = pickup.handle_pick_up(character)

    assert character.dropped == [(old_row, (1.0, 2.0, 3.0), old.rotation)]
    assert old.destroyed is True
    assert old not in world.actors
    assert character.equipped_weapon is new_weapon
    assert new_weapon.weapon_name == "Rifle"


def test_pick_up_without_equip_class_still_consumes_pickup():
    character = FakeCharacter()
    pickup = PickUpWeapon(row=WeaponRow(weapon_name="Empty"))
    assert pickup.handle_pick_up(character) is None
    assert character.equipped_weapon is None
    assert pickup.destroyed is True


def test_pick_up_with_no_character_does_nothing():
    pickup = PickUpWeapon(row=_rifle_row())
    assert pickup.handle_pick_up(None) is None
    assert pickup.destroyed is False