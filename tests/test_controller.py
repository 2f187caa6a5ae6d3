import pytest

from pppgame.controller import InputMode, PlayerController
from pppgame.defines import World
from pppgame.widgets import GameOverWidget, MainMenuWidget, PauseMenuWidget


def _controller(level="BasicMap", **kwargs):
    world = World(level=level)
    controller = PlayerController(
        world,
        main_menu_widget_class=MainMenuWidget,
        pause_menu_widget_class=PauseMenuWidget,
        game_over_widget_class=GameOverWidget,
        **kwargs,
    )
    return world, controller


def test_controller_registers_itself_with_world():
    world, controller = _controller()
    assert world.player_controller is controller


def test_unknown_action_is_rejected():
    with pytest.raises(TypeError):
        PlayerController(World(), teleport_action="x")


def test_begin_play_registers_mapping_contexts():
    imc, pause_imc = object(), object()
    _, controller = _controller(input_mapping_context=imc, pause_menu_imc=pause_imc)
    controller.begin_play()
    contexts = [ctx for ctx, _ in controller.mapping_contexts]
    assert contexts == [imc, pause_imc]
    assert controller.input_enabled is True


def test_begin_play_on_menu_level_shows_main_menu():
    _, controller = _controller(level="MainMenuLevel")
    controller.begin_play()
    menu = controller.main_menu_widget_instance
    assert isinstance(menu, MainMenuWidget)
    assert menu.in_viewport is True
    assert controller.input_mode is InputMode.UI_ONLY
    assert controller.show_mouse_cursor is True


def test_begin_play_elsewhere_shows_no_menu():
    _, controller = _controller(level="BasicMap")
    controller.begin_play()
    assert controller.main_menu_widget_instance is None


def test_show_main_menu_replaces_previous_instance():
    _, controller = _controller()
    first = controller.show_main_menu(False)
    second = controller.show_main_menu(True)
    assert first is not second
    assert first.in_viewport is False
    assert second.in_viewport is True


def test_start_button_loads_game_level_after_delay():
    world, controller = _controller(level="MainMenuLevel")
    controller.begin_play()
    controller.main_menu_widget_instance.widget_from_name("Start_BTN").click()
    assert controller.input_mode is InputMode.GAME_ONLY
    assert controller.show_mouse_cursor is False
    assert world.level == "MainMenuLevel"
    world.advance(0.3)
    assert world.level == "BasicMap"


def test_quit_game_plays_sound_and_quits_later():
    sound = object()
    world, controller = _controller(quit_sound=sound)
    controller.quit_game()
    assert controller.played_sounds == [sound]
    world.advance(0.5)
    assert world.quit_requested is False
    world.advance(0.5)
    assert world.quit_requested is True


def test_quit_game_without_world_does_nothing():
    controller = PlayerController(quit_sound=object())
    controller.quit_game()
    assert controller.played_sounds == []


def test_show_pause_menu_pauses_and_focuses():
    _, controller = _controller()
    menu = controller.show_pause_menu()
    assert controller.paused is True
    assert controller.input_mode is InputMode.GAME_AND_UI
    assert controller.focused_widget is menu
    assert menu.is_focusable is False
    assert controller.lock_mouse_to_viewport is False


def test_pause_binding_opens_pause_menu():
    action = object()
    _, controller = _controller(pause_menu_action=action)
    controller.begin_play()
    controller.bindings[action]()
    assert isinstance(controller.pause_menu_widget_instance, PauseMenuWidget)
    assert controller.paused is True


def test_handle_pause_key_twice_replaces_menu():
    _, controller = _controller()
    controller.handle_pause_key()
    first = controller.pause_menu_widget_instance
    controller.handle_pause_key()
    assert controller.pause_menu_widget_instance is not first
    assert first.in_viewport is False


def test_show_game_over_only_once():
    _, controller = _controller()
    first = controller.show_game_over()
    second = controller.show_game_over()
    assert first is second
    assert controller.paused is True
    assert controller.input_mode is InputMode.UI_ONLY


def test_on_character_dead_shows_game_over():
    _, controller = _controller()
    controller.on_character_dead()
    assert isinstance(controller.game_over_widget_instance, GameOverWidget)
    assert controller.game_over_widget_instance.in_viewport is True
    assert controller.paused is True


def test_without_widget_classes_nothing_is_shown():
    controller = PlayerController(World())
    controller.show_game_over()
    controller.on_character_dead()
    assert controller.game_over_widget_instance is None
    assert controller.paused is False