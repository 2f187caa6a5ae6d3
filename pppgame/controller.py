"""The player controller: input mapping, menus, pausing, starting and quitting."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional

from .defines import LOG_UI, World

MAIN_MENU_LEVEL = "MainMenuLevel"
GAME_LEVEL = "BasicMap"
START_DELAY = 0.3
QUIT_DELAY = 1.0

ACTION_NAMES = (
    "move_action",
    "jump_action",
    "look_action",
    "zoom_action",
    "sprint_action",
    "crouch_action",
    "pov_change_action",
    "pick_up_action",
    "fire_action",
)


class InputMode(Enum):
    """Where player input is routed."""

    GAME_ONLY = "GameOnly"
    UI_ONLY = "UIOnly"
    GAME_AND_UI = "GameAndUI"


class PlayerController:
    """Owns the input setup and the main, pause and game-over menus."""

    def __init__(
        self,
        world: Optional[World] = None,
        *,
        input_mapping_context: Any = None,
        pause_menu_imc: Any = None,
        pause_menu_action: Any = None,
        main_menu_widget_class: Optional[Callable[[Any], Any]] = None,
        pause_menu_widget_class: Optional[Callable[[Any], Any]] = None,
        game_over_widget_class: Optional[Callable[[Any], Any]] = None,
        quit_sound: Any = None,
        **actions: Any,
    ) -> None:
        unknown = set(actions) - set(ACTION_NAMES)
        if unknown:
            raise TypeError(f"unknown input actions: {', '.join(sorted(unknown))}")
        for name in ACTION_NAMES:
            setattr(self, name, actions.get(name))

        self.input_mapping_context = input_mapping_context
        self.pause_menu_imc = pause_menu_imc
        self.pause_menu_action = pause_menu_action
        self.main_menu_widget_class = main_menu_widget_class
        self.pause_menu_widget_class = pause_menu_widget_class
        self.game_over_widget_class = game_over_widget_class
        self.quit_sound = quit_sound

        self.main_menu_widget_instance: Any = None
        self.pause_menu_widget_instance: Any = None
        self.game_over_widget_instance: Any = None

        self.mapping_contexts: list[tuple[Any, int]] = []
        self.bindings: dict[Any, Callable[[], Any]] = {}
        self.input_enabled = False
        self.input_mode = InputMode.GAME_ONLY
        self.show_mouse_cursor = False
        self.focused_widget: Any = None
        self.lock_mouse_to_viewport = True
        self.paused = False
        self.played_sounds: list[Any] = []
        self.view_direction = (1.0, 0.0, 0.0)
        self.destroyed = False

        self.world = world
        if world is not None:
            world.player_controller = self

    # -- setup ------------------------------------------------------------

    def _add_mapping_context(self, context: Any, priority: int = 0) -> None:
        if all(existing is not context for existing, _ in self.mapping_contexts):
            self.mapping_contexts.append((context, priority))

    def _setup_input_component(self) -> None:
        if self.pause_menu_action is not None:
            self.bindings[self.pause_menu_action] = self.handle_pause_key

    def begin_play(self) -> None:
        """Register input mappings and show the main menu on the menu level."""
        self.input_enabled = True

        if self.input_mapping_context is not None:
            self._add_mapping_context(self.input_mapping_context)
            LOG_UI.warning("Input mapping context registered")
        else:
            LOG_UI.error("Input mapping context is not set")

        if self.pause_menu_imc is not None:
            self._add_mapping_context(self.pause_menu_imc)
            LOG_UI.warning("Pause menu mapping context registered")
        else:
            LOG_UI.error("Pause menu mapping context is not set")

        self._setup_input_component()

        level = self.world.level if self.world is not None else ""
        if MAIN_MENU_LEVEL in level:
            self.show_main_menu(False)

    # -- menus ------------------------------------------------------------

    def _create_widget(self, widget_class: Optional[Callable[[Any], Any]]) -> Any:
        if widget_class is None:
            return None
        return widget_class(self)

    def show_main_menu(self, is_restart: bool) -> Any:
        """Replace any main menu with a fresh one and hand input to the UI."""
        if self.main_menu_widget_instance is not None:
            self.main_menu_widget_instance.remove_from_parent()
            self.main_menu_widget_instance = None

        widget = self._create_widget(self.main_menu_widget_class)
        if widget is None:
            return None
        self.main_menu_widget_instance = widget
        widget.add_to_viewport()
        self.show_mouse_cursor = True
        self.input_mode = InputMode.UI_ONLY

        find = getattr(widget, "widget_from_name", None)
        if callable(find):
            start = find("Start_BTN")
            if start is not None:
                start.on_clicked.subscribe(self.start_game)
            quit_button = find("Quit_BTN")
            if quit_button is not None:
                quit_button.on_clicked.subscribe(self.quit_game)
        return widget

    def show_pause_menu(self) -> Any:
        """Replace any pause menu with a fresh one and pause the game."""
        if self.pause_menu_widget_instance is not None:
            self.pause_menu_widget_instance.remove_from_parent()
            self.pause_menu_widget_instance = None

        widget = self._create_widget(self.pause_menu_widget_class)
        if widget is not None:
            self.pause_menu_widget_instance = widget
            widget.add_to_viewport()
            widget.is_focusable = False
            self.focused_widget = widget
            self.lock_mouse_to_viewport = False
            self.input_mode = InputMode.GAME_AND_UI
            self.show_mouse_cursor = True

        if not self.paused:
            self.paused = True
        return widget

    def show_game_over(self) -> Any:
        """Show the game-over screen once and pause the game."""
        if self.game_over_widget_instance is None:
            widget = self._create_widget(self.game_over_widget_class)
            if widget is not None:
                self.game_over_widget_instance = widget
                widget.add_to_viewport()
                self.input_mode = InputMode.UI_ONLY
                self.show_mouse_cursor = True
                self.paused = True
        return self.game_over_widget_instance

    # -- actions ----------------------------------------------------------

    def start_game(self) -> None:
        """Give input back to the game and load the game level shortly after."""
        self.input_mode = InputMode.GAME_ONLY
        self.show_mouse_cursor = False
        world = self.world
        if world is not None:
            world.set_timer(START_DELAY, lambda: world.open_level(GAME_LEVEL))
        LOG_UI.warning("start_game() called, moving to %s in %.1fs", GAME_LEVEL, START_DELAY)

    def quit_game(self) -> None:
        """Play the quit sound and shut the game down a moment later."""
        world = self.world
        if world is None:
            return
        if self.quit_sound is not None:
            self.played_sounds.append(self.quit_sound)
        world.set_timer(QUIT_DELAY, world.quit)

    def handle_pause_key(self) -> None:
        """React to the pause key."""
        self.show_pause_menu()

    def on_character_dead(self) -> None:
        """Show the game-over screen after the player's death."""
        if self.game_over_widget_class is not None and self.game_over_widget_instance is None:
            widget = self._create_widget(self.game_over_widget_class)
            if widget is not None:
                self.game_over_widget_instance = widget
                widget.add_to_viewport()
                self.input_mode = InputMode.UI_ONLY
                self.show_mouse_cursor = True
                self.paused = True