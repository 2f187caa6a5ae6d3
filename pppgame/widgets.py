"""Menu screens: main menu, pause menu and game over."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .defines import LOG_UI, Event

GAME_LEVEL_MENU = "MainMenuLevel"


@dataclass(eq=False)
class Button:
    """A clickable button that announces clicks."""

    name: str
    on_clicked: Event = field(default_factory=Event)

    def click(self) -> None:
        """Press the button."""
        self.on_clicked.emit()


class UserWidget:
    """A screen made of named buttons that can be shown in the viewport."""

    BUTTON_NAMES: tuple[str, ...] = ()

    def __init__(self, owner: Any = None, *, world: Any = None) -> None:
        self.owner = owner
        self._world = world
        self.buttons = {name: Button(name) for name in self.BUTTON_NAMES}
        self.in_viewport = False
        self.is_focusable = True

    @property
    def world(self) -> Any:
        """The world this widget lives in."""
        if self._world is not None:
            return self._world
        return getattr(self.owner, "world", None)

    @property
    def player_controller(self) -> Any:
        """The first player's controller, if any."""
        return getattr(self.world, "player_controller", None)

    def widget_from_name(self, name: str) -> Optional[Button]:
        """The child button called ``name``, or None."""
        return self.buttons.get(name)

    def add_to_viewport(self) -> None:
        """Show the widget and wire up its buttons."""
        self.in_viewport = True
        self.native_construct()

    def remove_from_parent(self) -> None:
        """Hide the widget."""
        self.in_viewport = False

    def native_construct(self) -> None:
        """Hook run whenever the widget is shown."""


class GameOverWidget(UserWidget):
    """Screen shown when the game is lost."""

    BUTTON_NAMES = ("Return_BTN",)

    def native_construct(self) -> None:
        self.buttons["Return_BTN"].on_clicked.subscribe(self.on_return_to_main_menu_clicked)

    def on_return_to_main_menu_clicked(self) -> None:
        """Go back to the main menu level."""
        world = self.world
        if world is not None:
            world.open_level(GAME_LEVEL_MENU)
        LOG_UI.info("Return to Main Menu Clicked")

    def handle_player_death(self) -> None:
        """Note that the player has died."""
        LOG_UI.warning("GameOverWidget detected: Player is Dead.")


class MainMenuWidget(UserWidget):
    """Title screen with start and quit buttons."""

    BUTTON_NAMES = ("Start_BTN", "Quit_BTN")

    def native_construct(self) -> None:
        self.buttons["Start_BTN"].on_clicked.subscribe(self.on_start_clicked)
        self.buttons["Quit_BTN"].on_clicked.subscribe(self.on_quit_clicked)

    def on_start_clicked(self) -> None:
        """Ask the player controller to start the game."""
        LOG_UI.info("Start Clicked")
        controller = self.player_controller
        if controller is not None:
            controller.start_game()

    def on_quit_clicked(self) -> None:
        """Quit the game right away."""
        LOG_UI.info("Quit Clicked")
        world = self.world
        if world is not None:
            world.quit()


class PauseMenuWidget(UserWidget):
    """Pause screen with resume and return-to-menu buttons."""

    BUTTON_NAMES = ("Resume_BTN", "Return_BTN")

    def native_construct(self) -> None:
        self.buttons["Resume_BTN"].on_clicked.subscribe(self.on_resume_clicked)
        self.buttons["Return_BTN"].on_clicked.subscribe(self.on_return_clicked)

    def on_resume_clicked(self) -> None:
        """Unpause, give input back to the game and close the menu."""
        LOG_UI.info("Resume Clicked")
        controller = self.player_controller
        if controller is not None:
            controller.paused = False
            controller.show_mouse_cursor = False
            controller.input_mode = type(controller.input_mode).GAME_ONLY
            self.remove_from_parent()

    def on_return_clicked(self) -> None:
        """Show the main menu again."""
        controller = self.player_controller
        if controller is not None:
            controller.show_main_menu(True)
        LOG_UI.info("Return Clicked")