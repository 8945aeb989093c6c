"""Build Qt style sheets for the window chrome from a JSON theme."""

from __future__ import annotations

import json
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any


class ThemeError(Exception):
    """Raised when a theme file cannot be read or is not a JSON object."""


@dataclass
class AppTheme:
    """Style sheets derived from a theme."""

    name: str = ""
    window_icon_path: str = ""
    window_title_qss: str = ""
    minimize_btn_qss: str = ""
    maximize_btn_qss: str = ""
    normal_btn_qss: str = ""
    close_btn_qss: str = ""


def _string(obj: dict, key: str) -> str:
    value = obj.get(key)
    return value if isinstance(value, str) else ""


def _object(obj: dict, key: str) -> dict:
    value = obj.get(key)
    return value if isinstance(value, dict) else {}


def json_to_qss(obj: dict[str, Any]) -> str:
    """Turn a JSON object into ``key:value;`` declarations, keys sorted."""
    return "".join(f"{key}:{_string(obj, key)};" for key in sorted(obj))


def window_button_qss(obj: dict[str, Any], name: str) -> str:
    """Build the normal, hover and pressed rules for a named push button."""
    selector = f"QPushButton#{name}"
    return (
        f"{selector}{{{json_to_qss(_object(obj, 'normal'))}}}"
        f"{selector}::hover{{{json_to_qss(_object(obj, 'hover'))}}}"
        f"{selector}::pressed{{{json_to_qss(_object(obj, 'pressed'))}}}"
    )


class StyleHelper:
    """Holds the current application theme."""

    win_icon_size = (16, 16)
    win_btn_size = (30, 26)

    def __init__(self) -> None:
        self.theme = AppTheme()

    def load_theme(self, path: str | PathLike[str]) -> AppTheme:
        """Read a theme file and apply it."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise ThemeError(f"cannot open theme file {path}: {exc}") from exc
        return self.load_theme_data(data)

    def load_theme_data(self, data: str | bytes) -> AppTheme:
        """Apply a theme given as JSON text."""
        try:
            root = json.loads(data)
        except ValueError as exc:
            raise ThemeError(f"invalid theme: {exc}") from exc
        if not isinstance(root, dict):
            raise ThemeError("theme root is not a JSON object")

        theme = self.theme
        theme.name = _string(root, "name")

        window_title = root.get("windowTitle")
        if isinstance(window_title, dict):
            theme.window_icon_path = _string(window_title, "icon")
            theme.window_title_qss += (
                "QWidget{background-color:"
                + _string(window_title, "background-color")
                + "}"
                + "QWidget#menuWidget{min-width:250px;}"
            )

        main_menu = root.get("mainMenu")
        if isinstance(main_menu, dict):
            theme.window_title_qss += (
                "QMenuBar{}"
                "QMenuBar::item{color:" + _string(main_menu, "color") + ";"
                "padding:" + _string(main_menu, "item-padding") + "}"
                "QMenuBar::item:selected{background:"
                + _string(main_menu, "item-selected-background-color")
                + ";}"
                "QMenuBar::item:pressed{background:"
                + _string(main_menu, "item-pressed-background-color")
                + ";}"
            )

        buttons = root.get("windowButtons")
        if isinstance(buttons, dict):
            specs = (
                ("minimize-button", "minimize_btn_qss", "minWindowButton"),
                ("maximize-button", "maximize_btn_qss", "maxWindowButton"),
                ("normal-button", "normal_btn_qss", "maxWindowButton"),
                ("close-button", "close_btn_qss", "closeWindowButton"),
            )
            for key, attr, name in specs:
                button = buttons.get(key)
                if isinstance(button, dict):
                    setattr(theme, attr, window_button_qss(button, name))
        return theme