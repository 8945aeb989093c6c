import json

import pytest

from yeatplayer.stylehelper import (
    AppTheme,
    StyleHelper,
    ThemeError,
    json_to_qss,
    window_button_qss,
)

THEME = {
    "name": "standart",
    "windowTitle": {"icon": ":/files/image/icon.png", "background-color": "#222"},
    "mainMenu": {
        "color": "white",
        "item-padding": "4px",
        "item-selected-background-color": "#333",
        "item-pressed-background-color": "#444",
    },
    "windowButtons": {
        "minimize-button": {"normal": {"border": "none"}},
        "maximize-button": {"hover": {"background": "#555"}},
        "normal-button": {"pressed": {"background": "#666"}},
        "close-button": {"normal": {"background": "red"}},
    },
}


def test_json_to_qss_sorts_keys():
    assert json_to_qss({"color": "red", "border": "none"}) == "border:none;color:red;"


def test_json_to_qss_non_string_values_are_empty():
    assert json_to_qss({"width": 5}) == "width:;"
    assert json_to_qss({}) == ""


def test_window_button_qss_structure():
    qss = window_button_qss({"normal": {"color": "red"}}, "closeWindowButton")
    assert qss.startswith("QPushButton#closeWindowButton{color:red;}")
    assert "QPushButton#closeWindowButton::hover{}" in qss
    assert qss.endswith("QPushButton#closeWindowButton::pressed{}")


def test_window_button_qss_ignores_non_object_states():
    qss = window_button_qss({"normal": "red"}, "x")
    assert qss == window_button_qss({}, "x")


def test_load_theme_data_full():
    helper = StyleHelper()
    theme = helper.load_theme_data(json.dumps(THEME))
    assert theme is helper.theme
    assert theme.name == "standart"
    assert theme.window_icon_path == ":/files/image/icon.png"
    assert theme.window_title_qss.startswith("QWidget{background-color:#222}")
    assert "QWidget#menuWidget{min-width:250px;}" in theme.window_title_qss
    assert "QMenuBar::item{color:white;padding:4px}" in theme.window_title_qss
    assert theme.window_title_qss.endswith("QMenuBar::item:pressed{background:#444;}")
    assert theme.minimize_btn_qss == window_button_qss(
        THEME["windowButtons"]["minimize-button"], "minWindowButton"
    )
    assert theme.normal_btn_qss == window_button_qss(
        THEME["windowButtons"]["normal-button"], "maxWindowButton"
    )
    assert "QPushButton#closeWindowButton{background:red;}" in theme.close_btn_qss


def test_missing_sections_leave_defaults():
    helper = StyleHelper()
    theme = helper.load_theme_data(b'{"name": "bare"}')
    assert theme == AppTheme(name="bare")


def test_title_qss_accumulates_across_loads():
    helper = StyleHelper()
    data = json.dumps({"windowTitle": {"background-color": "#000"}})
    once = helper.load_theme_data(data).window_title_qss
    twice = helper.load_theme_data(data).window_title_qss
    assert twice == once + once


def test_invalid_json_raises():
    with pytest.raises(ThemeError):
        StyleHelper().load_theme_data("{not json")


def test_non_object_root_raises():
    with pytest.raises(ThemeError):
        StyleHelper().load_theme_data("[1, 2]")


def test_load_theme_from_file(tmp_path):
    path = tmp_path / "theme.json"
    path.write_text(json.dumps(THEME), encoding="utf-8")
    theme = StyleHelper().load_theme(path)
    assert theme.name == "standart"
    assert theme.maximize_btn_qss == window_button_qss(
        THEME["windowButtons"]["maximize-button"], "maxWindowButton"
    )


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(ThemeError):
        StyleHelper().load_theme(tmp_path / "absent.json")


def test_fixed_sizes():
    assert StyleHelper.win_icon_size == (16, 16)
    assert StyleHelper().win_btn_size == (30, 26)