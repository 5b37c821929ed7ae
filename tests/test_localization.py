import json

import pytest

from penguinroom.localization import (
    Locale,
    LocalizationError,
    LocalizationManager,
    flatten_strings,
)


def test_flatten_nested_strings():
    data = {"a": {"b": "x", "c": {"d": "y"}}, "e": "z", "n": 5, "l": ["q"]}
    assert flatten_strings(data) == {"a.b": "x", "a.c.d": "y", "e": "z"}


def test_flatten_with_prefix():
    assert flatten_strings({"k": "v", "m": {"o": "p"}}, "root") == {
        "root.k": "v",
        "root.m.o": "p",
    }


def test_default_locale_is_english(tmp_path):
    manager = LocalizationManager(directory=tmp_path)
    assert manager.locale is Locale.EN
    assert manager.locale_path() == tmp_path / "locale_en.json"


@pytest.mark.parametrize(
    "locale, name",
    [(Locale.PT, "locale_pt.json"), (Locale.RU, "locale_ru.json")],
)
def test_locale_path(tmp_path, locale, name):
    assert LocalizationManager(locale, tmp_path).locale_path() == tmp_path / name


def test_load_and_lookup(tmp_path):
    (tmp_path / "locale_fr.json").write_text(
        json.dumps({"menu": {"play": "Jouer", "quit": ""}}), encoding="utf-8"
    )
    manager = LocalizationManager(Locale.FR, tmp_path)
    manager.load()
    assert manager.text("menu.play") == "Jouer"
    assert manager.text("menu.quit") == "Undefined"
    assert manager.text("menu.missing") == "Undefined"
    assert dict(manager.strings) == {"menu.play": "Jouer", "menu.quit": ""}


def test_loading_keeps_earlier_strings(tmp_path):
    (tmp_path / "locale_en.json").write_text(json.dumps({"a": "A"}), encoding="utf-8")
    (tmp_path / "locale_de.json").write_text(json.dumps({"b": "B"}), encoding="utf-8")
    manager = LocalizationManager(Locale.EN, tmp_path)
    manager.load()
    manager.locale = Locale.DE
    manager.load()
    assert manager.text("a") == "A"
    assert manager.text("b") == "B"


def test_missing_file_raises(tmp_path):
    with pytest.raises(LocalizationError):
        LocalizationManager(Locale.ES, tmp_path).load()


def test_invalid_json_raises(tmp_path):
    (tmp_path / "locale_en.json").write_text("{oops", encoding="utf-8")
    with pytest.raises(LocalizationError):
        LocalizationManager(directory=tmp_path).load()