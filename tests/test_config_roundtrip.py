from __future__ import annotations

from termcore.config import ColorPalette, Config, TerminalProfile, load_document, serialize_config
from termcore.inputs import InputMappings

_DOCUMENT = """
live_config: true
word_delimiters: " \\t\\"'│"
bypass_mouse_protocol_modifier: []
on_mouse_select: None
default_profile: work
profiles:
    work:
        shell:
            program: /usr/bin/fish
            arguments: ["--login", "with space"]
            environment: {LANG: C.UTF-8, EMPTY: ""}
        ssh: {host: example.org, port: 2222, forward_agent: true}
        history: {limit: -1}
        font:
            size: 13.5
            dpi_scale: 1.25
            regular: {family: "Jet Brains", weight: light, features: ["+calt", "-liga"]}
        cursor: {shape: rectangle, blinking: true, blinking_interval: 700}
        bell: {sound: /tmp/ding.wav, alert: false, volume: 0.35}
        colors: {dark: night, light: day}
        margins: {horizontal: 4, vertical: 2}
    "my laptop":
        font: {size: 9}
        colors: night
color_schemes:
    night:
        default: {background: "#101010"}
        cursor: {default: 0x00ff00}
        dim: {white: "#777777"}
input_mapping:
    - { mods: [Control, Shift], key: "-", action: DecreaseFontSize }
    - { mods: [Control], key: " ", mode: "Select|~Alt", action: SendChars, chars: "\\x1b[A" }
    - { key: F1, action: NewTerminal, profile: "my laptop" }
    - { key: F1, action: SwitchToTab, position: 2 }
    - { mouse: Middle, mods: [Meta], action: PasteSelection, evaluate_in_shell: true }
    - { key: "1", action: CopySelection, format: HTML }
"""


def test_default_config_round_trips() -> None:
    config, diagnostics = load_document(serialize_config(Config()))

    assert diagnostics == []
    assert config == Config()


def test_loaded_document_round_trips() -> None:
    first, diagnostics = load_document(_DOCUMENT)
    second, second_diagnostics = load_document(serialize_config(first))

    assert diagnostics == []
    assert second_diagnostics == []
    assert second == first
    assert list(second.profiles) == ["work", "my laptop"]
    assert second.profiles["my laptop"].shell.value.program == "/usr/bin/fish"
    assert second.profiles["my laptop"].font_size.value == 9.0
    assert second.word_delimiters.value == " \t\"'│"


def test_serialization_is_stable() -> None:
    first, _ = load_document(_DOCUMENT)
    text = serialize_config(first)

    assert serialize_config(load_document(text)[0]) == text


def test_empty_input_mapping_round_trips() -> None:
    config = Config(input_mappings=InputMappings())

    loaded, diagnostics = load_document(serialize_config(config))

    assert diagnostics == []
    assert loaded.input_mappings.binding_count() == 0


def test_names_with_control_characters_round_trip() -> None:
    config = Config()
    config.profiles = {"work\n": TerminalProfile(), "a\tb": TerminalProfile()}
    config.default_profile.value = "work\n"
    config.color_schemes = {"default": ColorPalette(), "dark\r": ColorPalette()}
    config.profiles["a\tb"].tab_width.value = 2

    loaded, diagnostics = load_document(serialize_config(config))

    assert diagnostics == []
    assert list(loaded.profiles) == ["work\n", "a\tb"]
    assert loaded == config
