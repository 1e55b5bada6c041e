from __future__ import annotations

import yaml

from termcore.config import Config, DocumentWriter, serialize_config
from termcore.config.writer import _escape, _float, _symbol
from termcore.inputs import InputMappings


def test_default_document_is_valid_yaml_with_all_sections() -> None:
    text = serialize_config(Config())
    document = yaml.safe_load(text)

    assert text.startswith("# termcore configuration file\n")
    assert set(document) >= {"live_config", "renderer", "profiles", "color_schemes", "input_mapping"}
    assert list(document["profiles"]) == ["main"]
    assert document["profiles"]["main"]["font"]["size"] == 12.0
    assert document["profiles"]["main"]["history"]["limit"] == 1000


def test_documentation_is_indented_to_field_depth() -> None:
    lines = serialize_config(Config()).splitlines()

    index = lines.index("        wm_class: \"termcore\"")
    assert lines[index - 1] == "        # Window class reported to the window manager."
    assert "    # Backend used to draw the terminal grid." in lines


def test_custom_comment_marker() -> None:
    text = DocumentWriter(comment="//").serialize(Config())

    assert text.startswith("// termcore configuration file\n")
    assert "{comment}" not in text


def test_writer_depth_is_restored_after_serialize() -> None:
    writer = DocumentWriter()
    writer.serialize(Config())

    assert writer._depth == 0
    with writer._indented():
        with writer._indented():
            assert writer._depth == 2
        assert writer._depth == 1
    assert writer._depth == 0


def test_input_rules_are_written_one_action_per_line() -> None:
    text = serialize_config(Config())

    assert '    - { mods: [Shift, Control], key: "-", action: DecreaseFontSize }' in text
    assert '    - { mouse: WheelUp, mode: "~Alt", action: ScrollUp }' in text
    assert '    - { mods: [Shift, Control], key: "C", mode: "Select", action: CopySelection, format: "Text" }' in text
    assert '    - { mods: [Shift, Control], key: "C", mode: "Select", action: CancelSelection }' in text


def test_empty_input_mapping_is_written_as_empty_list() -> None:
    config = Config(input_mappings=InputMappings())

    assert "\ninput_mapping: []\n" in serialize_config(config)


def test_modifier_and_enum_fields_are_written_plain() -> None:
    text = serialize_config(Config())

    assert "\nbypass_mouse_protocol_modifier: [Shift]\n" in text
    assert "\non_mouse_select: CopyToSelectionClipboard\n" in text
    assert '        terminal_id: VT525\n' in text


def test_string_escaping() -> None:
    assert _escape('a"b\\c') == 'a\\"b\\\\c'
    assert _escape("tab\tnew\nline") == "tab\\tnew\\nline"
    assert _escape("\x07\x85\u2028\ufeff") == "\\x07\\x85\\u2028\\ufeff"
    assert _escape("│ü") == "│ü"


def test_symbols_quote_reserved_and_non_identifier_text() -> None:
    assert _symbol("main") == "main"
    assert _symbol("None") == '"None"'
    assert _symbol("yes") == '"yes"'
    assert _symbol("my profile") == '"my profile"'
    assert _symbol("2fast") == '"2fast"'
    assert _symbol("work\n") == '"work\\n"'
    assert _symbol("tab\there") == '"tab\\there"'


def test_float_formatting_reads_back_as_float() -> None:
    for value in (12.0, 0.1, 1e-05, 1e16, 123456.789):
        assert yaml.safe_load(_float(value)) == value
    assert _float(1e-05) == "1.0e-05"
