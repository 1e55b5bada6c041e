from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from termcore.config import Config, ShellSpec, load_document, serialize_config
from termcore.inputs import ANY_MODE, InputMappings, Modifier
from termcore.inputs.actions import SendChars, WriteScreen

_text = st.text(max_size=20)
_modifiers = st.sampled_from(
    [Modifier.NONE, Modifier.SHIFT, Modifier.CONTROL | Modifier.SHIFT, Modifier.ALT | Modifier.META]
)


@settings(max_examples=50, deadline=None)
@given(
    word_delimiters=_text,
    wm_class=_text,
    font_size=st.floats(min_value=4.0, max_value=256.0, allow_nan=False),
    history_limit=st.one_of(st.none(), st.integers(min_value=0, max_value=10**7)),
    arguments=st.lists(_text, max_size=4),
    environment=st.dictionaries(_text, _text, max_size=3),
)
def test_field_values_survive_serialization(
    word_delimiters: str,
    wm_class: str,
    font_size: float,
    history_limit: int | None,
    arguments: list[str],
    environment: dict[str, str],
) -> None:
    config = Config()
    config.word_delimiters.value = word_delimiters
    profile = config.profile()
    profile.wm_class.value = wm_class
    profile.font_size.value = font_size
    profile.history_limit.value = history_limit
    profile.shell.value = ShellSpec(program="sh", arguments=tuple(arguments), environment=environment)

    loaded, diagnostics = load_document(serialize_config(config))

    assert diagnostics == []
    assert loaded == config


@settings(max_examples=50, deadline=None)
@given(
    rules=st.lists(
        st.tuples(st.characters(exclude_categories=("Cs",)), _modifiers, _text, st.booleans()),
        max_size=6,
    )
)
def test_character_rules_survive_serialization(rules: list[tuple[str, Modifier, str, bool]]) -> None:
    mappings = InputMappings()
    for char, modifiers, chars, send in rules:
        action = SendChars(chars=chars) if send else WriteScreen(chars=chars)
        mappings.add(char, action, modifiers=modifiers, modes=ANY_MODE)
    config = Config(input_mappings=mappings)

    loaded, diagnostics = load_document(serialize_config(config))

    assert diagnostics == []
    assert loaded.input_mappings == mappings
