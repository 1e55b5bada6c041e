"""Built-in input mappings used when a document has no ``input_mapping``."""

from __future__ import annotations

from . import actions as act
from .bindings import InputMappings
from .keys import Key, Modifier, MouseButton
from .modes import ANY_MODE, MatchModes, ModeFlag

_PRIMARY_SCREEN = MatchModes().disable(ModeFlag.ALTERNATE_SCREEN)
_SELECTING = MatchModes().enable(ModeFlag.SELECT)
_CTRL_SHIFT = Modifier.CONTROL | Modifier.SHIFT


def default_input_mappings() -> InputMappings:
    mappings = InputMappings()

    mappings.add(Key.ENTER, act.ToggleFullscreen(), modifiers=Modifier.ALT)
    mappings.add(Key.ESCAPE, act.CancelSelection(), modes=_SELECTING)
    mappings.add(Key.INSERT, act.PasteClipboard(), modifiers=Modifier.SHIFT)
    mappings.add(Key.PAGE_UP, act.ScrollPageUp(), modifiers=Modifier.SHIFT, modes=_PRIMARY_SCREEN)
    mappings.add(Key.PAGE_DOWN, act.ScrollPageDown(), modifiers=Modifier.SHIFT, modes=_PRIMARY_SCREEN)
    mappings.add(Key.UP_ARROW, act.ScrollOneUp(), modifiers=_CTRL_SHIFT, modes=_PRIMARY_SCREEN)
    mappings.add(Key.DOWN_ARROW, act.ScrollOneDown(), modifiers=_CTRL_SHIFT, modes=_PRIMARY_SCREEN)
    mappings.add(Key.HOME, act.ScrollToTop(), modifiers=Modifier.CONTROL, modes=_PRIMARY_SCREEN)
    mappings.add(Key.END, act.ScrollToBottom(), modifiers=Modifier.CONTROL, modes=_PRIMARY_SCREEN)
    mappings.add(Key.F3, act.FocusNextSearchMatch(), modes=ANY_MODE.enable(ModeFlag.SEARCH))

    mappings.add("=", act.IncreaseFontSize(), modifiers=_CTRL_SHIFT)
    mappings.add("-", act.DecreaseFontSize(), modifiers=_CTRL_SHIFT)
    mappings.add("0", act.ResetFontSize(), modifiers=_CTRL_SHIFT)
    mappings.add(",", act.OpenConfiguration(), modifiers=_CTRL_SHIFT)
    mappings.add("C", act.CopySelection(), modifiers=_CTRL_SHIFT, modes=_SELECTING)
    mappings.add("C", act.CancelSelection(), modifiers=_CTRL_SHIFT, modes=_SELECTING)
    mappings.add("V", act.PasteClipboard(strip=False), modifiers=_CTRL_SHIFT)
    mappings.add("F", act.SearchReverse(), modifiers=_CTRL_SHIFT)
    mappings.add("N", act.NewTerminal(), modifiers=_CTRL_SHIFT)
    mappings.add("T", act.CreateNewTab(), modifiers=_CTRL_SHIFT)
    mappings.add("W", act.CloseTab(), modifiers=_CTRL_SHIFT)
    mappings.add("Q", act.Quit(), modifiers=_CTRL_SHIFT)
    mappings.add(" ", act.ViNormalMode(), modifiers=_CTRL_SHIFT, modes=_PRIMARY_SCREEN)

    mappings.add(MouseButton.WHEEL_UP, act.IncreaseFontSize(), modifiers=Modifier.CONTROL)
    mappings.add(MouseButton.WHEEL_DOWN, act.DecreaseFontSize(), modifiers=Modifier.CONTROL)
    mappings.add(MouseButton.WHEEL_UP, act.IncreaseOpacity(), modifiers=Modifier.ALT)
    mappings.add(MouseButton.WHEEL_DOWN, act.DecreaseOpacity(), modifiers=Modifier.ALT)
    mappings.add(MouseButton.WHEEL_UP, act.ScrollUp(), modes=_PRIMARY_SCREEN)
    mappings.add(MouseButton.WHEEL_DOWN, act.ScrollDown(), modes=_PRIMARY_SCREEN)
    mappings.add(MouseButton.WHEEL_UP, act.ScrollPageUp(), modifiers=Modifier.SHIFT)
    mappings.add(MouseButton.WHEEL_DOWN, act.ScrollPageDown(), modifiers=Modifier.SHIFT)
    mappings.add(MouseButton.MIDDLE, act.PasteSelection())
    mappings.add(MouseButton.LEFT, act.FollowHyperlink(), modifiers=Modifier.CONTROL)

    return mappings
