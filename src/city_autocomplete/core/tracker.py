"""Tracks what the user has typed into the field."""

from typing import Callable, Optional

from .state import InputState


class InputTracker:
    """Owns raw text edits. Pure state transitions, no I/O."""

    def __init__(self, state: InputState, on_edit: Optional[Callable[[str], None]] = None):
        self.state = state
        self._on_edit = on_edit

    def seed(self, text: Optional[str]) -> None:
        """Load the host-supplied initial value without counting it as an edit."""
        self.state.raw_text = text or ""
        self.state.is_user_editing = False
        self.state.is_validated_selection = False

    def set_text(self, new_text: Optional[str]) -> None:
        text = new_text or ""
        self.state.raw_text = text
        self.state.is_user_editing = True
        self.state.is_validated_selection = False
        if self._on_edit is not None:
            self._on_edit(text)
