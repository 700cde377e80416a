"""
session.py - Edit Session State Machine

Drives the edit -> review -> confirm loop:
- EDITING: editor returns, listing is reconciled -> REVIEWING or PARSE_FAILED
- PARSE_FAILED: retry (y) -> EDITING, otherwise -> ABORTED
- REVIEWING: nothing to do -> ACCEPTED, else y -> ACCEPTED, n -> ABORTED, e -> EDITING

Editor, prompts and output are injected so the loop itself does no I/O.
"""

from enum import Enum
from typing import Callable, List, Optional, Sequence
import logging

from .models_fs import Action, Entry
from .listing_codec import parse_listing
from .reconcile import ListingMismatchError, reconcile

logger = logging.getLogger(__name__)


CONFIRM_PROMPT = "Do you want to continue? (y/n/e) "
RETRY_PROMPT = "Do you want to retry editing? (y/n) "


class SessionState(Enum):
    """Edit session state"""
    EDITING = "editing"
    REVIEWING = "reviewing"
    PARSE_FAILED = "parse_failed"
    ACCEPTED = "accepted"
    ABORTED = "aborted"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionState.ACCEPTED, SessionState.ABORTED)


def format_actions(actions: Sequence[Action]) -> str:
    """Render the action block shown for review"""
    lines = ["=========Actions========="]
    lines.extend(str(action) for action in actions)
    lines.append("=========================")
    return "\n".join(lines)


class EditSession:
    """Edit session over one entry list"""

    def __init__(
        self,
        entries: Sequence[Entry],
        run_editor: Callable[[], None],
        read_text: Callable[[], str],
        ask: Callable[[str, Sequence[str]], str],
        show: Callable[[str], None] = print,
    ):
        """
        Initialize edit session

        Args:
            entries: Entries written to the listing buffer
            run_editor: Opens the listing buffer in the editor and waits
            read_text: Returns the current listing buffer text
            ask: Prompts until one of the given choices is answered
            show: Displays a message to the user
        """
        self.entries = entries
        self.run_editor = run_editor
        self.read_text = read_text
        self.ask = ask
        self.show = show

        self.state = SessionState.EDITING
        self.actions: List[Action] = []
        self.error: Optional[str] = None

        self._transitions = {
            SessionState.EDITING: self._on_editing,
            SessionState.REVIEWING: self._on_reviewing,
            SessionState.PARSE_FAILED: self._on_parse_failed,
        }

    def _parse_failed(self, reason: str) -> SessionState:
        self.actions = []
        self.error = reason
        return SessionState.PARSE_FAILED

    def _on_editing(self) -> SessionState:
        self.run_editor()
        try:
            text = self.read_text()
        except UnicodeDecodeError:
            return self._parse_failed("listing is not valid UTF-8")
        except OSError as e:
            return self._parse_failed(f"cannot read listing: {e}")

        try:
            self.actions = reconcile(self.entries, parse_listing(text))
        except ListingMismatchError as e:
            return self._parse_failed(str(e))
        self.error = None
        return SessionState.REVIEWING

    def _on_reviewing(self) -> SessionState:
        if not self.actions:
            self.show("Nothing to do")
            return SessionState.ACCEPTED

        self.show(format_actions(self.actions))
        answer = self.ask(CONFIRM_PROMPT, ("y", "n", "e"))
        if answer == "y":
            return SessionState.ACCEPTED
        if answer == "e":
            return SessionState.EDITING
        return SessionState.ABORTED

    def _on_parse_failed(self) -> SessionState:
        self.show(f"Failed to parse file: {self.error}")
        answer = self.ask(RETRY_PROMPT, ("y", "n"))
        return SessionState.EDITING if answer == "y" else SessionState.ABORTED

    def step(self) -> SessionState:
        """Run one transition and return the new state"""
        if self.state.is_terminal:
            return self.state
        previous = self.state
        self.state = self._transitions[previous]()
        logger.debug("Session %s -> %s", previous.value, self.state.value)
        return self.state

    def run(self) -> Optional[List[Action]]:
        """
        Loop until the user accepts or aborts

        Returns:
            Accepted actions (possibly empty), None when aborted
        """
        while not self.state.is_terminal:
            self.step()
        if self.state is SessionState.ACCEPTED:
            return self.actions
        return None
