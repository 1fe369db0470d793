"""Memento - text editor snapshots kept on an undo history."""
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from pattern_catalog.infrastructure.narration import Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext


@dataclass(frozen=True)
class EditorMemento:
    """Immutable snapshot of editor content."""
    content: str


class TextEditor:
    """Originator: owns the content and knows how to snapshot it."""

    def __init__(self, narrator: Narrator):
        self.narrator = narrator
        self.content = ""

    def write(self, text: str) -> None:
        self.content = text

    def save(self) -> EditorMemento:
        return EditorMemento(self.content)

    def restore(self, memento: Optional[EditorMemento]) -> bool:
        """
        Restore content from a snapshot.

        Returns:
            False when there was no snapshot to restore
        """
        if memento is None:
            self.narrator.say("Nothing to restore: no snapshot available")
            return False
        self.content = memento.content
        return True


class History:
    """Caretaker: LIFO stack of snapshots it never inspects."""

    def __init__(self):
        self._states: List[EditorMemento] = []

    def push(self, memento: EditorMemento) -> None:
        self._states.append(memento)

    def pop(self) -> Optional[EditorMemento]:
        """Most recent snapshot, or None when the history is empty."""
        if not self._states:
            return None
        return self._states.pop()

    def is_empty(self) -> bool:
        return not self._states

    def __len__(self) -> int:
        return len(self._states)


def run_demo(context: "DemoContext") -> None:
    """Write, snapshot and undo until the history runs dry."""
    narrator = context.narrator
    narrator.banner("Memento Pattern - Text Editor Undo Demo")

    editor = TextEditor(narrator)
    history = History()

    editor.write("Hello")
    history.push(editor.save())
    editor.write("Hello World")
    history.push(editor.save())
    editor.write("Hello World!!!")
    narrator.say(f"Current: {editor.content}")

    editor.restore(history.pop())
    narrator.say(f"After Undo: {editor.content}")
    editor.restore(history.pop())
    narrator.say(f"After Undo: {editor.content}")

    narrator.say("Undo with an empty history:")
    editor.restore(history.pop())
    narrator.say(f"Content unchanged: {editor.content}")
    narrator.blank()
    narrator.banner("Memento Demo Complete")
