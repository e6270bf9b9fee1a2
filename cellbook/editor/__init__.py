from .controller import EMPTY_PLACEHOLDER, EditorController, EditorState, EditorView
from .sync import EditSync

__all__ = [
    "EMPTY_PLACEHOLDER",
    "EditorController",
    "EditorState",
    "EditorView",
    "EditSync",
]
