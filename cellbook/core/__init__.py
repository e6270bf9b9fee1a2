from .files import FileEntry, FileStore, FileStoreError
from .languages import CodeLanguage
from .modes import LanguageMode, extname, resolve_language_mode
from .titles import MAX_NOTEBOOK_TITLE_LENGTH, clamp_title_input, is_valid_notebook_title

__all__ = ["FileEntry",
           "FileStore",
           "FileStoreError",
           "CodeLanguage",
           "LanguageMode",
           "extname",
           "resolve_language_mode",
           "MAX_NOTEBOOK_TITLE_LENGTH",
           "clamp_title_input",
           "is_valid_notebook_title",
           ]
