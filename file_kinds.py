"""
file_kinds.py - Decide what a project file is by its extension.
Used by the watcher (what to do on change) and by the server (what to inject).
"""

import enum
import os


class FileKind(enum.Enum):
    MARKUP = 'markup'
    STYLE = 'style'
    SCRIPT = 'script'
    OTHER = 'other'


# Extension (lower case) -> kind
EXTENSIONS = {
    '.html': FileKind.MARKUP,
    '.htm': FileKind.MARKUP,
    '.css': FileKind.STYLE,
    '.js': FileKind.SCRIPT,
}


def classify(file_name):
    ext = os.path.splitext(file_name)[1].lower()
    return EXTENSIONS.get(ext, FileKind.OTHER)


def triggers_compile(kind):
    return kind in (FileKind.STYLE, FileKind.SCRIPT)
