"""
change_watcher.py - Reacts to edits in the project directory.

HTML edits reload the browser straight away. CSS and JS edits rebuild the
stylesheet first, then either reload or report the compile error.
"""

import logging
import os

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from file_kinds import FileKind, classify, triggers_compile
from tailwind_compiler import CompileError
from terminal import show_error

logger = logging.getLogger(__name__)

# watchdog event type -> change kind we report
CHANGE_KINDS = {
    EVENT_TYPE_CREATED: 'created',
    EVENT_TYPE_MODIFIED: 'modified',
    EVENT_TYPE_MOVED: 'renamed',
}


def reload_page(channel):
    logger.info('sending reload event to browser')
    channel.emit('reload')


def compile_styles(compiler, channel):
    """Rebuild, then reload on success or push the error on failure."""
    try:
        compiler.compile()
    except CompileError as e:
        show_error(e.message)
        channel.emit('error', e.message)
        return False
    reload_page(channel)
    return True


class ChangeWatcher(FileSystemEventHandler):

    def __init__(self, root, compiler, channel, self_name=None):
        super().__init__()
        self.root = os.path.abspath(root)
        self.compiler = compiler
        self.channel = channel
        self.self_name = self_name

    def on_event(self, change_kind, file_name):
        # Editing the server itself happens while working on it; skip it.
        if file_name == self.self_name:
            return

        logger.info('detected %s: %s', change_kind, file_name)
        kind = classify(file_name)

        if kind is FileKind.MARKUP:
            reload_page(self.channel)
        elif triggers_compile(kind):
            compile_styles(self.compiler, self.channel)

    def on_any_event(self, event):
        if event.is_directory or event.event_type not in CHANGE_KINDS:
            return

        if event.event_type == EVENT_TYPE_MOVED:
            path = event.dest_path
        else:
            path = event.src_path

        self.on_event(
            CHANGE_KINDS[event.event_type],
            os.path.relpath(os.fsdecode(path), self.root),
        )


def start_watching(watcher):
    """Watch the project root (not its subdirectories) on a background thread."""
    observer = Observer()
    observer.schedule(watcher, watcher.root, recursive=False)
    observer.start()
    return observer
