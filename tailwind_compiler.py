"""
tailwind_compiler.py - Runs the Tailwind CLI and keeps the latest good build.

The compiler writes CSS to stdout and problems to stderr. Anything on stderr
counts as a failed build, and so does a non-zero exit status. A failed build
never replaces the stylesheet that is already being served.
"""

import logging
import re
import subprocess
import threading
from collections import namedtuple

logger = logging.getLogger(__name__)

COMPILER = './node_modules/.bin/tailwind'
STYLESHEET = 'style.css'
CONFIG_FILE = 'tailwind.js'

Success = namedtuple('Success', ['css'])
Failure = namedtuple('Failure', ['error'])

# Everything from the first word character on (drops the leading "✖ ")
_MESSAGE_START = re.compile(r'\w[\s\S]*')


class CompileError(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


def _decode(data):
    return data.decode('utf-8', errors='replace') if data else ''


def strip_marker(error_text):
    match = _MESSAGE_START.search(error_text)
    if match is None:
        return error_text
    return match.group(0).rstrip()


def run_process(executable, args, cwd=None):
    """
    Run a compiler process to completion. Returns Success or Failure.

    Args:
        executable: path of the program to run
        args: list of command line arguments
        cwd: working directory for the process (defaults to ours)
    """
    try:
        proc = subprocess.run(
            [executable] + list(args),
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        return Failure('could not run %s: %s' % (executable, e.strerror or e))

    stdout = _decode(proc.stdout)
    stderr = _decode(proc.stderr)

    if stderr:
        return Failure(stderr)
    if proc.returncode != 0:
        return Failure('%s exited with status %d' % (executable, proc.returncode))
    return Success(stdout)


class TailwindCompiler:
    """Owns the compiled stylesheet that gets injected into served pages."""

    def __init__(self, executable=COMPILER, stylesheet=STYLESHEET,
                 config_file=CONFIG_FILE, cwd=None, runner=run_process):
        self.executable = executable
        self.stylesheet = stylesheet
        self.config_file = config_file
        self.cwd = cwd
        self._runner = runner
        self._lock = threading.Lock()
        self._css = ''

    @property
    def arguments(self):
        return ['build', self.stylesheet, '-c', self.config_file]

    @property
    def css(self):
        with self._lock:
            return self._css

    def compile(self):
        """
        Build the stylesheet once.

        Raises CompileError (leaving the previous css in place) when the
        compiler reports a problem.
        """
        logger.info('compiling tailwind css')
        result = self._runner(self.executable, self.arguments, cwd=self.cwd)

        if isinstance(result, Failure):
            raise CompileError(strip_marker(result.error))

        with self._lock:
            self._css = result.css
        logger.debug('compiled %d characters of css', len(result.css))
