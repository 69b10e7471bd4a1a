"""
terminal.py - What the developer sees in the terminal besides the log.
"""

from rich.console import Console
from rich.text import Text

console = Console(stderr=True, highlight=False)


def _line_style(index):
    # first line bold, second plain, the rest dim
    if index == 0:
        return 'bold'
    if index == 1:
        return None
    return 'dim'


def show_banner(out=None):
    (out or console).print(Text('Tailwind CSS development server', style='yellow'))


def show_url(host, port, out=None):
    text = Text('--> ')
    text.append('http://%s:%d' % (host, port), style='blue')
    (out or console).print(text)


def show_error(message, out=None):
    text = Text()
    text.append('ERR ', style='red')
    for i, line in enumerate(message.split('\n')):
        if i:
            text.append('\n')
        text.append(line, style=_line_style(i))
    (out or console).print(text)
