"""Shared fixtures for the dev server tests."""

import pytest

from app import create_app
from notifications import NotificationChannel
from tailwind_compiler import Success, TailwindCompiler


class FakeRunner:
    """Stands in for the tailwind process; returns queued results in order."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def __call__(self, executable, args, cwd=None):
        self.calls.append((executable, list(args), cwd))
        if self.results:
            return self.results.pop(0)
        return Success('')


class RecordingChannel(NotificationChannel):
    """Notification channel that remembers what it was asked to send."""

    def __init__(self):
        super().__init__()
        self.emitted = []

    def emit(self, event_name, payload=None):
        self.emitted.append((event_name, payload))
        super().emit(event_name, payload)


@pytest.fixture
def project_dir(tmp_path):
    (tmp_path / 'index.html').write_text('<h1 class="text-xl">Hello</h1>\n', encoding='utf-8')
    (tmp_path / 'about.htm').write_text('<p>About</p>\n', encoding='utf-8')
    (tmp_path / 'style.css').write_text('@tailwind base;\n', encoding='utf-8')
    (tmp_path / 'tailwind.js').write_text('module.exports = {};\n', encoding='utf-8')
    (tmp_path / 'logo.svg').write_text('<svg></svg>', encoding='utf-8')
    (tmp_path / 'assets').mkdir()
    return tmp_path


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def compiler(runner, project_dir):
    return TailwindCompiler(cwd=str(project_dir), runner=runner)


@pytest.fixture
def channel():
    return RecordingChannel()


@pytest.fixture
def app(compiler, channel, project_dir):
    flask_app = create_app(compiler, channel, str(project_dir))
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
