"""
notifications.py - Push channel from the dev server to open browser tabs.
Events go out as Server-Sent Events; every open tab holds one subscription.
"""

import logging
import queue
import threading

logger = logging.getLogger(__name__)

KEEPALIVE_SECONDS = 15.0


def format_event(event_name, payload=None):
    lines = payload.splitlines() if payload else ['']
    data = ''.join('data: %s\n' % line for line in lines)
    return 'event: %s\n%s\n' % (event_name, data)


class NotificationChannel:

    def __init__(self, keepalive=KEEPALIVE_SECONDS):
        self.keepalive = keepalive
        self._lock = threading.Lock()
        self._subscribers = []

    @property
    def client_count(self):
        with self._lock:
            return len(self._subscribers)

    def subscribe(self):
        q = queue.Queue()
        with self._lock:
            self._subscribers.append(q)
        logger.debug('browser connected (%d open)', self.client_count)
        return q

    def unsubscribe(self, q):
        with self._lock:
            if q in self._subscribers:
                self._subscribers.remove(q)
        logger.debug('browser disconnected (%d open)', self.client_count)

    def emit(self, event_name, payload=None):
        message = format_event(event_name, payload)
        with self._lock:
            subscribers = list(self._subscribers)
        for q in subscribers:
            q.put(message)

    def stream(self):
        """
        Subscribe on first read, then yield messages until the client goes
        away. A body that is never read (HEAD) never subscribes.
        A comment line is sent after `keepalive` seconds of silence so that
        a closed connection is noticed on the next write.
        """
        q = self.subscribe()
        try:
            yield ': connected\n\n'
            while True:
                try:
                    yield q.get(timeout=self.keepalive)
                except queue.Empty:
                    yield ': keepalive\n\n'
        finally:
            self.unsubscribe(q)
