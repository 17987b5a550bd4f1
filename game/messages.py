"""
Transient advisory messages - shown for a fixed duration, never blocking
"""

from utils.constants import MESSAGE_DURATION_MS


class MessageBoard:
    """
    Holds the latest message until it expires

    Time is passed in by the caller (milliseconds), so the board works the
    same under pygame ticks and in tests
    """
    def __init__(self, duration_ms=MESSAGE_DURATION_MS):
        self.duration_ms = duration_ms
        self.text = None
        self.expires_at = 0

    def post(self, text, now_ms, duration_ms=None):
        """Show text, replacing whatever is on the board"""
        self.text = text
        self.expires_at = now_ms + (self.duration_ms if duration_ms is None else duration_ms)

    def current(self, now_ms):
        """Text still on display at now_ms, or None"""
        if self.text is None or now_ms >= self.expires_at:
            return None
        return self.text

    def clear(self):
        self.text = None
        self.expires_at = 0
