"""
Chat transcript.

In-memory ordered {role, content} turns, capped from the front.
"""

from typing import Dict, List

MAX_HISTORY = 20


class ChatHistory:
    """Bounded chat transcript. Never persisted."""

    def __init__(self, limit: int = MAX_HISTORY):
        if limit <= 0:
            raise ValueError("limit must be > 0")
        self.limit = limit
        self._turns: List[Dict[str, str]] = []

    def __len__(self) -> int:
        return len(self._turns)

    def append(self, role: str, content: str) -> None:
        self._turns.append({"role": role, "content": content})
        self.trim()

    def trim(self) -> None:
        """Keep only the last `limit` turns."""
        if len(self._turns) > self.limit:
            self._turns = self._turns[-self.limit:]

    def clear(self) -> None:
        self._turns = []

    def messages(self) -> List[Dict[str, str]]:
        """Copy of the turns, oldest first."""
        return [dict(turn) for turn in self._turns]
