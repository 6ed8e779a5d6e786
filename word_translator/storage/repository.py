"""
Repository pattern for data access.

Handles the persisted API key and usage statistics record.
"""

import json
from typing import Optional

from .db import DEFAULT_DB_PATH, get_connection
from .models import UsageStats

API_KEY_KEY = "openai_api_key"
USAGE_STATS_KEY = "usage_stats"
API_KEY_PREFIX = "sk-"


class SettingsRepository:
    """Key-value repository backed by a single SQLite table.

    Two keys are used: the saved credential and the serialized usage record.
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH):
        """Initialize the repository with a database path.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = db_path

    def initialize_schema(self) -> None:
        """Create the settings table if it doesn't exist."""
        conn = get_connection(self.db_path)
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS settings (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
            conn.commit()
        finally:
            conn.close()

    def get_value(self, key: str) -> Optional[str]:
        conn = get_connection(self.db_path)
        try:
            cursor = conn.execute("SELECT value FROM settings WHERE key = ?", (key,))
            row = cursor.fetchone()
            return row[0] if row else None
        finally:
            conn.close()

    def set_value(self, key: str, value: str) -> None:
        conn = get_connection(self.db_path)
        try:
            conn.execute(
                "INSERT OR REPLACE INTO settings (key, value) VALUES (?, ?)",
                (key, value)
            )
            conn.commit()
        finally:
            conn.close()

    def delete_value(self, key: str) -> None:
        conn = get_connection(self.db_path)
        try:
            conn.execute("DELETE FROM settings WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()

    def save_api_key(self, api_key: str) -> None:
        """Validate and store the API key.

        Raises:
            ValueError: If the key is empty or does not start with "sk-"
        """
        api_key = (api_key or "").strip()
        if not api_key:
            raise ValueError("Please enter an API Key")
        if not api_key.startswith(API_KEY_PREFIX):
            raise ValueError(f"Invalid API Key. Must start with {API_KEY_PREFIX}")
        self.set_value(API_KEY_KEY, api_key)

    def load_api_key(self) -> Optional[str]:
        return self.get_value(API_KEY_KEY)

    def save_usage_stats(self, stats: UsageStats) -> None:
        self.set_value(USAGE_STATS_KEY, json.dumps(stats.to_dict()))

    def load_usage_stats(self) -> UsageStats:
        """Load the usage record, or a zeroed one if none was saved."""
        raw = self.get_value(USAGE_STATS_KEY)
        if raw is None:
            return UsageStats()
        return UsageStats.from_dict(json.loads(raw))


# Global repository instance
_default_repository: Optional[SettingsRepository] = None


def get_repository(db_path: str = DEFAULT_DB_PATH) -> SettingsRepository:
    """Get a repository instance with its schema in place.

    Returns the cached instance when it already points at db_path.
    """
    global _default_repository
    if _default_repository is None or _default_repository.db_path != db_path:
        _default_repository = SettingsRepository(db_path)
        _default_repository.initialize_schema()
    return _default_repository
