"""Supabase repository for user settings."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from picngo.services.user_settings import SettingsRepository


@dataclass
class SupabaseSettingsRepository(SettingsRepository):
    """Supabase implementation storing settings as key/value rows."""

    client: Client
    table_name: str = "app_settings"

    def get(self, key: str) -> str | None:
        """Return the stored value for a key."""
        response = (
            self.client.table(self.table_name)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def set(self, key: str, value: str) -> None:
        """Insert or update the value for a key."""
        self.client.table(self.table_name).upsert(
            {
                "key": key,
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="key",
        ).execute()
