"""Tests for the Supabase settings repository."""

from dataclasses import dataclass, field

from picngo.adapters.supabase_settings_repository import SupabaseSettingsRepository
from picngo.domain.settings import Language
from picngo.services.user_settings import SettingsService


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    rows: dict[str, dict[str, object]] = field(default_factory=dict)
    last_payload: object | None = None
    last_on_conflict: str | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        self.last_filters = []
        return self

    def upsert(  # type: ignore[no-untyped-def]
        self, payload, on_conflict: str = ""
    ) -> "FakeTable":
        self._action = "upsert"
        self.last_payload = payload
        self.last_on_conflict = on_conflict
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        if self._action == "upsert":
            row = dict(self.last_payload)  # type: ignore[arg-type]
            self.rows[str(row["key"])] = row
            return FakeResponse(data=[row])
        matches = [
            row
            for row in self.rows.values()
            if all(row.get(column) == value for column, value in self.last_filters)
        ]
        return FakeResponse(data=matches)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_settings_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    repository = SupabaseSettingsRepository(client)

    assert repository.get("openai_api_key") is None

    repository.set("openai_api_key", "sk-test")

    table = client.tables["app_settings"]
    assert table.last_on_conflict == "key"
    assert table.last_payload["key"] == "openai_api_key"  # type: ignore[index]
    assert "updated_at" in table.last_payload  # type: ignore[operator]
    assert repository.get("openai_api_key") == "sk-test"
    assert table.last_filters == [("key", "openai_api_key")]


def test_settings_service_over_supabase() -> None:
    service = SettingsService(SupabaseSettingsRepository(FakeSupabaseClient()))

    service.save_api_key("sk-test")
    settings = service.set_language(Language.JAPANESE)

    assert settings.api_key == "sk-test"
    assert settings.language is Language.JAPANESE
