"""In-memory snapshot storage."""


class InMemorySnapshotStorage:
    """Dict-backed ISnapshotStorage for tests and ephemeral runs."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.entries: dict[str, str] = dict(initial or {})

    async def load(self, key: str) -> str | None:
        return self.entries.get(key)

    async def save(self, key: str, payload: str) -> None:
        self.entries[key] = payload
