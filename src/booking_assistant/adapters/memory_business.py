"""
In-memory BusinessDirectory for testing. No database required.
"""

from booking_assistant.domain.business import BusinessDirectory, BusinessSnapshot


class InMemoryBusinessDirectory(BusinessDirectory):

    def __init__(self, *snapshots: BusinessSnapshot):
        self._store: dict[str, BusinessSnapshot] = {}
        for snapshot in snapshots:
            self.store(snapshot)

    def fetch(self, business_id: str) -> BusinessSnapshot | None:
        return self._store.get(business_id)

    def store(self, snapshot: BusinessSnapshot) -> None:
        self._store[snapshot.business_id] = snapshot
