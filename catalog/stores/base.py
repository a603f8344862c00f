from abc import ABC, abstractmethod


class BaseRecordStore(ABC):
    @abstractmethod
    def fetch_stale(self, older_than, cancel_event=None) -> list:
        """Return products never synced or last synced strictly before ``older_than``."""

    @abstractmethod
    def update(self, product) -> None:
        """Stage a product for the next commit. Nothing is written yet."""

    @abstractmethod
    def commit(self, cancel_event=None) -> int:
        """Write every staged product in one all-or-nothing operation and return the count."""
