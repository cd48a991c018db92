from ctbrief.store.file_store import FileSnapshotStore, resolve_store
from ctbrief.store.interfaces import BaseSnapshotStore

__all__ = ["BaseSnapshotStore", "FileSnapshotStore", "resolve_store"]
