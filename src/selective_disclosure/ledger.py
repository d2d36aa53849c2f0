"""
selective_disclosure/ledger.py
Owned, in-memory holder of per-subject store snapshots.
"""
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, Sequence, Tuple, Union

from .disclosure import DisclosureResult, disclose
from .mask import DisclosureMask
from .observability import get_logger
from .store import DataStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class StoreSnapshot:
    """One complete, immutable version of a subject's data."""
    subject_id: Hashable
    version: int
    store: DataStore


class SubjectLedger:
    """Maps subject ids to their current store snapshot.

    Uploads replace the snapshot reference atomically, so an in-flight
    disclosure always sees one complete store. Nothing is persisted;
    callers own the ledger and pass it where it is needed.

    Example:
        ledger = SubjectLedger()
        ledger.upload("riley", store)
        result = ledger.disclose("riley", mask)
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._snapshots: Dict[Hashable, StoreSnapshot] = {}

    def upload(self, subject_id: Hashable, store: DataStore) -> StoreSnapshot:
        """Install a new snapshot for a subject.

        Returns:
            The installed StoreSnapshot, version 1 on first upload
        """
        if not isinstance(store, DataStore):
            raise TypeError("store must be a DataStore")
        with self._lock:
            previous = self._snapshots.get(subject_id)
            version = previous.version + 1 if previous else 1
            snapshot = StoreSnapshot(subject_id=subject_id, version=version, store=store)
            self._snapshots[subject_id] = snapshot
        logger.info(
            "snapshot_uploaded",
            subject_id=str(subject_id),
            version=version,
            fields=len(store),
        )
        return snapshot

    def upload_from(
        self,
        subject_id: Hashable,
        witness: Callable[[], DataStore],
    ) -> StoreSnapshot:
        """Fetch a complete store from a data source, then upload it."""
        return self.upload(subject_id, witness())

    def snapshot(self, subject_id: Hashable) -> StoreSnapshot:
        """Current snapshot for a subject.

        Raises:
            KeyError: If nothing was uploaded for the subject
        """
        with self._lock:
            try:
                return self._snapshots[subject_id]
            except KeyError:
                raise KeyError(f"No data uploaded for subject: {subject_id!r}") from None

    def disclose(
        self,
        subject_id: Hashable,
        mask: Union[DisclosureMask, Sequence[bool]],
    ) -> DisclosureResult:
        """Filter the subject's current snapshot with ``mask``."""
        snapshot = self.snapshot(subject_id)
        result = disclose(mask, snapshot.store)
        withheld = len(result.withheld())
        logger.debug(
            "disclosure_applied",
            subject_id=str(subject_id),
            version=snapshot.version,
            schema=snapshot.store.registry.name,
            present=len(result),
            disclosed=len(result) - withheld,
            withheld=withheld,
            requested_absent=len(result.requested_absent),
        )
        return result

    def subjects(self) -> Tuple[Hashable, ...]:
        with self._lock:
            return tuple(self._snapshots)

    def __contains__(self, subject_id: Hashable) -> bool:
        with self._lock:
            return subject_id in self._snapshots

    def __len__(self) -> int:
        with self._lock:
            return len(self._snapshots)
