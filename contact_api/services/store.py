# SPDX-License-Identifier: Apache-2.0

"""
In-memory store for contact form submissions.

Records live for the process lifetime only. The store is an explicit
instance handed to the services that need it; there is no module-level
singleton.
"""

import logging
import threading
from typing import Callable, Dict, List, Optional

from opentelemetry import trace

from ..models.entities import ContactSubmission

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)


class DuplicateRecordError(Exception):
    """Raised when an insert reuses an id or a protocol already stored."""
    pass


class ContactFormStore:
    """
    Append-only keyed collection of ContactSubmission records.

    Ids are allocated from a counter that starts at 1 and never goes back,
    except through clear(). A re-entrant lock guards the counter and the
    indexes, so "allocate id + insert" can run as one unit via reserve().
    """

    def __init__(self):
        self._records: Dict[int, ContactSubmission] = {}
        self._by_protocol: Dict[str, int] = {}
        self._current_id = 0
        self._lock = threading.RLock()

    def next_id(self) -> int:
        """Allocate the next identifier."""
        with self._lock:
            self._current_id += 1
            return self._current_id

    def add(self, record: ContactSubmission) -> ContactSubmission:
        """
        Insert a record with a pre-allocated id.

        Raises:
            DuplicateRecordError: id or protocol already present
        """
        with self._lock:
            if record.id in self._records:
                raise DuplicateRecordError(f"Record id {record.id} already stored")
            if record.protocolo in self._by_protocol:
                raise DuplicateRecordError(f"Protocol {record.protocolo} already stored")

            self._records[record.id] = record
            self._by_protocol[record.protocolo] = record.id

        logger.debug(
            "Contact submission stored",
            extra={"extra_fields": {"record_id": record.id, "protocol": record.protocolo}}
        )
        return record

    def reserve(self, build: Callable[[int], ContactSubmission]) -> ContactSubmission:
        """
        Allocate an id, build the record with it and insert it atomically.

        Args:
            build: Factory receiving the allocated id

        Returns:
            The stored record
        """
        with tracer.start_as_current_span("store.reserve") as span:
            with self._lock:
                record = build(self.next_id())
                self.add(record)
            span.set_attribute("store.record_id", record.id)
            return record

    def get_all(self) -> List[ContactSubmission]:
        with self._lock:
            return list(self._records.values())

    def get_by_id(self, record_id: int) -> Optional[ContactSubmission]:
        """Fetch by id; None when absent."""
        with self._lock:
            return self._records.get(record_id)

    def get_by_protocol(self, protocol: str) -> Optional[ContactSubmission]:
        """Fetch by protocol; protocols are unique because add() enforces it."""
        with self._lock:
            record_id = self._by_protocol.get(protocol)
            return self._records.get(record_id) if record_id is not None else None

    def protocol_exists(self, protocol: str) -> bool:
        with self._lock:
            return protocol in self._by_protocol

    def get_by_urgency(self, urgency: str) -> List[ContactSubmission]:
        with self._lock:
            return [r for r in self._records.values() if r.nivel_urgencia == urgency]

    def get_by_legal_area(self, area: str) -> List[ContactSubmission]:
        with self._lock:
            return [r for r in self._records.values() if r.area_juridica == area]

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        """Drop every record and reset the id counter. Test isolation only."""
        with self._lock:
            self._records.clear()
            self._by_protocol.clear()
            self._current_id = 0
