"""Locate and decode protocol events in mined transactions."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from hexbytes import HexBytes

from ..exceptions import InvalidResponseError
from ..types import DomainEvent, SubmittedTransaction
from .descriptors import EventSchema

logger = logging.getLogger(__name__)


class EventExtractor:
    """Decode the first log matching a prioritised list of event topics."""

    def __init__(self, schemas: Iterable[EventSchema]) -> None:
        self._schemas: dict[bytes, EventSchema] = {}
        for schema in schemas:
            self._schemas.setdefault(bytes(schema.topic), schema)

    def extract(
        self,
        transaction: SubmittedTransaction | Mapping[str, Any],
        candidate_topics: Sequence[bytes | str],
    ) -> DomainEvent | None:
        """Return the decoded event for the highest-priority matching topic.

        Candidates are tried in order; for each, logs are scanned in emission
        order and the first hit wins. Returns ``None`` when nothing matches.
        """

        if isinstance(transaction, SubmittedTransaction):
            logs = transaction.logs
        else:
            logs = list(transaction.get("logs") or [])

        for candidate in candidate_topics:
            topic = bytes(HexBytes(candidate))
            schema = self._schemas.get(topic)
            if schema is None:
                raise InvalidResponseError(
                    "No event schema registered for candidate topic",
                    details={"topic": HexBytes(topic).to_0x_hex()},
                )

            for log in logs:
                topics = log.get("topics") or []
                if topics and bytes(HexBytes(topics[0])) == topic:
                    event = schema.decode(log)
                    logger.debug(
                        "Matched %s event at block=%s log_index=%s",
                        event.name,
                        event.block_number,
                        event.log_index,
                    )
                    return event

        return None
