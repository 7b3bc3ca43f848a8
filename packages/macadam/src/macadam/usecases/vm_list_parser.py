"""VM list parser use case for `macadam list --format json` output."""

from __future__ import annotations

import dataclasses
import json
import logging

from macadam.domain.naming import VmNamespace
from macadam.domain.vm import VmRecord

logger = logging.getLogger(__name__)


class VmListParser:
    """Parses the macadam VM listing into a caller's own records.

    Parsing is lenient so that output from newer or older macadam releases
    never fails a listing:
    - empty output means no VMs
    - a top-level value that is not an array yields no VMs
    - elements missing any record field are dropped

    Records outside the caller's namespace are filtered out and the
    remaining ones are renamed to display names, preserving order.
    """

    def __init__(self, namespace: VmNamespace) -> None:
        self._namespace = namespace

    def __call__(self, stdout: str) -> list[VmRecord]:
        if not stdout.strip():
            return []

        try:
            decoded = json.loads(stdout)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring undecodable macadam list output: %s", e)
            return []

        if not isinstance(decoded, list):
            logger.debug("Ignoring non-array macadam list output")
            return []

        records: list[VmRecord] = []
        for element in decoded:
            if not VmRecord.is_valid(element):
                logger.debug("Dropping invalid VM record: %r", element)
                continue
            record = VmRecord.from_json(element)
            if not isinstance(record.name, str) or not self._namespace.owns(
                record.name
            ):
                continue
            records.append(
                dataclasses.replace(
                    record, name=self._namespace.to_display(record.name)
                )
            )
        return records
