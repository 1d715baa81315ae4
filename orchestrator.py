"""
Export every table to its JSON file, one entity kind at a time.

Failures are collected as outcomes instead of ending the process; the caller
decides what a failed run means.
"""

import logging
from typing import Iterable

from exceptions import BankStoreError
from schemas import EntityKind, ExportOutcome, ExportReport
from snapshot import build_snapshot, serialize_snapshot

logger = logging.getLogger(__name__)

EXPORT_ORDER = (
    EntityKind.MANAGERS,
    EntityKind.CLIENTS,
    EntityKind.CARDS,
    EntityKind.ATMS,
    EntityKind.SERVICES,
)


def export_entity(repository, writer, kind: EntityKind) -> ExportOutcome:
    kind = EntityKind(kind)
    stage = "snapshot"
    try:
        records = build_snapshot(repository, kind)
        stage = "serialize"
        data = serialize_snapshot(records)
        stage = "write"
        backup_path = writer.write(kind, data)
    except BankStoreError as e:
        logger.error(f"❌ Export of {kind.value} failed during {stage}: {e}")
        return ExportOutcome(kind=kind, ok=False, stage=stage, error=str(e))

    logger.info(f"✅ Exported {len(records)} {kind.value} records")
    return ExportOutcome(
        kind=kind,
        ok=True,
        records=len(records),
        path=writer.target_path(kind),
        backup_path=backup_path,
    )


def export_all(repository, writer, kinds: Iterable[EntityKind] = EXPORT_ORDER,
               stop_on_error: bool = True) -> ExportReport:
    """
    Export ``kinds`` in order.

    With ``stop_on_error`` the run halts at the first failing kind and later
    kinds are not attempted; otherwise every kind is tried.
    """
    report = ExportReport()
    for kind in kinds:
        kind = EntityKind(kind)
        outcome = export_entity(repository, writer, kind)
        report.outcomes.append(outcome)
        if not outcome.ok and stop_on_error:
            report.halted = True
            logger.warning(f"Export halted after {kind.value}")
            break
    return report
