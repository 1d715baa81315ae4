import json
import logging
from typing import List, Sequence

from pydantic import BaseModel

from exceptions import SerializationFailedError
from schemas import EntityKind

logger = logging.getLogger(__name__)

INDENT = 3


def build_snapshot(repository, kind: EntityKind) -> List[BaseModel]:
    """Full point-in-time copy of one table, in the order the store returned it."""
    return repository.fetch_all(kind)


def serialize_snapshot(records: Sequence[BaseModel]) -> bytes:
    """Indented JSON array of flat objects; field order follows the record type."""
    logger.debug(f"Serializing {len(records)} records")
    try:
        payload = [record.model_dump(mode="json") for record in records]
        return json.dumps(payload, indent=INDENT, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationFailedError(f"can't serialize snapshot: {e}") from e
