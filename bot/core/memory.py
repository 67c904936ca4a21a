from __future__ import annotations

"""Conversation memory handling. No server-side memory.

The chat platform owns the per-conversation memory and sends it back on every
webhook call. We read the selected animal out of it, bump the fun fact counter
and hand the memory back; everything else in it is passed through untouched.
"""

import json
import logging
import math
import numbers
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator


logger = logging.getLogger(__name__)

COUNTER_KEY = "funfacts"
ANIMAL_KEY = "animal"


class AnimalEntity(BaseModel):
    raw: str = Field(..., description="Animal name as typed by the user")

    @field_validator("raw")
    @classmethod
    def _normalize(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("animal name is empty")
        return cleaned


class _Conversation(BaseModel):
    memory: Dict[str, Any]


class _BotRequest(BaseModel):
    conversation: _Conversation


class ConversationSnapshot(BaseModel):
    memory: Dict[str, Any] = Field(default_factory=dict)
    selected_animal: str
    animal_defaulted: bool = False
    memory_defaulted: bool = False

    def bump_counter(self) -> int:
        """Set ``funfacts`` to 1 on first use, otherwise add one to it."""
        count = next_count(self.memory.get(COUNTER_KEY))
        self.memory[COUNTER_KEY] = count
        return count


def next_count(current: Any) -> int:
    """Return the counter value after ``current``; never lower than ``current``."""
    if isinstance(current, str):
        try:
            current = int(current.strip())
        except ValueError:
            try:
                current = float(current.strip())
            except ValueError:
                return 1
    if isinstance(current, numbers.Real) and math.isfinite(current):
        return int(current) + 1
    return 1


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _decode_body(body: Union[bytes, str, Dict[str, Any], None]) -> Any:
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8")
    if isinstance(body, str):
        body = json.loads(body, parse_constant=_reject_constant)
    # Lone surrogates and non-finite floats can't go back out as JSON
    json.dumps(body, allow_nan=False, ensure_ascii=False).encode("utf-8")
    return body


def _extract_memory(payload: Any) -> Optional[Dict[str, Any]]:
    try:
        return _BotRequest.model_validate(payload).conversation.memory
    except ValidationError as exc:
        logger.info("No usable conversation.memory in request (%s errors)", exc.error_count())
        return None


def _extract_animal(memory: Dict[str, Any]) -> Optional[str]:
    try:
        return AnimalEntity.model_validate(memory.get(ANIMAL_KEY)).raw
    except ValidationError as exc:
        logger.info("No usable animal in memory (%s errors)", exc.error_count())
        return None


def parse_snapshot(
    body: Union[bytes, str, Dict[str, Any], None],
    default_animal: str,
) -> ConversationSnapshot:
    """Parse a webhook body, substituting defaults for whatever is missing.

    Only decoding and shape errors are absorbed here. The request is never
    rejected: a bad body yields an empty memory and ``default_animal``.
    """
    try:
        payload = _decode_body(body)
    except (ValueError, TypeError) as exc:
        logger.info("Request body is not valid JSON, using defaults: %s", exc)
        payload = None

    memory = _extract_memory(payload)
    animal = _extract_animal(memory) if memory is not None else None

    return ConversationSnapshot(
        memory=memory if memory is not None else {},
        selected_animal=animal or default_animal,
        animal_defaulted=animal is None,
        memory_defaulted=memory is None,
    )
