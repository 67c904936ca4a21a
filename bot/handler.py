from __future__ import annotations

import logging
from typing import Any, Dict, List, Union

from bot.core.memory import ConversationSnapshot, parse_snapshot
from bot.tools.fact_lookup import FactClient, FactLookupError
from config.settings import Settings


logger = logging.getLogger(__name__)


def text_reply(content: str) -> Dict[str, str]:
    return {"type": "text", "content": content}


def build_response(snapshot: ConversationSnapshot, replies: List[Dict[str, str]]) -> Dict[str, Any]:
    return {
        "status": 200,
        "replies": replies,
        "conversation": {"memory": snapshot.memory},
    }


def lookup_fact(client: FactClient, animal: str, settings: Settings) -> str:
    try:
        return client.fetch_fact(animal)
    except FactLookupError as exc:
        logger.warning("Fact lookup for %r failed, sending fallback: %s", animal, exc)
        return settings.fallback_fact


def handle_bot_request(
    body: Union[bytes, str, Dict[str, Any], None],
    client: FactClient,
    settings: Settings,
) -> Dict[str, Any]:
    snapshot = parse_snapshot(body, settings.default_animal)
    logger.info(
        "Incoming bot call: animal=%s defaulted=%s memory_keys=%s",
        snapshot.selected_animal,
        snapshot.animal_defaulted,
        len(snapshot.memory),
    )

    fact = lookup_fact(client, snapshot.selected_animal, settings)
    count = snapshot.bump_counter()
    logger.info("Replying with fact #%s (%s chars)", count, len(fact))
    return build_response(snapshot, [text_reply(fact)])
