from bot.core.landing import LANDING_PAGE
from bot.core.memory import ConversationSnapshot, parse_snapshot

__all__ = ["LANDING_PAGE", "ConversationSnapshot", "parse_snapshot"]
