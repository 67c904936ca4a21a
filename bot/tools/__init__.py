from bot.tools.fact_lookup import FactClient, FactLookupError

__all__ = ["FactClient", "FactLookupError"]
