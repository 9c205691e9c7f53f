import json
import logging
import os
from typing import Any, Dict, Optional
from tiksave.config.settings import config

logger = logging.getLogger("tiksave")

LOCALES_DIR = os.path.join(os.path.dirname(__file__), "locales")

class I18n:
    """Message catalog keyed by dotted paths ("error.invalid_url")"""

    def __init__(self, locales_dir: str = LOCALES_DIR):
        self.default_locale = config.i18n.default_locale
        self.catalogs: Dict[str, Dict[str, Any]] = {}
        for filename in sorted(os.listdir(locales_dir)):
            if not filename.endswith(".json"):
                continue
            with open(os.path.join(locales_dir, filename), "r", encoding="utf-8") as f:
                self.catalogs[filename[:-5]] = json.load(f)
        logger.debug(f"Loaded locales: {', '.join(self.catalogs)}")

    def _lookup(self, locale: str, key: str) -> Optional[str]:
        node: Any = self.catalogs.get(locale, {})
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None

    def get(self, key: str, locale: Optional[str] = None, **kwargs) -> str:
        """Translated message; falls back to the default locale, then to the key itself"""
        message = self._lookup(locale or self.default_locale, key)
        if message is None:
            message = self._lookup(self.default_locale, key)
        if message is None:
            return key
        try:
            return message.format(**kwargs)
        except KeyError:
            return message

i18n = I18n()
