"""YAML message catalog: one ``<locale>.yaml`` file of ``key: text`` pairs per language."""

import logging
from pathlib import Path

import yaml

from blog_console.application.interfaces import Localizer

logger = logging.getLogger(__name__)


class YamlLocalizer(Localizer):
    """Looks messages up in ``<messages_dir>/<locale>.yaml``.

    Unknown keys fall back to the key itself so a missing translation never
    breaks a response.
    """

    def __init__(self, messages: dict[str, str]):
        self._messages = messages

    @classmethod
    def from_directory(cls, messages_dir: str | Path, locale: str) -> "YamlLocalizer":
        path = Path(messages_dir) / f"{locale}.yaml"
        if not path.exists():
            logger.warning("No message catalog for locale '%s' at %s", locale, path)
            return cls({})
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Message catalog {path} must be a mapping")
        return cls({str(k): str(v) for k, v in data.items()})

    def message(self, key: str) -> str:
        text = self._messages.get(key)
        if text is None:
            logger.debug("Missing message for key '%s'", key)
            return key
        return text
