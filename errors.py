# errors.py
from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised while building a machine from settings that break a rule.

    `field` names the offending setting (``"rotors"``, ``"positions"``,
    ``"rings"``, ``"plugs"``, ``"wiring"`` ...) so a caller can tell the
    operator exactly what to fix.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
