# debug.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict

# one switch per stage of the signal path
COMPONENTS = ("keyboard", "plugboard", "rotor", "reflector", "stepping", "encipher")

FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


class Debug:
    """Per-component trace switches over the shared ``ENIGMA`` logger.

    Every module builds its own ``Debug()``; they all read one switch map,
    so ``main.py --debug stepping`` reaches the rotor code as well.
    Nothing is logged until a component is enabled.
    """

    _root_configured: bool = False
    _switches: Dict[str, bool] = {c: False for c in COMPONENTS}
    _active: bool = True

    def __init__(self) -> None:
        if not Debug._root_configured:
            logging.basicConfig(level=logging.DEBUG, format=FORMAT, datefmt=DATEFMT)
            Debug._root_configured = True
        self.logger = logging.getLogger("ENIGMA")
        # the switches gate output, not the level
        self.logger.setLevel(logging.DEBUG)

    @property
    def enabled(self) -> bool:
        return Debug._active

    @property
    def components(self) -> Dict[str, bool]:
        return Debug._switches

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if Debug._active and Debug._switches.get(component, False):
            self.logger.debug("[%s] %s", component.upper(), message)

    def log_to_file(self, path: str | Path) -> logging.FileHandler:
        """Also write traces to *path*; returns the handler so it can be closed."""
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(FORMAT, DATEFMT))
        self.logger.addHandler(handler)
        return handler

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._switches[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._switches[c] = False

    def toggle(self, component: str) -> None:
        self._require(component)
        Debug._switches[component] = not Debug._switches[component]

    def toggle_global(self, state: bool) -> None:
        """Master switch; component states are kept while it is off."""
        Debug._active = state

    def status(self) -> Dict[str, bool]:
        return dict(Debug._switches)

    def _require(self, component: str) -> None:
        if component not in Debug._switches:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        active = [k for k, v in Debug._switches.items() if v]
        return f"<Debug enabled={self.enabled} active={active}>"
