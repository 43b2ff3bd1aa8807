# wheels.py
from __future__ import annotations

from typing import Dict, Tuple

from errors import ConfigurationError
from rotor_and_reflector import Reflector, RotorSpec

ALPHA26 = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# ────────────────────────────────────────────────────────────────────────
#  Wheel database
# ────────────────────────────────────────────────────────────────────────

I   = RotorSpec("I",   "EKMFLGDQVZNTOWYHXUSPAIBRCJ", notch="Q", alphabet=ALPHA26)
II  = RotorSpec("II",  "AJDKSIRUXBLHWTMCQGZNPYFVOE", notch="E", alphabet=ALPHA26)
III = RotorSpec("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", notch="V", alphabet=ALPHA26)

REFLECTOR_B = Reflector("YRUHQSLDPXNGOKMIEBFZCWVJAT", alphabet=ALPHA26)

# catalog index ↔ name, so 0/1/2 and "I"/"II"/"III" address the same wheel
ROTOR_ORDER: Tuple[str, ...] = ("I", "II", "III")

ROTORS: Dict[str, RotorSpec] = {"I": I, "II": II, "III": III}


def resolve_rotor(identifier: int | str) -> RotorSpec:
    """Look a wheel up by catalog index (0-2) or roman name."""
    if isinstance(identifier, bool):
        raise ConfigurationError("rotors", f"unknown rotor {identifier!r}")
    if isinstance(identifier, int):
        if 0 <= identifier < len(ROTOR_ORDER):
            return ROTORS[ROTOR_ORDER[identifier]]
        raise ConfigurationError(
            "rotors", f"rotor index {identifier} outside catalog 0-{len(ROTOR_ORDER) - 1}"
        )
    if isinstance(identifier, str) and identifier.strip().upper() in ROTORS:
        return ROTORS[identifier.strip().upper()]
    raise ConfigurationError(
        "rotors", f"unknown rotor {identifier!r}; choose from {', '.join(ROTOR_ORDER)}"
    )


__all__ = [
    "ALPHA26",
    "REFLECTOR_B",
    "ROTORS",
    "ROTOR_ORDER",
    "resolve_rotor",
]
