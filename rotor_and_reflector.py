# rotor_and_reflector.py
from __future__ import annotations

from dataclasses import dataclass, field

from debug import Debug
from errors import ConfigurationError
from keyboard_and_plugboard import Keyboard

debug = Debug()


@dataclass(frozen=True)
class RotorSpec:
    """Fixed wiring and notch of one catalog wheel."""

    name: str
    wiring: str
    notch: str
    alphabet: str
    _rev: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if sorted(self.wiring) != sorted(self.alphabet):
            raise ConfigurationError("wiring", f"rotor {self.name} wiring must be a permutation of the alphabet")
        if len(self.notch) != 1 or self.notch not in self.alphabet:
            raise ConfigurationError("notch", f"rotor {self.name} notch {self.notch!r} must be one alphabet letter")
        object.__setattr__(self, "_rev", tuple(self.wiring.index(c) for c in self.alphabet))


class Rotor:
    def __init__(self, spec: RotorSpec, ring_setting: int = 0, position: int = 0) -> None:
        self.spec = spec
        self.kb = Keyboard(spec.alphabet)
        self.size = len(spec.alphabet)

        self.ring_setting = ring_setting % self.size
        self.position = position % self.size

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def notch(self) -> str:
        return self.spec.notch

    @property
    def window(self) -> str:
        """Letter currently showing in the machine's window."""
        return self.kb.backward(self.position)

    # ── position helpers ─────────────────────────────────────────
    def set_position(self, value: int | str) -> "Rotor":
        if isinstance(value, str):
            value = self.kb.forward(value)
        self.position = value % self.size
        return self

    # ── stepping --------------------------------------------------
    def step(self) -> None:
        self.position = (self.position + 1) % self.size
        debug.log("rotor", f"{self.name} -> pos {self.position}")

    def at_notch(self) -> bool:
        return self.window == self.notch

    # ── signal paths ---------------------------------------------
    def forward(self, c: str) -> str:
        shift = (self.kb.forward(c) + self.position - self.ring_setting) % self.size
        return self.spec.wiring[shift]

    def backward(self, c: str) -> str:
        idx = self.spec._rev[self.kb.forward(c)]
        return self.kb.backward((idx - self.position + self.ring_setting) % self.size)

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<Rotor {self.name} pos={self.position} ring={self.ring_setting}>"


class Reflector:
    def __init__(self, wiring: str, alphabet: str) -> None:
        if len(wiring) != len(alphabet):
            raise ConfigurationError("reflector", "wiring length must match alphabet length")

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, c in enumerate(wiring):
            if c not in alphabet:
                raise ConfigurationError("reflector", f"symbol {c!r} not in alphabet")
            j = alphabet.index(c)
            if wiring[j] != alphabet[i] or i == j:
                raise ConfigurationError("reflector", "wiring must be an involution with no fixed points")

        self.alphabet = alphabet
        self.wiring = wiring
        self.kb = Keyboard(alphabet)

    def reflect(self, c: str) -> str:
        out = self.wiring[self.kb.forward(c)]
        debug.log("reflector", f"{c}->{out}")
        return out

    def __repr__(self) -> str:
        return f"<Reflector {self.wiring}>"
