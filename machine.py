# machine.py  ─────────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from debug import Debug
from errors import ConfigurationError
from keyboard_and_plugboard import Keyboard, Plugboard
from rotor_and_reflector import Reflector, Rotor, RotorSpec
from wheels import ALPHA26, REFLECTOR_B, resolve_rotor

debug = Debug()

ROTOR_COUNT = 3


def _as_index(field: str, value: int | str, size: int) -> int:
    """Accept an index 0..size-1 or a window letter; reject anything else."""
    if isinstance(value, bool):
        raise ConfigurationError(field, f"{value!r} is not a number or letter")
    if isinstance(value, int):
        if 0 <= value < size:
            return value
        raise ConfigurationError(field, f"{value} outside 0-{size - 1}")
    if isinstance(value, str) and len(value) == 1 and value in ALPHA26:
        return ALPHA26.index(value)
    raise ConfigurationError(field, f"{value!r} is not a number 0-{size - 1} or a letter A-Z")


def _triple(field: str, values: Sequence) -> tuple:
    if isinstance(values, bytes) or not isinstance(values, Iterable):
        raise ConfigurationError(field, f"expected {ROTOR_COUNT} values, got {values!r}")
    values = tuple(values)
    if len(values) != ROTOR_COUNT:
        raise ConfigurationError(field, f"need exactly {ROTOR_COUNT} values, got {len(values)}")
    return values


@dataclass(frozen=True)
class MachineSettings:
    """Validated, normalised machine configuration for one session."""

    rotors: tuple[RotorSpec, ...]
    positions: tuple[int, ...]
    rings: tuple[int, ...]
    plugs: tuple[tuple[str, str], ...]

    @classmethod
    def build(
        cls,
        rotors: Sequence[int | str],
        positions: Sequence[int | str] = (0, 0, 0),
        rings: Sequence[int] = (0, 0, 0),
        plugs: Iterable[str | Sequence[str]] = (),
    ) -> "MachineSettings":
        specs = tuple(resolve_rotor(r) for r in _triple("rotors", rotors))

        pos = tuple(_as_index("positions", p, len(ALPHA26)) for p in _triple("positions", positions))

        ring_values = _triple("rings", rings)
        for r in ring_values:
            if isinstance(r, str):
                raise ConfigurationError("rings", f"{r!r} is not a number 0-{len(ALPHA26) - 1}")
        rng = tuple(_as_index("rings", r, len(ALPHA26)) for r in ring_values)

        if isinstance(plugs, str):
            plugs = plugs.split()
        board = Plugboard(plugs, ALPHA26)

        return cls(specs, pos, rng, board.pairs)

    @classmethod
    def from_dict(cls, cfg: Mapping) -> "MachineSettings":
        if not isinstance(cfg, Mapping):
            raise ConfigurationError("config", f"expected a mapping of settings, got {cfg!r}")
        if "rotors" not in cfg:
            raise ConfigurationError("rotors", "missing from configuration")
        return cls.build(
            cfg["rotors"],
            cfg.get("positions", (0, 0, 0)),
            cfg.get("rings", (0, 0, 0)),
            cfg.get("plugs", ()),
        )

    def to_dict(self) -> dict:
        return {
            "rotors": [spec.name for spec in self.rotors],
            "positions": list(self.positions),
            "rings": list(self.rings),
            "plugs": [a + b for a, b in self.plugs],
        }


class EnigmaMachine:
    def __init__(
        self,
        rotors: Sequence[int | str],
        positions: Sequence[int | str] = (0, 0, 0),
        rings: Sequence[int] = (0, 0, 0),
        plugs: Iterable[str | Sequence[str]] = (),
    ) -> None:
        self._assemble(MachineSettings.build(rotors, positions, rings, plugs))

    @classmethod
    def from_settings(cls, settings: MachineSettings) -> "EnigmaMachine":
        inst = object.__new__(cls)          # settings already validated
        inst._assemble(settings)
        return inst

    @classmethod
    def from_config(cls, cfg: Mapping) -> "EnigmaMachine":
        return cls.from_settings(MachineSettings.from_dict(cfg))

    def _assemble(self, settings: MachineSettings) -> None:
        self.settings = settings
        self.kb = Keyboard(ALPHA26)
        self.plugboard = Plugboard(settings.plugs, ALPHA26)
        self.reflector: Reflector = REFLECTOR_B
        self.rotors: tuple[Rotor, ...] = tuple(
            Rotor(spec, ring_setting=ring, position=pos)
            for spec, pos, ring in zip(settings.rotors, settings.positions, settings.rings)
        )

    # ── state views ─────────────────────────────────────────────

    @property
    def positions(self) -> tuple[int, ...]:
        return tuple(r.position for r in self.rotors)

    @property
    def window(self) -> str:
        return "".join(r.window for r in self.rotors)

    # ── stepping logic  ─────────────────────────────────────────

    def step_rotors(self) -> None:
        """Advance rotors for one key-press, double-step included."""
        left, middle, right = self.rotors

        # both conditions read before anything moves
        middle_at_notch = middle.at_notch()
        right_at_notch = right.at_notch()

        if middle_at_notch:
            left.step()
            middle.step()
        if right_at_notch:
            middle.step()
        right.step()

        debug.log("stepping", f"window {self.window}")

    # ── encipher one symbol  ────────────────────────────────────

    def encrypt_char(self, c: str) -> str:
        if c not in self.kb:
            return c
        self.step_rotors()

        signal = self.plugboard.forward(c)

        for rotor in reversed(self.rotors):
            signal = rotor.forward(signal)

        signal = self.reflector.reflect(signal)

        for rotor in self.rotors:
            signal = rotor.backward(signal)

        out_ch = self.plugboard.backward(signal)
        debug.log("encipher", f"{c} -> {out_ch}")
        return out_ch

    def process(self, text: str) -> str:
        # upper-case one character at a time; a character whose upper form
        # is longer ("ß" -> "SS") stays as typed so the length never changes
        out = []
        for ch in text:
            up = ch.upper()
            if up in self.kb:
                out.append(self.encrypt_char(up))
            else:
                out.append(up if len(up) == 1 else ch)
        return "".join(out)

    def __repr__(self) -> str:
        names = "-".join(r.name for r in self.rotors)
        return f"<EnigmaMachine {names} window={self.window} {self.plugboard!r}>"


def encrypt(text: str, settings: MachineSettings) -> str:
    """Run *text* through a freshly built machine; also decrypts."""
    return EnigmaMachine.from_settings(settings).process(text)


decrypt = encrypt
