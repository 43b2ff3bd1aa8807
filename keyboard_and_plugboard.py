# keyboard_and_plugboard.py
from __future__ import annotations

from collections.abc import Iterable, Sequence

from debug import Debug
from errors import ConfigurationError

debug = Debug()

MAX_PAIRS = 13


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    """The machine's alphabet: letter ↔ index lookup in both directions."""

    def __init__(self, alphabet: str) -> None:
        self.alphabet: str = alphabet
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(alphabet)
        }

    # letter → integer signal
    def forward(self, letter: str) -> int:
        try:
            signal = self.alpha_to_index[letter]
        except KeyError:
            raise ValueError(
                f"Invalid character {letter!r} for current alphabet."
            )
        debug.log("keyboard", f"{letter}->{signal}")
        return signal

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if not (0 <= signal < len(self.alphabet)):
            hi = len(self.alphabet) - 1
            raise ValueError(f"Signal {signal} out of range 0–{hi}")
        return self.alphabet[signal]

    def __contains__(self, letter: object) -> bool:
        return letter in self.alpha_to_index

    def __len__(self) -> int:
        return len(self.alphabet)


# ── swap ──────────────────────────────────────────────────────────
def swap(c: str, pairs: Iterable[Sequence[str]]) -> str:
    """Return the partner of *c* in *pairs*, or *c* if it is unplugged."""
    for a, b in pairs:
        if c == a:
            return b
        if c == b:
            return a
    return c


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    def __init__(
        self,
        pairs: Iterable[str | Sequence[str]],
        alphabet: str,
    ) -> None:
        self.alphabet: str = alphabet
        self.mapping: dict[str, str] = {ch: ch for ch in alphabet}

        if isinstance(pairs, (str, bytes)) or not isinstance(pairs, Iterable):
            raise ConfigurationError("plugs", f"expected a list of pairs, got {pairs!r}")
        pairs = list(pairs)
        if len(pairs) > MAX_PAIRS:
            raise ConfigurationError("plugs", f"too many pairs ({len(pairs)} > {MAX_PAIRS})")

        normalised: list[tuple[str, str]] = []
        used: set[str] = set()

        for raw in pairs:
            # normalise to (a, b)
            if isinstance(raw, str):
                members = tuple(raw)
            elif isinstance(raw, Sequence) and not isinstance(raw, bytes):
                members = tuple(raw)
            else:
                raise ConfigurationError("plugs", f"pair {raw!r} is neither a string nor a sequence")
            if len(members) != 2:
                raise ConfigurationError("plugs", f"pair {raw!r} must be exactly 2 letters")
            a, b = members

            for m in (a, b):
                # dict lookup, so "" and "AB" cannot slip through as substrings
                if not isinstance(m, str) or len(m) != 1 or m not in self.mapping:
                    raise ConfigurationError("plugs", f"symbol {m!r} is not a letter of the alphabet")
            if a == b:
                raise ConfigurationError("plugs", f"cannot plug {a!r} to itself")
            if a in used or b in used:
                dup = a if a in used else b
                raise ConfigurationError("plugs", f"letter {dup!r} already used in another pair")

            normalised.append((a, b))
            used.update((a, b))

        # passed validation → commit swaps
        for a, b in normalised:
            self.mapping[a], self.mapping[b] = b, a
        self.pairs: tuple[tuple[str, str], ...] = tuple(normalised)

    # one private helper does the job for both directions
    def _map(self, letter: str) -> str:
        mapped = self.mapping.get(letter, letter)
        debug.log("plugboard", f"{letter}->{mapped}")
        return mapped

    forward = _map        # alias: signal in
    backward = _map       # alias: signal out

    def __len__(self) -> int:
        return len(self.pairs)

    # nicety for debugging
    def __repr__(self) -> str:
        swaps = [f"{a}{b}" for a, b in self.pairs]
        return f"<Plugboard {' '.join(swaps)}>"
