# settings_generator.py
from __future__ import annotations

import argparse
import json
from pathlib import Path
from random import Random, SystemRandom
from typing import List

from keyboard_and_plugboard import MAX_PAIRS
from machine import MachineSettings
from wheels import ALPHA26, ROTOR_ORDER

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(alpha: str, k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    max_possible = len(alpha) // 2
    k = max(0, min(k, max_possible))
    pool = list(alpha)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate(rng: Random | SystemRandom, pairs: int = 10) -> MachineSettings:
    """Draw one random, already-validated daily setting."""
    rotors = rng.sample(ROTOR_ORDER, len(ROTOR_ORDER))
    positions = [rng.randrange(len(ALPHA26)) for _ in rotors]
    rings = [rng.randrange(len(ALPHA26)) for _ in rotors]
    plugs = choose_pairs(ALPHA26, pairs, rng)
    return MachineSettings.build(rotors, positions, rings, plugs)


def parse_cli(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a random Enigma daily config")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument(
        "--pairs",
        type=int,
        default=10,
        help=f"Number of plugboard pairs, 0-{MAX_PAIRS} (default: 10)",
    )
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("enigma_config.json"),
        help="Destination JSON file (default: enigma_config.json)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_cli(argv)
    if not 0 <= args.pairs <= MAX_PAIRS:
        raise SystemExit(f"--pairs must be within 0-{MAX_PAIRS}")

    settings = generate(build_rng(args.seed), args.pairs)
    cfg = settings.to_dict()

    args.outfile.write_text(json.dumps(cfg, indent=2), encoding="utf-8")
    print(f"✅  Wrote {args.outfile}\n"
        f"   rotors      : {cfg['rotors']}\n"
        f"   positions   : {cfg['positions']}\n"
        f"   rings       : {cfg['rings']}\n"
        f"   plug pairs  : {len(cfg['plugs'])}")


if __name__ == "__main__":
    main()
