# main.py
from __future__ import annotations

import argparse, json
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List

from debug import COMPONENTS, Debug
from errors import ConfigurationError
from machine import EnigmaMachine, MachineSettings
from wheels import ROTOR_ORDER

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()
debug.toggle_global(False)

DEFAULT_CONFIG = Path("enigma_config.json")


@dataclass(slots=True)
class Config:
    """Runtime switches that only affect how output is shown."""

    block: int = 5                  # display group size, 0 = ungrouped


# ────────────────────────────────────────────────────────────────────────
#  1. JSON loading helpers
# ────────────────────────────────────────────────────────────────────────


def load_config(path: str | Path) -> dict:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config file must hold a JSON object")
    required = {"rotors", "positions", "rings", "plugs"}
    missing = required - data.keys()
    if missing:
        raise ValueError(f"Missing keys in config: {', '.join(sorted(missing))}")
    return data


# ────────────────────────────────────────────────────────────────────────
#  2. Interactive question helpers
# ────────────────────────────────────────────────────────────────────────


def ask(prompt: str, reader: Callable[[str], str] | None = None) -> str:
    """Read & normalise an operator's response (uppercase, trimmed)."""
    return (reader or input)(prompt).strip().upper()


def parse_positions(raw: str) -> List[int | str]:
    """'0 4 21' → [0, 4, 21];  'ADU' or 'A D U' → ['A', 'D', 'U']."""
    items = raw.split()
    if len(items) == 1 and items[0].isalpha():
        items = list(items[0])
    return [int(t) if t.lstrip("-").isdigit() else t for t in items]


def parse_rings(raw: str) -> List[int | str]:
    return [int(t) if t.lstrip("-").isdigit() else t for t in raw.split()]


def prompt_settings(reader: Callable[[str], str] | None = None) -> MachineSettings:
    """Ask for every setting, re-asking until the whole set validates."""
    print("\nAvailable Rotors:", " ".join(ROTOR_ORDER))
    while True:
        rotors = ask("Rotor order, left to right (e.g. I II III): ", reader).split()
        positions = parse_positions(ask("Rotor positions (e.g. 0 0 0 or AAA): ", reader))
        rings = parse_rings(ask("Ring settings (e.g. 0 0 0): ", reader))
        plugs = ask("Plugboard pairs (e.g. AB CD, Enter for none): ", reader).split()
        try:
            return MachineSettings.build(rotors, positions, rings, plugs)
        except ConfigurationError as exc:
            print(f"❌  {exc}")


# ────────────────────────────────────────────────────────────────────────
#  3. Output helpers
# ────────────────────────────────────────────────────────────────────────


def group(text: str, block: int) -> str:
    if block <= 0:
        return text
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


def run_message(settings: MachineSettings, message: str, cfg: Config) -> str:
    # fresh machine per message: state never leaks between messages
    machine = EnigmaMachine.from_settings(settings)
    out = machine.process(message)
    return group(out, cfg.block) if out.isalpha() else out


# ────────────────────────────────────────────────────────────────────────
#  4. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a three-rotor Enigma")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to process. If omitted, an interactive prompt starts.")
    p.add_argument("--rotors", nargs=3, metavar="ROTOR", help=f"Rotor order left to right, from {', '.join(ROTOR_ORDER)}.")
    p.add_argument("--positions", default="0 0 0", help="Initial positions, numbers 0-25 or letters. Default: '0 0 0'")
    p.add_argument("--rings", default="0 0 0", help="Ring settings 0-25. Default: '0 0 0'")
    p.add_argument("--plugs", default="", help="Plugboard pairs, e.g. 'AB CD'. Default: none")
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON instead of the options above.")
    p.add_argument("--interactive", action="store_true", help="Ignore any JSON file and prompt for every setting.")
    p.add_argument("--block", type=int, default=5, help="Group letter-only output in blocks of N (0 = off). Default: 5")
    p.add_argument("--debug", action="append", choices=COMPONENTS, default=[], metavar="COMPONENT",
                   help=f"Log one component ({', '.join(COMPONENTS)}); repeatable.")
    p.add_argument("--log-file", metavar="FILE", help="Also write --debug traces to FILE.")
    return p.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> MachineSettings | None:
    """Return settings from --config / --rotors, or None to prompt."""
    if args.interactive:
        return None

    if args.config:
        return MachineSettings.from_dict(load_config(args.config))

    if args.rotors:
        return MachineSettings.build(
            args.rotors,
            parse_positions(args.positions.upper()),
            parse_rings(args.rings),
            args.plugs.upper().split(),
        )

    if DEFAULT_CONFIG.exists():
        ans = input(f"Found '{DEFAULT_CONFIG}'.  Load it? (Y/n) ").strip().lower()
        if ans in {"", "y", "yes"}:
            return MachineSettings.from_dict(load_config(DEFAULT_CONFIG))
    return None


# ────────────────────────────────────────────────────────────────────────
#  5. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)

    if args.debug:
        debug.toggle_global(True)
        debug.enable(*args.debug)
    if args.log_file:
        debug.log_to_file(args.log_file)

    try:
        settings = settings_from_args(args)
    except (ConfigurationError, ValueError, OSError) as exc:
        raise SystemExit(f"❌  Invalid configuration: {exc}")

    if settings is None:
        settings = prompt_settings()

    cfg = Config(block=args.block)

    # one-shot mode ------------------------------------------------------
    if args.message is not None:
        print(run_message(settings, args.message, cfg))
        return

    # interactive loop ---------------------------------------------------
    rotors = "-".join(spec.name for spec in settings.rotors)
    print(f"\nMachine ready: rotors {rotors}. Type blank line to quit.\n")
    while True:
        txt = input("Message: ")
        if not txt.strip():
            break
        print("Output: ", run_message(settings, txt, cfg))


if __name__ == "__main__":
    main()
