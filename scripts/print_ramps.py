"""Print generated color ramps as a table or JSON.

Usage:
    python scripts/print_ramps.py --family blue --family gray
    python scripts/print_ramps.py --hue 200 --steps 7 --format json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add parent directory to path so we can import colortokens
sys.path.insert(0, str(Path(__file__).parent.parent))

from colortokens import (
    FAMILY_HUES,
    STOPS,
    ColorTokensError,
    family_ramp,
    get_color_ramp,
    list_families,
)
from colortokens.defaults import RAMP_STOPS
from colortokens.ramps.families import GRAYSCALE_FAMILIES


def _stop_labels(count: int) -> list[str]:
    if count == len(STOPS):
        return [str(stop) for stop in STOPS]
    return [str(i) for i in range(count)]


def _collect(args) -> list[tuple[str, list]]:
    ramps = []
    for name in args.family:
        ramp = family_ramp(name)
        if args.steps != RAMP_STOPS or args.grayscale:
            ramp = get_color_ramp(
                FAMILY_HUES[name],
                steps=args.steps,
                is_grayscale=args.grayscale or name in GRAYSCALE_FAMILIES,
            )
        ramps.append((name, ramp))
    for hue in args.hue:
        ramps.append((f"H{hue:g}", get_color_ramp(hue, steps=args.steps, is_grayscale=args.grayscale)))
    return ramps


def _as_json(ramps) -> str:
    payload = {}
    for name, ramp in ramps:
        payload[name] = [
            {
                "stop": label,
                "l": round(color.l, 3),
                "c": round(color.c, 3),
                "h": round(color.h, 3),
                "hex": color.to_display_color().to_hex(),
            }
            for label, color in zip(_stop_labels(len(ramp)), ramp)
        ]
    return json.dumps(payload, indent=2)


def _as_table(ramps) -> str:
    lines = []
    for name, ramp in ramps:
        lines.append(name)
        for label, color in zip(_stop_labels(len(ramp)), ramp):
            lines.append(
                f"  {label:>4}  L:{color.l:6.2f}  C:{color.c:6.2f}  H:{color.h:7.2f}  "
                f"{color.to_display_color().to_hex()}"
            )
    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(description="Print perceptual color ramps.")
    parser.add_argument(
        "--hue",
        type=float,
        action="append",
        default=[],
        help="Hue in degrees; may be repeated",
    )
    parser.add_argument(
        "--family",
        action="append",
        default=[],
        help=f"Named family; may be repeated. One of: {', '.join(list_families())}",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=RAMP_STOPS,
        help=f"Colors per ramp (default: {RAMP_STOPS})",
    )
    parser.add_argument(
        "--grayscale",
        action="store_true",
        help="Drop chroma, keep each family's lightness curve",
    )
    parser.add_argument(
        "--format",
        choices=("table", "json"),
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.hue and not args.family:
        args.family = list_families()

    try:
        ramps = _collect(args)
    except ColorTokensError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(_as_json(ramps) if args.format == "json" else _as_table(ramps))
    return 0


if __name__ == "__main__":
    sys.exit(main())
