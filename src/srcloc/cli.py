from __future__ import annotations

import argparse
import json
import sys

from .api import load_source, locate
from .errors import IoFailure, OutOfRange
from .pos import Position


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="srcloc", description="Resolve text offsets to line:column locations")
    ap.add_argument("file", help="Source file to read")
    ap.add_argument("offsets", nargs="+", type=int, help="0-based offsets into the file")
    ap.add_argument("--json", action="store_true", help="Print locations as JSON")
    args = ap.parse_args(argv)

    try:
        src = load_source(args.file)
        positions = [Position.from_size(o) for o in args.offsets]
    except (IoFailure, OutOfRange) as e:
        print(f"srcloc: error: {e}", file=sys.stderr)
        return 1

    if args.json:
        locations = []
        for pos in positions:
            loc = src.pos_to_loc(pos)
            if loc is None:
                locations.append(None)
            else:
                locations.append({"offset": pos.offset, "line": loc.line + 1, "column": loc.column.offset + 1})
        payload = {"origin": str(src.origin), "locations": locations}
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        for line in locate(src, positions):
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
