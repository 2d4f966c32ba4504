#!/usr/bin/env python3
"""Minimal order command example for tailsort.

Replace `ORDER` with the order your project uses, or call out to a real
sorter from `order_classes`.
"""

from __future__ import annotations

import json
import sys

ORDER = ["container", "flex", "items-center", "p-4", "m-2", "text-white", "bg-blue-500"]


def order_classes(classes: str, keep_duplicates: bool) -> str:
    tokens = classes.split()
    if not keep_duplicates:
        tokens = list(dict.fromkeys(tokens))

    known = sorted((t for t in tokens if t in ORDER), key=ORDER.index)
    custom = [t for t in tokens if t not in ORDER]
    return " ".join(known + custom)


def main() -> int:
    payload = json.load(sys.stdin)
    out = {"classes": order_classes(payload.get("classes", ""), bool(payload.get("keep_duplicates")))}
    json.dump(out, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
