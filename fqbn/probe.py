from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from .config import SETTINGS
from .errors import FileSystemError, FqbnError
from .resolver import load, resolve


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Probe a hardware tree of boards.txt definition files.")
    ap.add_argument("root", nargs="?", default=SETTINGS.hardware_dir, help="Root of the hardware tree")
    ap.add_argument("--file-name", default=SETTINGS.boards_file, help="Definition file name to look for")
    ap.add_argument("--vid", help="Vendor id to resolve, e.g. 0x2341")
    ap.add_argument("--pid", help="Product id to resolve, e.g. 0x0043")
    args = ap.parse_args(argv)
    root = Path(args.root)
    if not root.exists():
        print(f"[probe] root not found: {root}")
        return 2
    try:
        index = load(str(root), file_name=args.file_name)
    except FileSystemError as e:
        print(f"[probe] load failed: {e}")
        return 2
    print(f"[probe] root: {root}")
    print(f"[probe] boards: {len(index)}")
    for record in index:
        print(f"[probe] {record.name} vids={sorted(record.vids)} pids={sorted(record.pids)}")
    if args.vid or args.pid:
        if not (args.vid and args.pid):
            print("[probe] --vid and --pid must be given together")
            return 2
        try:
            name = resolve(index, args.vid, args.pid)
        except FqbnError as e:
            print(f"[probe] resolve failed: {e}")
            return 1
        print(f"[probe] resolved: {args.vid}:{args.pid} -> {name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
