"""Create Trojan Source fixtures for a manual gate check.

Usage: python scripts/create_fixtures.py <root_dir>

Creates files that exercise bidiscan's detection:
  - rlo_filename.txt  (RLO: "exe.txt" displays reversed)
  - zero_width.py     (ZWSP inside an identifier)
  - bom.md            (leading BOM/ZWNBSP)
  - early_return.js   (LRI/PDI isolating a comment)
  - image.bin         (undecodable, must be skipped)
  - clean.txt         (no findings)

Then run: bidiscan --walk <root_dir>
"""

from __future__ import annotations

import os
import sys

RLO = chr(0x202E)
ZWSP = chr(0x200B)
BOM = chr(0xFEFF)
LRI = chr(0x2066)
PDI = chr(0x2069)

FIXTURES: dict[str, str | bytes] = {
    "rlo_filename.txt": f"attachment: {RLO}txt.exe\n",
    "zero_width.py": f"user_name = 'a'\nuser{ZWSP}_name = 'b'\nprint(user_name)\n",
    "bom.md": f"{BOM}# Title\n",
    "early_return.js": f"if (isAdmin) {{ /* {LRI} }} {PDI} return; */ }}\n",
    "image.bin": b"\x89PNG\r\n\x1a\n\xff\xfe\x00",
    "clean.txt": "nothing to see here\n",
}


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python create_fixtures.py <root_dir>", file=sys.stderr)
        sys.exit(1)

    root = sys.argv[1]
    if not os.path.isdir(root):
        print(f"Root does not exist: {root}", file=sys.stderr)
        sys.exit(1)

    for name, content in FIXTURES.items():
        data = content.encode("utf-8") if isinstance(content, str) else content
        with open(os.path.join(root, name), "wb") as f:
            f.write(data)
        print(f"  created: {name}")

    count = sum(1 for _ in os.scandir(root))
    print(f"  root contains {count} entries")


if __name__ == "__main__":
    main()
