#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – Create / refresh the fixture tree used by the filecount
test-suite.

Idempotent and 100 % Python. Tests call `build(root)` on a temporary
directory; running the script builds ``test-fixtures/`` next to ``tests/``.
"""
from __future__ import annotations

import shutil
import sys
from pathlib import Path

ROOT = (Path(__file__).resolve().parents[2] / "test-fixtures").resolve()

# ────────────────────────── contents ──────────────────────────
FILES = {
    "a.txt": b"hi",
    "b.txt": b"!",
    "hello.txt": b"hello",
    "unicode.txt": "héllo wörld\n".encode("utf-8"),
    "empty.txt": b"",
    "binary.bin": b"\xff\xfe\x00\x01",
    "with_nul.txt": b"ab\x00cd",
    "chapter1.md": b"# Getting started\n",
    "chapter2.md": b"# Wrapping up\n",
    "bad_manifest.csv": b"\xff\xfe,a.txt",
    "nul_name.csv": b"a.txt,b\x00.txt",
}

MANIFESTS = {
    "list.csv": "a.txt,b.txt",
    "spaced.csv": " a.txt , b.txt\n",
    "chapters.csv": "chapter1.md,chapter2.md\n",
    "missing.csv": "a.txt,nope.txt,b.txt",
    "holes.csv": "a.txt,,b.txt",
    "single.csv": "hello.txt",
    "with_binary.csv": "a.txt,binary.bin",
}


def _write_bytes(path: Path, body: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(body)


def build(root: Path = ROOT) -> Path:
    """Populate *root* with the fixture files and return it."""
    if root.exists():
        shutil.rmtree(root)
    root.mkdir(parents=True)
    for name, body in FILES.items():
        _write_bytes(root / name, body)
    for name, text in MANIFESTS.items():
        _write_bytes(root / name, text.encode("utf-8"))
    (root / "subdir").mkdir()
    return root


if __name__ == "__main__":
    target = Path(sys.argv[1]).resolve() if len(sys.argv) > 1 else ROOT
    build(target)
