"""Command that opens the active sticky notes."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .db import DEFAULT_PATH
from .editor import Editor, EditorDelegate
from .registry import init


def _describe(editor: Editor) -> str:
    origin, size = editor.bounds.origin, editor.bounds.size
    first_line = editor.text.splitlines()[0] if editor.text else ""
    return (
        f"{editor.id}\t{origin.x:g},{origin.y:g}\t"
        f"{size.width:g}x{size.height:g}\t{first_line}"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Open every active note and list the windows that were opened."""
    parser = argparse.ArgumentParser(
        prog="stickynotes", description="Open the active sticky notes."
    )
    parser.add_argument(
        "--database", default=DEFAULT_PATH, help="path of the notes database"
    )
    args = parser.parse_args(argv)

    try:
        registry = init(args.database)
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        delegate = EditorDelegate(registry)
        delegate.render_notes()
        for editor in delegate.editors:
            print(_describe(editor))
    finally:
        registry.database.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())