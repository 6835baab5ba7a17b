from __future__ import annotations

import os
from pathlib import Path
from typing import List, Sequence

from graphclass.io.edgelist import ResourceOpenError
from graphclass.properties.predicates import GraphProperties


OUTPUT_DIR = os.environ.get("GRAPHCLASS_OUTPUT_DIR", "output")


def verdict_lines(props: GraphProperties) -> List[str]:
    """The two verdicts: numbered tree first, then tree."""
    nt = "is" if props.is_numbered_tree else "is not"
    t = "is" if props.is_tree else "is not"
    return [
        f"The graph {nt} a numbered tree.",
        f"The graph {t} a tree.",
    ]


def format_report(
    props: GraphProperties,
    diagnostics: Sequence[str],
    *,
    shape: str | None = None,
) -> str:
    """
    Render the report text: optional shape line, the diagnostics in the
    order they were produced, then the verdicts.
    """
    lines: List[str] = []
    if shape is not None:
        lines.append(f"Shape: {shape}")
    lines.extend(diagnostics)
    lines.extend(verdict_lines(props))
    return "\n".join(lines) + "\n"


def open_sink(path: str | os.PathLike[str], mode: str = "w"):
    """Open a text sink for writing, creating the parent directory."""
    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        return open(p, mode, encoding="utf-8")
    except OSError as exc:
        raise ResourceOpenError(f"cannot open {str(p)!r} for writing results: {exc.strerror}") from exc


def write_report(
    name: str,
    text: str,
    output_dir: str | os.PathLike[str] | None = None,
) -> Path:
    """Write *text* to *name* under *output_dir* (default OUTPUT_DIR); return the path."""
    path = Path(OUTPUT_DIR if output_dir is None else output_dir) / name
    with open_sink(path) as fh:
        fh.write(text)
    return path
