"""Per-user workspace where problem files are unpacked."""

from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "b75"
PROBLEMS_DIR = "problems"
_TEMPLATE_NAME = "go.mod.tpl"
_TEMPLATE_TARGET = "go.mod"


def get_data_dir() -> Path:
    """The application data directory, honouring ``XDG_DATA_HOME``."""
    data_home = os.environ.get("XDG_DATA_HOME", "")
    base = Path(data_home) if data_home else Path.home() / ".local" / "share"
    return base / APP_NAME


def get_problem_path(problem_slug: str) -> Path:
    """The directory of one problem inside the user's workspace."""
    return get_data_dir() / PROBLEMS_DIR / problem_slug


def ensure_problem(problem_slug: str, assets_root: os.PathLike | str) -> None:
    """Copy a problem from ``assets_root/problems/<slug>`` unless it is already present.

    Files named ``go.mod.tpl`` are written as ``go.mod``.
    """
    dest_dir = get_problem_path(problem_slug)
    if dest_dir.exists():
        return
    try:
        dest_dir.mkdir(mode=0o755, parents=True)
    except OSError as exc:
        raise OSError(f"failed to create problem directory: {exc}") from exc

    src_root = Path(assets_root) / PROBLEMS_DIR / problem_slug
    if not src_root.exists():
        raise FileNotFoundError(f"no assets for problem {problem_slug!r} at {src_root}")

    for path in sorted(src_root.rglob("*")):
        dest = dest_dir / path.relative_to(src_root)
        if path.name == _TEMPLATE_NAME:
            dest = dest.with_name(_TEMPLATE_TARGET)
        if path.is_dir():
            dest.mkdir(mode=0o755, parents=True, exist_ok=True)
            continue
        dest.parent.mkdir(mode=0o755, parents=True, exist_ok=True)
        dest.write_bytes(path.read_bytes())
        os.chmod(dest, 0o644)