from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .models import DateStamp


@dataclass(slots=True)
class PathConfig:
    folder_path: Path
    file_path: Path


@dataclass(slots=True)
class AppConfig:
    root: Path
    stamp: DateStamp
    paths: PathConfig
    dry_run: bool


def compute_paths(root: Path, stamp: DateStamp) -> PathConfig:
    folder_path = root / stamp.year_str / stamp.month_str
    file_path = folder_path / f"{stamp.month_str}{stamp.day_str}.md"
    return PathConfig(folder_path=folder_path, file_path=file_path)


def parse_date(value: str) -> DateStamp:
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d")
    except ValueError as exc:
        raise ValueError(f"Invalid date: {value} (expected YYYY-MM-DD)") from exc
    return DateStamp.from_datetime(parsed)


def resolve_root(value: Path | None) -> Path:
    if value is None:
        return Path.cwd()
    return value.expanduser()


def build_app_config(
    *,
    root: Path | None,
    date_value: str | None = None,
    timezone_name: str | None = None,
    dry_run: bool = False,
) -> AppConfig:
    if date_value is not None:
        stamp = parse_date(date_value)
    else:
        stamp = DateStamp.today(timezone_name)

    resolved_root = resolve_root(root)
    return AppConfig(
        root=resolved_root,
        stamp=stamp,
        paths=compute_paths(resolved_root, stamp),
        dry_run=dry_run,
    )
