from __future__ import annotations

from dataclasses import dataclass

from .config import AppConfig, PathConfig
from .template import TilTemplate


@dataclass(slots=True)
class DryRunPreview:
    paths: PathConfig
    content: str
    folder_exists: bool
    file_exists: bool

    @property
    def action(self) -> str:
        return "overwrite" if self.file_exists else "create"


def build_preview(config: AppConfig, template: TilTemplate) -> DryRunPreview:
    return DryRunPreview(
        paths=config.paths,
        content=template.render(config.stamp),
        folder_exists=config.paths.folder_path.is_dir(),
        file_exists=config.paths.file_path.exists(),
    )
