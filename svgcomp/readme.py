"""
Readme generation: a markdown table of every icon.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .config import Config
from .constants import DEFAULT_DECLARATION_TAG, ROOT_FOLDER
from .exceptions import ConfigurationError
from .models import GeneratedFile, ReadmeConfig
from .utils.files import read_file, write_file
from .utils.logger import get_logger
from .utils.naming import capitalize, component_name
from .utils.walker import discover_folders, list_svg_files

logger = get_logger(__name__)

TABLE_HEADER = "| Icon | Name | ESM import |\n| --- | --- | --- |"


@dataclass
class ReadmeIcon:
    """One row of the icon table."""
    name: str
    path: str

    @property
    def component(self) -> str:
        return component_name(self.name)


@dataclass
class ReadmeSection:
    """Icons of one folder."""
    folder: str
    icons: List[ReadmeIcon] = field(default_factory=list)

    @property
    def heading(self) -> Optional[str]:
        return None if self.folder == ROOT_FOLDER else capitalize(self.folder)


def _posix(path: str) -> str:
    return path.replace("\\", "/")


def import_path(project_name: str, output: str, folder: str) -> str:
    """
    Module path of a folder's barrel as seen by package consumers.

    Args:
        project_name: Package name
        output: Configured output folder
        folder: Folder relative to entry

    Returns:
        e.g. "my-icons/dist/brand"
    """
    segments = [project_name]
    for part in (_posix(output), _posix(folder)):
        normalized = posixpath.normpath(part) if part else ROOT_FOLDER
        segments.extend(s for s in normalized.split("/") if s and s != ROOT_FOLDER)
    return "/".join(segments)


def render_table(section: ReadmeSection, project_name: str, output: str) -> str:
    """Render one folder's markdown table, with a heading for subfolders."""
    module = import_path(project_name, output, section.folder)
    lines = []
    if section.heading:
        lines.append(f"### {section.heading}")
    lines.append(TABLE_HEADER)
    for icon in section.icons:
        image = f"![{icon.name}]({icon.path})"
        esm_import = f"import {{ {icon.component} }} from '{module}'"
        lines.append(f"| {image} | {icon.name} | `{esm_import}` |")
    return "\n".join(lines)


class ReadmeGenerator:
    """Documents the icon set as markdown tables merged into a template."""

    def __init__(self, config: Config, readme: Optional[ReadmeConfig] = None) -> None:
        """
        Initialize the generator.

        Args:
            config: Configuration instance
            readme: Readme settings (default: the "readme" section of config)

        Raises:
            ConfigurationError: If no readme settings are available
        """
        self.config = config
        self.readme = readme or config.readme
        if self.readme is None:
            raise ConfigurationError("No readme options provided")

    def collect(self) -> List[ReadmeSection]:
        """Discover icons folder by folder, skipping folders without icons."""
        entry = self.config.require_entry()
        entry_setting = _posix(self.config.app_config.entry)
        sections = []

        for folder in discover_folders(entry):
            svg_files = list_svg_files(entry / folder)
            if not svg_files:
                continue

            section = ReadmeSection(folder=folder)
            for file_name in svg_files:
                path = posixpath.normpath(posixpath.join(entry_setting, _posix(folder), file_name))
                section.icons.append(ReadmeIcon(
                    name=file_name[:-len(".svg")],
                    path=path.replace(" ", "%20"),
                ))
            sections.append(section)

        return sections

    def render_declaration(self, sections: List[ReadmeSection]) -> str:
        """Concatenate every folder's table."""
        project_name = self.config.get_project_name()
        output = self.config.app_config.output
        return "\n\n".join(render_table(section, project_name, output) for section in sections)

    def render(self) -> str:
        """
        Render the readme.

        Returns:
            Template with the declaration tag replaced, or the bare tables when
            no template is configured
        """
        declaration = self.render_declaration(self.collect())

        if not self.readme.template:
            return declaration

        template_path = self.config.resolve(self.readme.template)
        if not template_path.is_file():
            raise ConfigurationError(f'Readme template "{self.readme.template}" does not exist')

        template = read_file(template_path)
        tag = self.readme.declaration_tag or DEFAULT_DECLARATION_TAG
        if tag not in template:
            logger.warning(f"Declaration tag {tag} not found in {self.readme.template}")
        return template.replace(tag, declaration, 1)

    def generate(self) -> GeneratedFile:
        """
        Write the readme file.

        Returns:
            GeneratedFile for the report
        """
        content = self.render()
        output_file = self.config.resolve(self.readme.output)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        write_file(output_file, content)
        logger.info(f"Wrote readme to {output_file}")
        return GeneratedFile(name=Path(output_file).name, file=output_file)
