"""
Batch build of icon components from the entry tree.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import shutil
from pathlib import Path
from typing import Dict, List, Optional, Set

from .config import Config
from .constants import COMPONENT_FILE_STEM, INDEX_FILE_NAME, ROOT_FOLDER
from .exceptions import FormatterError, MarkupRewriteError, ToolchainError
from .models import (
    BuildResult, FolderGroup, Framework, GeneratedComponent, GeneratedFile, IconSource
)
from .synthesizer import ComponentSynthesizer
from .toolchain import DeclarationCompiler, SourceFormatter
from .utils.files import read_file, write_file
from .utils.logger import get_logger
from .utils.naming import component_name
from .utils.walker import check_structure, discover_folders, list_svg_files

logger = get_logger(__name__)

# Per-file errors that skip the file but keep the batch going
FILE_ERRORS = (MarkupRewriteError, FormatterError, ToolchainError, OSError, UnicodeDecodeError)


class ComponentBuilder:
    """Generates components and barrel files for every icon folder."""

    def __init__(self, config: Config,
                 formatter: Optional[SourceFormatter] = None,
                 compiler: Optional[DeclarationCompiler] = None) -> None:
        """
        Initialize the builder.

        Args:
            config: Configuration instance
            formatter: Source formatter (default from config)
            compiler: Declaration compiler (default from config)
        """
        self.config = config
        self.frameworks = config.frameworks
        self.formatter = formatter or SourceFormatter(
            config.app_config.formatter, project_dir=config.working_dir)
        self.compiler = compiler or DeclarationCompiler(
            project_dir=config.working_dir, remove_sources=config.app_config.remove_sources)
        self.synthesizers: Dict[Framework, ComponentSynthesizer] = {
            framework: ComponentSynthesizer(framework, config.defaults)
            for framework in self.frameworks
        }
        self._subfolder_names: Set[str] = set()

    def build(self) -> BuildResult:
        """
        Run a full build.

        Returns:
            BuildResult with every folder group and generated file

        Raises:
            ConfigurationError: If the entry folder does not exist
            StructuralConflictError: If the output would overlap the entry
        """
        entry = self.config.require_entry()
        output = self.config.output_path

        folders = discover_folders(entry)
        check_structure(entry, output, folders)
        # Root components share the output root with mirrored subfolders
        self._subfolder_names = {
            f.casefold() for f in folders if f != ROOT_FOLDER and list_svg_files(entry / f)
        }

        output.mkdir(parents=True, exist_ok=True)
        logger.info(f"Building components from {entry} into {output}")

        result = BuildResult()
        for folder in folders:
            group = self.build_folder(entry, output, folder)
            if group is None:
                continue
            result.folders.append(group)
            result.generated_files.extend(
                GeneratedFile(name=c.name, file=c.file_path) for c in group.components)
            if group.index_file:
                result.index_files.append(group.index_file)

        if self.config.app_config.declarations and Framework.REACT in self.frameworks:
            result.declarations = self.compiler.compile(result.index_files)

        logger.info(
            f"Build complete: {result.component_count} components, "
            f"{len(result.index_files)} index files, {len(result.failures)} failures")
        return result

    def build_folder(self, entry: Path, output: Path, folder: str) -> Optional[FolderGroup]:
        """
        Generate every component of one folder plus its barrel file.

        Args:
            entry: Entry root
            output: Output root
            folder: Folder relative to entry ("." for the root)

        Returns:
            FolderGroup, or None when the folder holds no .svg files
        """
        source_dir = entry / folder
        svg_files = list_svg_files(source_dir)
        if not svg_files:
            logger.debug(f"Skipping {folder}: no .svg files")
            return None

        target_dir = self._reset_folder(output, folder)
        group = FolderGroup(relative_folder=folder)

        for file_name in svg_files:
            icon_path = source_dir / file_name
            try:
                icon = IconSource(folder=folder, file_name=file_name, path=icon_path,
                                  content=read_file(icon_path))
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Failed to read {icon_path}: {e}")
                group.failures.append(f"{icon_path}: {e}")
                continue

            group.icons.append(icon)
            group.components.extend(self.build_icon(icon, target_dir, group))

        group.index_file = self.write_index(group, target_dir)
        return group

    def build_icon(self, icon: IconSource, target_dir: Path, group: FolderGroup) -> List[GeneratedComponent]:
        """
        Generate the components of one icon, one per framework.

        Sources are rendered in memory first; the component folder is only
        replaced once at least one of them rendered. Failures are recorded on
        the group and the icon is skipped.
        """
        name = component_name(icon.stem)
        if group.is_root and name.casefold() in self._subfolder_names:
            message = f"{icon.path}: component {name} clashes with the mirrored subfolder of the same name"
            logger.error(message)
            group.failures.append(message)
            return []

        component_dir = target_dir / name
        rendered = []
        for framework, synthesizer in self.synthesizers.items():
            file_path = component_dir / f"{COMPONENT_FILE_STEM}.{framework.extension}"
            try:
                source = synthesizer.synthesize(name, icon.content)
                rendered.append((framework, file_path, self.formatter.format(source, file_path)))
            except FILE_ERRORS as e:
                logger.error(f"Failed to generate {name} from {icon.path}: {e}")
                group.failures.append(f"{icon.path}: {e}")

        if not rendered:
            return []

        if name in group.component_names:
            logger.warning(f"{icon.file_name} also maps to {name} in {group.relative_folder}, overwriting")
            group.components[:] = [c for c in group.components if c.name != name]

        if component_dir.exists():
            shutil.rmtree(component_dir)
        component_dir.mkdir(parents=True)

        components = []
        for framework, file_path, source in rendered:
            try:
                write_file(file_path, source)
            except FILE_ERRORS as e:
                logger.error(f"Failed to write {file_path}: {e}")
                group.failures.append(f"{icon.path}: {e}")
                continue

            logger.debug(f"Wrote {file_path}")
            components.append(GeneratedComponent(
                name=name, file_path=file_path, source=source, framework=framework))

        if not components and not any(component_dir.iterdir()):
            component_dir.rmdir()

        return components

    def index_source(self, group: FolderGroup) -> str:
        """Barrel source re-exporting the folder's components in discovery order."""
        lines = []
        for name in group.component_names:
            module = f"./{name}" if Framework.REACT in self.frameworks else f"./{name}/index.vue"
            lines.append(f"export {{ default as {name} }} from '{module}';\n")
        return "".join(lines)

    def write_index(self, group: FolderGroup, target_dir: Path) -> Optional[Path]:
        """
        Write the folder's barrel file.

        Returns:
            Path of the barrel file, or None when nothing was generated or the
            write failed
        """
        if not group.components:
            logger.warning(f"No components generated in {group.relative_folder}, skipping index")
            return None

        index_file = target_dir / INDEX_FILE_NAME
        try:
            source = self.formatter.format(self.index_source(group), index_file)
            write_file(index_file, source)
        except FILE_ERRORS as e:
            logger.error(f"Failed to write {index_file}: {e}")
            group.failures.append(f"{index_file}: {e}")
            return None

        return index_file

    def _reset_folder(self, output: Path, folder: str) -> Path:
        """Recreate the mirrored output subfolder; the output root is never wiped."""
        if folder == ROOT_FOLDER:
            output.mkdir(parents=True, exist_ok=True)
            return output

        target_dir = output / folder
        if target_dir.exists():
            shutil.rmtree(target_dir)
        target_dir.mkdir(parents=True)
        return target_dir
