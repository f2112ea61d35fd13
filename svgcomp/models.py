"""
Data models for the SVG Components Builder.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Dict, Any

from .constants import (
    DEFAULT_COLOR, DEFAULT_DECLARATION_TAG, DEFAULT_ENTRY, DEFAULT_FORMATTER,
    DEFAULT_GENERATE, DEFAULT_OUTPUT, DEFAULT_TITLE_SUFFIX, ROOT_FOLDER
)


class Framework(Enum):
    """Target UI framework of a generated component."""
    REACT = "react"
    VUE = "vue"

    @property
    def extension(self) -> str:
        """File extension of the component source."""
        return "tsx" if self is Framework.REACT else "vue"


class Binding(Enum):
    """How a prop value is bound onto an element attribute."""
    STRING = "string"          # name="value"
    EXPRESSION = "expression"  # name={value}
    BOUND = "bound"            # :name="value"


@dataclass(frozen=True)
class IconSource:
    """An SVG file read from the entry tree."""
    folder: str
    file_name: str
    path: Path
    content: str

    @property
    def stem(self) -> str:
        """File name without the .svg extension."""
        return self.file_name[:-len(".svg")] if self.file_name.endswith(".svg") else self.file_name


@dataclass(frozen=True)
class ComponentDefaults:
    """Default prop values threaded through component synthesis."""
    color: str = DEFAULT_COLOR
    title_suffix: str = DEFAULT_TITLE_SUFFIX

    def title_for(self, component_name: str) -> str:
        """Default title of a component."""
        return f"{component_name}{self.title_suffix}"


@dataclass(frozen=True)
class GeneratedComponent:
    """A component written to disk."""
    name: str
    file_path: Path
    source: str
    framework: Framework = Framework.REACT


@dataclass
class FolderGroup:
    """Icons and generated components of one folder level."""
    relative_folder: str
    icons: List[IconSource] = field(default_factory=list)
    components: List[GeneratedComponent] = field(default_factory=list)
    failures: List[str] = field(default_factory=list)
    index_file: Optional[Path] = None

    @property
    def is_root(self) -> bool:
        return self.relative_folder == ROOT_FOLDER

    @property
    def component_names(self) -> List[str]:
        """Unique component names in discovery order."""
        names: List[str] = []
        for component in self.components:
            if component.name not in names:
                names.append(component.name)
        return names


@dataclass(frozen=True)
class GeneratedFile:
    """Report entry for a generated file."""
    name: str
    file: Path


@dataclass(frozen=True)
class ReportRow:
    """Rendered row of the summary report."""
    index: int
    name: str
    file: Path
    size: int

    @property
    def size_kb(self) -> str:
        return f"{round(self.size / 1024)}kb"


@dataclass
class DeclarationResult:
    """Outcome of the declaration compiler step."""
    emitted_files: List[Path] = field(default_factory=list)
    diagnostics: List[str] = field(default_factory=list)
    removed_sources: List[Path] = field(default_factory=list)
    skipped: bool = False


@dataclass
class BuildResult:
    """Result of a build run."""
    folders: List[FolderGroup] = field(default_factory=list)
    generated_files: List[GeneratedFile] = field(default_factory=list)
    index_files: List[Path] = field(default_factory=list)
    declarations: Optional[DeclarationResult] = None

    @property
    def failures(self) -> List[str]:
        return [failure for folder in self.folders for failure in folder.failures]

    @property
    def success(self) -> bool:
        return not self.failures

    @property
    def component_count(self) -> int:
        return sum(len(folder.components) for folder in self.folders)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "folders": [
                {
                    "folder": folder.relative_folder,
                    "components": folder.component_names,
                    "failures": list(folder.failures),
                }
                for folder in self.folders
            ],
            "generated_files": [str(f.file) for f in self.generated_files],
            "index_files": [str(f) for f in self.index_files],
            "component_count": self.component_count,
            "success": self.success,
        }


@dataclass
class ReadmeConfig:
    """Readme generation settings."""
    output: str
    template: Optional[str] = None
    declaration_tag: str = DEFAULT_DECLARATION_TAG

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "output": self.output,
            "template": self.template,
            "declarationTag": self.declaration_tag,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ReadmeConfig':
        """Create from dictionary."""
        return cls(
            output=data.get("output", ""),
            template=data.get("template"),
            declaration_tag=data.get("declarationTag") or DEFAULT_DECLARATION_TAG,
        )


@dataclass
class AppConfig:
    """Application configuration."""
    entry: str = DEFAULT_ENTRY
    output: str = DEFAULT_OUTPUT
    project_name: Optional[str] = None
    generate: List[Framework] = field(default_factory=lambda: [Framework(f) for f in DEFAULT_GENERATE])
    color: str = DEFAULT_COLOR
    title_suffix: str = DEFAULT_TITLE_SUFFIX
    formatter: str = DEFAULT_FORMATTER
    declarations: bool = True
    remove_sources: bool = False
    readme: Optional[ReadmeConfig] = None

    @property
    def defaults(self) -> ComponentDefaults:
        return ComponentDefaults(color=self.color, title_suffix=self.title_suffix)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "entry": self.entry,
            "output": self.output,
            "projectName": self.project_name,
            "generate": [f.value for f in self.generate],
            "color": self.color,
            "titleSuffix": self.title_suffix,
            "formatter": self.formatter,
            "declarations": self.declarations,
            "removeSources": self.remove_sources,
            "readme": self.readme.to_dict() if self.readme else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        """Create from dictionary."""
        readme = data.get("readme")
        return cls(
            entry=data.get("entry", DEFAULT_ENTRY),
            output=data.get("output", DEFAULT_OUTPUT),
            project_name=data.get("projectName"),
            generate=[Framework(f) for f in data.get("generate", DEFAULT_GENERATE)],
            color=data.get("color", DEFAULT_COLOR),
            title_suffix=data.get("titleSuffix", DEFAULT_TITLE_SUFFIX),
            formatter=data.get("formatter", DEFAULT_FORMATTER),
            declarations=data.get("declarations", True),
            remove_sources=data.get("removeSources", False),
            readme=ReadmeConfig.from_dict(readme) if readme else None,
        )
