"""
Nextboost Models - Pydantic models for the scaffold request and nextboost.yaml

Defines the UI library table, package managers, pipeline stages and the
tool configuration. Pydantic handles validation and defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field


# ═══════════════════════════════════════════════════════════════════════════
# ENUMS
# ═══════════════════════════════════════════════════════════════════════════


class UiLibrary(str, Enum):
    SHADCN = "shadcn"
    FLOWBITE = "flowbite"
    DAISYUI = "daisyui"
    FLOWBITE_REACT = "flowbite-react"


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"


class Stage(str, Enum):
    """Pipeline stages, in the order they are entered

    INSTALLING_INTL is only entered when the next-intl option is on.
    """
    IDLE = "idle"
    INTERVIEWING_NAME = "interviewing_name"
    INTERVIEWING_UI = "interviewing_ui"
    GENERATING = "generating"
    INSTALLING_PURGE = "installing_purge"
    WRITING_CONFIGS = "writing_configs"
    INSTALLING_UI = "installing_ui"
    INSTALLING_INTL = "installing_intl"
    DONE = "done"
    ABORTED = "aborted"


# ═══════════════════════════════════════════════════════════════════════════
# UI LIBRARY TABLE
# ═══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class UiLibraryProfile:
    """Package to install and tailwind plugin fragment for one UI library"""

    package: str
    plugin: str = ""


UI_LIBRARIES: dict[UiLibrary, UiLibraryProfile] = {
    UiLibrary.SHADCN: UiLibraryProfile("@shadcn/ui@latest"),
    UiLibrary.FLOWBITE: UiLibraryProfile("flowbite@latest", "require('flowbite/plugin')"),
    UiLibrary.DAISYUI: UiLibraryProfile("daisyui@latest", "require('daisyui')"),
    UiLibrary.FLOWBITE_REACT: UiLibraryProfile("flowbite-react@latest"),
}

_missing = set(UiLibrary) - set(UI_LIBRARIES)
if _missing:
    raise RuntimeError(f"UI_LIBRARIES has no entry for: {sorted(m.value for m in _missing)}")


def ui_library_profile(library: UiLibrary | str) -> UiLibraryProfile:
    """Look up the table entry for a selection (enum member or its value)"""
    return UI_LIBRARIES[UiLibrary(library)]


# (install verb, dev flag) per package manager
_INSTALL_VERBS: dict[PackageManager, tuple[str, str]] = {
    PackageManager.NPM: ("install", "--save-dev"),
    PackageManager.YARN: ("add", "--dev"),
    PackageManager.PNPM: ("add", "--save-dev"),
    PackageManager.BUN: ("add", "--dev"),
}


# ═══════════════════════════════════════════════════════════════════════════
# REQUEST & CONFIG
# ═══════════════════════════════════════════════════════════════════════════


class ScaffoldRequest(BaseModel):
    """Interview answers for a single run"""

    project_name: str
    ui_library: UiLibrary

    @property
    def profile(self) -> UiLibraryProfile:
        return UI_LIBRARIES[self.ui_library]


class ScaffoldConfig(BaseModel):
    """Tool settings, optionally loaded from nextboost.yaml"""

    default_project_name: str = Field("nextjs-app", alias="defaultProjectName")
    generator: str = "npx create-next-app@latest"
    package_manager: PackageManager = Field(PackageManager.NPM, alias="packageManager")
    purge_package: str = Field("next-purgecss", alias="purgePackage")
    intl: bool = False

    model_config = {"populate_by_name": True, "extra": "forbid"}

    @classmethod
    def from_yaml(cls, yaml_content: str) -> "ScaffoldConfig":
        """Parse YAML content into ScaffoldConfig"""
        import yaml

        data = yaml.safe_load(yaml_content) or {}
        return cls.model_validate(data)

    @classmethod
    def from_file(cls, path: str) -> "ScaffoldConfig":
        """Load config from YAML file"""
        from pathlib import Path

        content = Path(path).read_text()
        return cls.from_yaml(content)

    def install_args(self, package: str, dev: bool = False) -> str:
        """Package manager invocation installing one package, e.g. ``npm install x``"""
        verb, dev_flag = _INSTALL_VERBS[self.package_manager]
        args = f"{self.package_manager.value} {verb} {package}"
        if dev:
            args += f" {dev_flag}"
        return args
