# topmark:header:start
#
#   project      : DepCatalog
#   file         : model.py
#   file_relpath : src/depcatalog/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Settings model and merge policy.

This module defines:
    - `Settings`: an immutable runtime snapshot used by the API and CLI.
    - `MutableSettings`: a mutable builder used during discovery/merge; it
      can be frozen into `Settings` and thawed back for edits.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) Project files discovered upward **root → current**; within a directory
       `pyproject.toml` (``[tool.depcatalog]``) is merged first, then `depcatalog.toml`
    3) Extra settings files passed explicitly (in the order provided)
    4) Argument overrides (`MutableSettings.apply_args`)

Settings configure the *surroundings* of a catalog (extension names exposed to
consumers, strictness of checks). Catalog contents live in catalog files.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from depcatalog.config.io import (
    get_bool_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from depcatalog.config.keys import ArgKey, Toml
from depcatalog.config.logging import get_logger
from depcatalog.constants import (
    DEFAULT_LIBRARIES_EXTENSION_NAME,
    DEFAULT_PROJECTS_EXTENSION_NAME,
    DEPCATALOG_TOML_NAME,
    PYPROJECT_TOML_NAME,
)
from depcatalog.diagnostic.model import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from depcatalog.catalog.builder import CatalogModelBuilder
    from depcatalog.config.io import TomlTable
    from depcatalog.config.logging import CatalogLogger

# ArgsLike: generic mapping accepted by `apply_args` (CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

ARGS_OVERRIDE_MARKER: str = "<argument overrides>"

logger: CatalogLogger = get_logger(__name__)


# ------------------ Immutable runtime settings ------------------


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable runtime settings.

    Attributes:
        libraries_extension_name (str): Extension name for libraries.
        projects_extension_name (str): Extension name for projects.
        strict (bool): Treat warnings (e.g. duplicate overwrites) as failures.
        config_files (tuple[Path | str, ...]): Provenance of merged values.
        diagnostics (tuple[Diagnostic, ...]): Warnings recorded while loading settings.
    """

    libraries_extension_name: str = DEFAULT_LIBRARIES_EXTENSION_NAME
    projects_extension_name: str = DEFAULT_PROJECTS_EXTENSION_NAME
    strict: bool = False
    config_files: tuple[Path | str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def apply_to(self, builder: CatalogModelBuilder) -> None:
        """Configure a catalog builder's extension names from these settings.

        Values equal to the builder's conventions are left unset.

        Args:
            builder (CatalogModelBuilder): The builder to configure.
        """
        for prop, value in (
            (builder.libraries_extension_name, self.libraries_extension_name),
            (builder.projects_extension_name, self.projects_extension_name),
        ):
            if value != prop.convention:
                prop.set(value)

    def to_toml_dict(self) -> TomlTable:
        """Convert these settings into a TOML-serializable dict.

        Returns:
            TomlTable: Settings in ``depcatalog.toml`` layout.
        """
        return {
            Toml.SECTION_EXTENSIONS: {
                Toml.KEY_LIBRARIES: self.libraries_extension_name,
                Toml.KEY_PROJECTS: self.projects_extension_name,
            },
            Toml.SECTION_CHECK: {
                Toml.KEY_STRICT: self.strict,
            },
        }

    def thaw(self) -> MutableSettings:
        """Return a mutable copy of these frozen settings."""
        return MutableSettings(
            libraries_extension_name=self.libraries_extension_name,
            projects_extension_name=self.projects_extension_name,
            strict=self.strict,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableSettings:
    """Mutable settings used during discovery and merging.

    Fields are tri-state where it matters: ``None`` means "inherit" so that
    merging never loses an explicit value.

    Attributes:
        libraries_extension_name (str | None): See `Settings`.
        projects_extension_name (str | None): See `Settings`.
        strict (bool | None): See `Settings`.
        config_files (list[Path | str]): Provenance of merged values.
        diagnostics (DiagnosticLog): Warnings recorded while loading settings.
    """

    libraries_extension_name: str | None = None
    projects_extension_name: str | None = None
    strict: bool | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Settings:
        """Freeze this draft into immutable `Settings`, filling unset values with defaults."""
        return Settings(
            libraries_extension_name=(
                self.libraries_extension_name
                if self.libraries_extension_name is not None
                else DEFAULT_LIBRARIES_EXTENSION_NAME
            ),
            projects_extension_name=(
                self.projects_extension_name
                if self.projects_extension_name is not None
                else DEFAULT_PROJECTS_EXTENSION_NAME
            ),
            strict=bool(self.strict),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableSettings:
        """Return a draft populated with the built-in defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableSettings:
        """Create a draft from a parsed settings table.

        Args:
            data (TomlTable): The parsed TOML data (``depcatalog.toml`` layout).
            config_file (Path | None): Optional path to the source TOML file.

        Returns:
            MutableSettings: The resulting draft.
        """
        draft = cls()
        if config_file is not None:
            draft.config_files = [config_file]

        extensions_tbl: TomlTable = get_table_value(data, Toml.SECTION_EXTENSIONS)
        logger.trace("TOML [%s]: %s", Toml.SECTION_EXTENSIONS, extensions_tbl)
        check_tbl: TomlTable = get_table_value(data, Toml.SECTION_CHECK)
        logger.trace("TOML [%s]: %s", Toml.SECTION_CHECK, check_tbl)

        draft.libraries_extension_name = get_string_value_or_none_checked(
            extensions_tbl,
            Toml.KEY_LIBRARIES,
            where=f"[{Toml.SECTION_EXTENSIONS}]",
            diagnostics=draft.diagnostics,
        )
        draft.projects_extension_name = get_string_value_or_none_checked(
            extensions_tbl,
            Toml.KEY_PROJECTS,
            where=f"[{Toml.SECTION_EXTENSIONS}]",
            diagnostics=draft.diagnostics,
        )
        draft.strict = get_bool_value_or_none_checked(
            check_tbl,
            Toml.KEY_STRICT,
            where=f"[{Toml.SECTION_CHECK}]",
            diagnostics=draft.diagnostics,
        )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableSettings | None:
        """Load settings from ``depcatalog.toml`` or ``[tool.depcatalog]`` in ``pyproject.toml``.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableSettings | None: The draft, or None if a ``pyproject.toml``
                carries no ``[tool.depcatalog]`` section.
        """
        logger.debug("Creating MutableSettings from TOML file: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, Toml.SECTION_TOOL), Toml.SECTION_TOOL_DEPCATALOG
            )
            if not tool_section:
                logger.debug("No [tool.depcatalog] section in %s", path)
                return None
            toml_data = tool_section

        draft: MutableSettings = cls.from_toml_dict(toml_data, config_file=path)
        logger.debug("Generated MutableSettings: %s", draft)
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return settings files discovered by walking upward from ``start``.

        Files are ordered root-most first, nearest last; within a directory
        ``pyproject.toml`` comes before ``depcatalog.toml``. A file declaring
        ``root = true`` stops the upward walk after its directory.

        Args:
            start (Path): Where discovery starts (a file's parent is used).

        Returns:
            list[Path]: Discovered settings files in merge order.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []
            for name in (PYPROJECT_TOML_NAME, DEPCATALOG_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                data: TomlTable = load_toml_dict(p)
                if name == PYPROJECT_TOML_NAME:
                    data = get_table_value(
                        get_table_value(data, Toml.SECTION_TOOL), Toml.SECTION_TOOL_DEPCATALOG
                    )
                    if not data:
                        continue
                dir_entries.append(p)
                logger.debug("Discovered settings file: %s", p)
                if bool(data.get(Toml.KEY_ROOT, False)):
                    root_stop_here = True

            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward settings discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableSettings:
        """Discover and merge settings layers into a draft.

        Args:
            anchor (Path | None): Discovery start (typically the catalog file);
                defaults to the current working directory.
            extra_config_files (Iterable[Path] | None): Explicit settings files merged
                after discovery, in the given order.
            no_config (bool): If True, skip discovery (explicit files still apply).

        Returns:
            MutableSettings: A draft ready to be frozen or further edited.
        """
        draft: MutableSettings = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                layer: MutableSettings | None = cls.from_toml_file(cfg_path)
                if layer is not None:
                    draft = draft.merge_with(layer)

        for extra in extra_config_files or ():
            layer = cls.from_toml_file(Path(extra))
            if layer is not None:
                draft = draft.merge_with(layer)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableSettings) -> MutableSettings:
        """Return a new draft where explicitly set values from ``other`` win.

        Args:
            other (MutableSettings): The settings overriding this draft.

        Returns:
            MutableSettings: The merged draft.
        """

        def pick(current: Any, override: Any) -> Any:
            return override if override is not None else current

        return MutableSettings(
            libraries_extension_name=pick(
                self.libraries_extension_name, other.libraries_extension_name
            ),
            projects_extension_name=pick(
                self.projects_extension_name, other.projects_extension_name
            ),
            strict=pick(self.strict, other.strict),
            config_files=self.config_files + other.config_files,
            diagnostics=DiagnosticLog.from_iterable([*self.diagnostics, *other.diagnostics]),
        )

    def apply_args(self, args: ArgsLike) -> MutableSettings:
        """Apply overrides from an arguments mapping (CLI or API).

        Keys absent from ``args`` or mapped to ``None`` keep the current value.

        Args:
            args (ArgsLike): Overrides keyed by `ArgKey` names.

        Returns:
            MutableSettings: This draft, updated in place.
        """
        logger.debug("Applying argument overrides to MutableSettings: %s", args)
        self.config_files.append(ARGS_OVERRIDE_MARKER)

        for key in (ArgKey.LIBRARIES_EXTENSION_NAME, ArgKey.PROJECTS_EXTENSION_NAME):
            value: Any = args.get(key)
            if value is None:
                continue
            if isinstance(value, str):
                setattr(self, key, value)
            else:
                msg: str = f"Ignoring {key}={value!r}: expected a string"
                logger.warning(msg)
                self.diagnostics.add_warning(msg)

        strict: Any = args.get(ArgKey.STRICT)
        if strict is not None:
            self.strict = bool(strict)

        return self
