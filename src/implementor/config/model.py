# topmark:header:start
#
#   project      : Implementor
#   file         : model.py
#   file_relpath : src/implementor/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Implementor configuration model.

Configuration is built in two phases, mirroring how the generator runs:

- `MutableConfig` collects defaults, discovered files, explicit ``--config``
  files and CLI overrides, merging them in that order.
- `Config` is the frozen snapshot handed to the pipeline. Use `Config.thaw`
  to obtain an editable copy and `MutableConfig.freeze` to go back.

Recognized keys (TOML table ``[implementor]`` or ``[tool.implementor]``):

- ``suffix`` (str): appended to the interface's simple name.
- ``python`` (str): interpreter used as the compiler toolchain.
- ``verify`` (bool): import-check the compiled module in archive mode.
- ``manifest_version`` (str): value of the archive's manifest version attribute.
- ``workspace_prefix`` (str): prefix of the temporary workspace directory.
- ``search_paths`` (list[str]): extra ``sys.path`` entries used for type lookup.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from implementor.config.io import ConfigLoadError, TomlTable, extract_table, load_toml_dict
from implementor.config.logging import ImplementorLogger, get_logger
from implementor.constants import (
    CONFIG_FILE_NAME,
    IMPLEMENT_SUFFIX,
    MANIFEST_VERSION,
    PYPROJECT_FILE_NAME,
    WORKSPACE_PREFIX,
)

logger: ImplementorLogger = get_logger(__name__)

KNOWN_KEYS: frozenset[str] = frozenset(
    {"suffix", "python", "verify", "manifest_version", "workspace_prefix", "search_paths"}
)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        suffix (str): Suffix of the generated class name (``<Simple><suffix>``).
        python (str | None): Interpreter used as the compiler toolchain;
            None selects the running interpreter.
        verify (bool): Whether archive mode import-checks the compiled module.
        manifest_version (str): Value of the manifest version attribute.
        workspace_prefix (str): Prefix for the temporary workspace directory.
        search_paths (tuple[Path, ...]): Extra import roots for type lookup.
        config_files (tuple[Path, ...]): Config sources that contributed values.
    """

    suffix: str
    python: str | None
    verify: bool
    manifest_version: str
    workspace_prefix: str
    search_paths: tuple[Path, ...]
    config_files: tuple[Path, ...]

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            suffix=self.suffix,
            python=self.python,
            verify=self.verify,
            manifest_version=self.manifest_version,
            workspace_prefix=self.workspace_prefix,
            search_paths=list(self.search_paths),
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the settings as a TOML-serializable dict."""
        return {
            "suffix": self.suffix,
            "python": self.python,
            "verify": self.verify,
            "manifest_version": self.manifest_version,
            "workspace_prefix": self.workspace_prefix,
            "search_paths": [str(p) for p in self.search_paths],
        }


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging."""

    suffix: str = IMPLEMENT_SUFFIX
    python: str | None = None
    verify: bool = True
    manifest_version: str = MANIFEST_VERSION
    workspace_prefix: str = WORKSPACE_PREFIX
    search_paths: list[Path] = field(default_factory=lambda: [])
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`.

        Raises:
            ValueError: If the suffix is not a valid identifier fragment.
        """
        if not self.suffix or not ("X" + self.suffix).isidentifier():
            raise ValueError(f"Invalid class name suffix: {self.suffix!r}")
        return Config(
            suffix=self.suffix,
            python=self.python,
            verify=self.verify,
            manifest_version=self.manifest_version,
            workspace_prefix=self.workspace_prefix,
            search_paths=tuple(self.search_paths),
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        return cls()

    @classmethod
    def from_toml_dict(cls, data: Mapping[str, Any], *, base: Path | None = None) -> MutableConfig:
        """Build a draft from a settings mapping; unknown keys are logged and ignored.

        Args:
            data (Mapping[str, Any]): The ``[implementor]`` table (or an API mapping).
            base (Path | None): Directory that relative ``search_paths`` resolve against.

        Returns:
            MutableConfig: A draft holding only the defaults plus values present in ``data``.
        """
        draft = cls.from_defaults()
        draft.apply_mapping(data, base=base)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Read one TOML config file into a draft.

        Supports ``implementor.toml`` and the ``[tool.implementor]`` section of
        ``pyproject.toml``.

        Args:
            path (Path): The file to read.

        Returns:
            MutableConfig | None: The draft, or None if a ``pyproject.toml`` has no
            Implementor section.
        """
        logger.debug("Reading configuration from %s", path)
        table = extract_table(load_toml_dict(path), path=path)
        if table is None:
            return None
        draft = cls.from_toml_dict(table, base=path.parent)
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_config_file(cls, start: Path) -> Path | None:
        """Return the config file to use in ``start``, if any.

        ``implementor.toml`` wins over a ``pyproject.toml`` with a
        ``[tool.implementor]`` section.
        """
        candidate = start / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject = start / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            try:
                if extract_table(load_toml_dict(pyproject), path=pyproject) is not None:
                    return pyproject
            except ConfigLoadError as exc:
                logger.warning("Ignoring unreadable %s: %s", pyproject, exc)
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: list[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge defaults, the discovered config file and explicit config files.

        Args:
            start (Path | None): Directory to discover a config file in (default: CWD).
            extra_config_files (list[Path] | None): Files merged on top, in order.
            no_config (bool): Skip discovery (explicit files are still merged).

        Returns:
            MutableConfig: The merged draft.

        Raises:
            ConfigLoadError: If an explicit config file cannot be loaded.
        """
        draft = cls.from_defaults()
        if not no_config:
            discovered = cls.discover_config_file(start or Path.cwd())
            if discovered is not None:
                layer = cls.from_toml_file(discovered)
                if layer is not None:
                    draft = draft.merge_with(layer)
        for path in extra_config_files or []:
            layer = cls.from_toml_file(path)
            if layer is None:
                raise ConfigLoadError(f"No [tool.implementor] section in {path}")
            draft = draft.merge_with(layer)
        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return ``self`` overlaid with every non-default value of ``other``.

        ``search_paths`` and ``config_files`` accumulate instead of replacing.
        """
        defaults = MutableConfig()
        for name in ("suffix", "python", "verify", "manifest_version", "workspace_prefix"):
            value = getattr(other, name)
            if value != getattr(defaults, name):
                setattr(self, name, value)
        self.search_paths.extend(p for p in other.search_paths if p not in self.search_paths)
        self.config_files.extend(other.config_files)
        return self

    def apply_mapping(self, data: Mapping[str, Any], *, base: Path | None = None) -> MutableConfig:
        """Apply a settings mapping in place (used by TOML loading and the API)."""
        for key, value in data.items():
            if key not in KNOWN_KEYS:
                logger.warning("Ignoring unknown configuration key: %s", key)
                continue
            if key == "search_paths":
                for raw in value:
                    p = Path(raw)
                    if base is not None and not p.is_absolute():
                        p = base / p
                    self.search_paths.append(p)
            elif key == "verify":
                self.verify = bool(value)
            else:
                setattr(self, key, None if value is None else str(value))
        return self


def ensure_config(config: Config | Mapping[str, Any] | None) -> Config:
    """Normalize an API ``config`` argument into a frozen `Config`.

    Args:
        config (Config | Mapping[str, Any] | None): A frozen config, a settings
            mapping (merged over the defaults), or None for the defaults.

    Returns:
        Config: The frozen configuration.
    """
    if isinstance(config, Config):
        return config
    draft = MutableConfig.from_defaults()
    if config is not None:
        draft.apply_mapping(config)
    return draft.freeze()
