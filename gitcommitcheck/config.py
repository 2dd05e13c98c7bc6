"""Configuration management for git-commit-check."""
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

import tomli
import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigFileError
from .models import Severity, ValidationKind

DEFAULT_CONFIG_FILENAME = ".gitcommitcheck.toml"
PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_SECTION = "gitcommitcheck"
DEFAULT_THRESHOLD = 30


class ConfigLayer(BaseModel):
    """A partial configuration read from a file or built from the command line.

    Unset fields leave the value of earlier layers untouched. Rule and
    severity names are kept as strings until the layer is applied.
    """

    model_config = ConfigDict(extra="ignore")

    threshold: Optional[int] = Field(
        default=None,
        ge=0,
        description="Subjects at or below this many characters count as short",
    )

    strict: Optional[bool] = Field(
        default=None,
        description="Treat warnings as errors when deciding the exit status",
    )

    disable: List[str] = Field(
        default_factory=list,
        description="Rules to skip entirely (canonical names or aliases)",
    )

    severity: Dict[str, str] = Field(
        default_factory=dict,
        description="Rule name to severity name (error, warning, info, ignore)",
    )

    branches: Optional[List[str]] = Field(
        default=None,
        description="Glob patterns of branches to validate; empty means all",
    )


class Config(BaseModel):
    """Effective settings for a validation run.

    A Config is immutable; ``apply_layer`` returns a new instance so that a
    failed merge never leaves a half-applied configuration behind.
    """

    model_config = ConfigDict(frozen=True)

    threshold: int = Field(
        default=DEFAULT_THRESHOLD,
        ge=0,
        description="Subjects at or below this many characters count as short",
    )

    strict: bool = Field(
        default=False,
        description="Treat warnings as errors when deciding the exit status",
    )

    disabled: FrozenSet[ValidationKind] = Field(
        default_factory=frozenset,
        description="Rules that are never evaluated",
    )

    severities: Mapping[ValidationKind, Severity] = Field(
        default_factory=lambda: MappingProxyType({}),
        description="Severity overrides; rules not listed use their default",
    )

    branches: List[str] = Field(
        default_factory=list,
        description="Glob patterns of branches to validate; empty means all",
    )

    @field_validator("severities", mode="after")
    @classmethod
    def _freeze_severities(cls, value: Mapping[ValidationKind, Severity]):
        return MappingProxyType(dict(value))

    def is_enabled(self, kind: ValidationKind) -> bool:
        return kind not in self.disabled

    def get_severity(self, kind: ValidationKind) -> Severity:
        return self.severities.get(kind, kind.default_severity)

    def should_report(self, kind: ValidationKind) -> bool:
        return self.get_severity(kind) is not Severity.IGNORE

    def apply_layer(self, layer: ConfigLayer) -> "Config":
        """Merge a layer on top of this configuration.

        Disables are resolved first, then severities, then scalar settings.

        Raises:
            UnknownRuleError: If a rule name does not resolve
            UnknownSeverityError: If a severity name does not resolve
        """
        disabled = set(self.disabled)
        for name in layer.disable:
            disabled.add(ValidationKind.parse(name))

        severities = dict(self.severities)
        for name, level in layer.severity.items():
            severities[ValidationKind.parse(name)] = Severity.parse(level)

        update: Dict[str, Any] = {
            "disabled": frozenset(disabled),
            "severities": MappingProxyType(severities),
        }
        if layer.threshold is not None:
            update["threshold"] = layer.threshold
        if layer.strict is not None:
            update["strict"] = layer.strict
        if layer.branches is not None:
            update["branches"] = list(layer.branches)

        return self.model_copy(update=update)

    def to_layer(self) -> ConfigLayer:
        """Export every setting explicitly, using short rule aliases."""
        return ConfigLayer(
            threshold=self.threshold,
            strict=self.strict,
            disable=[kind.alias for kind in ValidationKind if kind in self.disabled],
            severity={
                kind.alias: self.get_severity(kind).value for kind in ValidationKind
            },
            branches=list(self.branches),
        )

    @classmethod
    def load(
        cls,
        start_dir: Path,
        overrides: Optional[ConfigLayer] = None,
        config_file: Optional[Path] = None,
    ) -> "Config":
        """Build the configuration for a repository.

        Applies defaults, then the file layer (``config_file`` or the nearest
        config file found from ``start_dir``), then ``overrides``.

        Args:
            start_dir: Directory to start the config file search from
            overrides: Optional layer that wins over the file layer
            config_file: Explicit config file, skipping discovery

        Returns:
            Config: The merged configuration
        """
        config = cls()

        path = config_file or find_config_file(start_dir)
        if path is not None:
            config = config.apply_layer(load_layer(path))

        if overrides is not None:
            config = config.apply_layer(overrides)

        return config

    def save(self, directory: Path) -> Path:
        """Write this configuration to a dedicated config file.

        Args:
            directory: Directory that will hold the config file

        Returns:
            Path: The file that was written
        """
        config_path = directory / DEFAULT_CONFIG_FILENAME
        data = self.to_layer().model_dump(exclude_none=True)

        with config_path.open("wb") as f:
            tomli_w.dump(data, f)
        return config_path


def find_config_file(start_dir: Path) -> Optional[Path]:
    """Find the nearest config file, walking up from ``start_dir``.

    In each directory a dedicated ``.gitcommitcheck.toml`` takes precedence
    over ``pyproject.toml``.
    """
    start = start_dir.resolve()
    for directory in (start, *start.parents):
        dedicated = directory / DEFAULT_CONFIG_FILENAME
        if dedicated.is_file():
            return dedicated

        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file():
            return pyproject
    return None


def load_layer(path: Path) -> ConfigLayer:
    """Read a configuration layer from a TOML file.

    ``pyproject.toml`` files hold the layer under ``[tool.gitcommitcheck]``;
    any other file holds it at the top level.

    Raises:
        ConfigFileError: If the file cannot be read or holds invalid values
    """
    try:
        with path.open("rb") as f:
            data = tomli.load(f)
    except OSError as e:
        raise ConfigFileError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise ConfigFileError(path, f"invalid UTF-8: {e}") from e
    except tomli.TOMLDecodeError as e:
        raise ConfigFileError(path, f"invalid TOML syntax: {e}") from e

    if path.name == PYPROJECT_FILENAME:
        data = _pyproject_section(path, data)

    try:
        return ConfigLayer.model_validate(data)
    except ValidationError as e:
        raise ConfigFileError(path, _summarize(e)) from e


def _pyproject_section(path: Path, data: Dict[str, Any]) -> Any:
    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigFileError(path, "tool: expected a table")
    return tool.get(PYPROJECT_SECTION, {})


def _summarize(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        problems.append(f"{location}: {item['msg']}")
    return "; ".join(problems)
