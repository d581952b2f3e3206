"""YAML configuration parser for the JSON reporter.

Reads the reporter section of a runner configuration file into a
ReporterConfig. Keys use the runner's camelCase names.
"""

import importlib
from pathlib import Path
from typing import Any, Callable, Optional, Union

import yaml

from .schema import ReporterConfig

SECTION_KEYS = ("jsonReporter", "junitReporter")

# config key -> ReporterConfig field
FIELD_NAMES = {
    "suite": "suite",
    "outputDir": "output_dir",
    "outputFile": "output_file",
    "useBrowserName": "use_browser_name",
    "nameFormatter": "name_formatter",
    "classNameFormatter": "class_name_formatter",
    "properties": "properties",
    "basePath": "base_path",
}


def load_config(file_path: Union[str, Path]) -> ReporterConfig:
    """Parse a YAML configuration file into a ReporterConfig.

    Args:
        file_path: Path to the YAML configuration file.

    Returns:
        Parsed ReporterConfig. ``basePath`` defaults to the file's directory.

    Raises:
        FileNotFoundError: If the configuration file doesn't exist.
        ValueError: If the YAML is malformed.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    if file_path.suffix not in (".yaml", ".yml"):
        raise ValueError(f"Expected .yaml or .yml file, got: {file_path.suffix}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed YAML in {file_path}: {e}") from e

    if data is None:
        data = {}

    return parse_config_data(
        data, source=str(file_path), default_base_path=str(file_path.parent)
    )


def parse_config_data(
    data: dict,
    source: str = "<inline>",
    default_base_path: Optional[str] = None,
) -> ReporterConfig:
    """Parse a ReporterConfig from a dictionary (already loaded YAML).

    The reporter section is read from ``jsonReporter``, then
    ``junitReporter``, then the top level of the mapping.

    Raises:
        ValueError: If the data or one of its values has the wrong shape.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data).__name__}")

    section = data
    for key in SECTION_KEYS:
        if key in data:
            section = data[key]
            if not isinstance(section, dict):
                raise ValueError(f"'{key}' must be a mapping in {source}")
            break

    kwargs: dict[str, Any] = {}
    for key, field_name in FIELD_NAMES.items():
        if key in section:
            kwargs[field_name] = section[key]

    # A basePath may live at the runner level rather than in the section
    if "base_path" not in kwargs and "basePath" in data:
        kwargs["base_path"] = data["basePath"]
    if "base_path" not in kwargs and default_base_path is not None:
        kwargs["base_path"] = default_base_path

    properties = kwargs.get("properties")
    if properties is not None and not isinstance(properties, dict):
        raise ValueError(f"'properties' must be a mapping in {source}")
    if properties:
        kwargs["properties"] = {str(k): str(v) for k, v in properties.items()}

    for field_name in ("name_formatter", "class_name_formatter"):
        if isinstance(kwargs.get(field_name), str):
            kwargs[field_name] = resolve_callable(kwargs[field_name], source)

    return ReporterConfig(**kwargs)


def resolve_callable(reference: str, source: str = "<inline>") -> Callable:
    """Import a ``module:function`` reference.

    Raises:
        ValueError: If the reference is malformed or cannot be imported.
    """
    module_name, sep, attr = reference.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(
            f"Invalid formatter reference '{reference}' in {source}. "
            "Expected 'module:function'."
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import '{module_name}' in {source}: {e}") from e

    target: Any = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ValueError(f"'{reference}' not found in {source}") from e

    return target
