# Copyright 2026 Flower Labs GmbH. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================
"""Buildpack descriptor (`buildpack.toml`) parsing."""


from logging import WARN
from pathlib import Path
from typing import Any

import tomli
import tomli_w

from packit.common.logger import log


class ConfigError(Exception):
    """Exception raised when a buildpack descriptor cannot be used."""

    def __init__(self, path: str | Path, errors: list[str]):
        super().__init__(
            f"buildpack descriptor {path} is invalid:\n"
            + "\n".join([f"- {line}" for line in errors])
        )
        self.errors = errors


def validate_fields_in_config(
    config: dict[str, Any],
) -> tuple[bool, list[str], list[str]]:
    """Validate buildpack.toml fields."""
    errors = []
    warnings = []

    if "api" not in config:
        errors.append('Property "api" missing')
    elif not isinstance(config["api"], str):
        errors.append('Property "api" must be a string')

    if "buildpack" not in config:
        errors.append("Missing [buildpack] section")
    else:
        if "id" not in config["buildpack"]:
            errors.append('Property "id" missing in [buildpack]')
        if "name" not in config["buildpack"]:
            errors.append('Property "name" missing in [buildpack]')
        if "homepage" not in config["buildpack"]:
            warnings.append('Recommended property "homepage" missing in [buildpack]')

    if "metadata" not in config:
        warnings.append("Missing [metadata] section, no files will be included")
    else:
        include_files = config["metadata"].get("include_files", [])
        if not isinstance(include_files, list) or not all(
            isinstance(pattern, str) for pattern in include_files
        ):
            errors.append(
                'Property "include_files" in [metadata] must be a list of strings'
            )
        pre_package = config["metadata"].get("pre_package", "")
        if not isinstance(pre_package, str):
            errors.append('Property "pre_package" in [metadata] must be a string')

    if "stacks" not in config and "order" not in config:
        warnings.append('Recommended property "stacks" or "order" missing')

    return len(errors) == 0, errors, warnings


def load(toml_path: Path) -> dict[str, Any]:
    """Load buildpack.toml and return as dict."""
    with toml_path.open("rb") as toml_file:
        return tomli.load(toml_file)


def dumps(config: dict[str, Any]) -> str:
    """Encode a buildpack descriptor as TOML."""
    return tomli_w.dumps(config)


def get_include_files(config: dict[str, Any]) -> list[str]:
    """Return the ordered include file patterns of a descriptor."""
    return list(config.get("metadata", {}).get("include_files", []))


def get_pre_package(config: dict[str, Any]) -> str:
    """Return the pre-package script of a descriptor, or an empty string."""
    return str(config.get("metadata", {}).get("pre_package", ""))


class ConfigParser:
    """Parses and validates buildpack descriptors."""

    def parse(self, path: str | Path) -> dict[str, Any]:
        """Load the descriptor at ``path``.

        Raises
        ------
        ConfigError
            If the file cannot be read, is not valid TOML or misses required
            properties.
        """
        path = Path(path)
        try:
            config = load(path)
        except OSError as err:
            raise ConfigError(path, [str(err)]) from err
        except tomli.TOMLDecodeError as err:
            raise ConfigError(path, [f"invalid TOML: {err}"]) from err

        is_valid, errors, warnings = validate_fields_in_config(config)
        if not is_valid:
            raise ConfigError(path, errors)

        for warning in warnings:
            log(WARN, "%s: %s", path.name, warning)

        return config
