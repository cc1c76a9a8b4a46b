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
"""Tests for the `jam pack` command."""


import io
import os
import tempfile
from typing import Any
from unittest.mock import MagicMock

import pytest

from packit.cargo import ConfigError, File, PrePackageError

from .pack import Pack, PackError

BUILDPACK_TOML_CONTENTS = b"buildpack-toml-contents"


@pytest.fixture(name="config")
def fixture_config() -> dict[str, Any]:
    """Parsed buildpack descriptor returned by the fake parser."""
    return {
        "api": "0.2",
        "buildpack": {"id": "some-buildpack-id", "name": "some-buildpack-name"},
        "metadata": {
            "include_files": ["bin/build", "bin/detect", "buildpack.toml"],
            "pre_package": "some-prepackage-script",
        },
    }


@pytest.fixture(name="collaborators")
def fixture_collaborators(config: dict[str, Any]) -> dict[str, MagicMock]:
    """Fake collaborators of the pack command."""
    config_parser = MagicMock()
    config_parser.parse.return_value = config
    file_bundler = MagicMock()
    file_bundler.bundle.return_value = [
        File(
            "buildpack.toml",
            len(BUILDPACK_TOML_CONTENTS),
            0o644,
            io.BytesIO(BUILDPACK_TOML_CONTENTS),
        )
    ]
    return {
        "directory_duplicator": MagicMock(),
        "config_parser": config_parser,
        "pre_packager": MagicMock(),
        "file_bundler": file_bundler,
        "tar_builder": MagicMock(),
    }


def _pack(collaborators: dict[str, MagicMock], stdout: io.StringIO) -> Pack:
    return Pack(stdout=stdout, **collaborators)  # type: ignore[arg-type]


def test_execute(collaborators: dict[str, MagicMock]) -> None:
    """The buildpack is duplicated, parsed, pre-packaged, bundled and built."""
    # Prepare
    stdout = io.StringIO()

    # Execute
    _pack(collaborators, stdout).execute(
        "buildpack-root/some-buildpack.toml",
        "some-output.tgz",
        "some-buildpack-version",
    )

    # Assert
    expected = "Packing some-buildpack-name some-buildpack-version...\n"
    assert expected in stdout.getvalue()

    duplicate = collaborators["directory_duplicator"].duplicate
    source_path, buildpack_root = duplicate.call_args.args
    assert source_path == "buildpack-root"
    assert buildpack_root.startswith(tempfile.gettempdir())
    assert not os.path.exists(buildpack_root)

    collaborators["config_parser"].parse.assert_called_once_with(
        os.path.join(buildpack_root, "some-buildpack.toml")
    )
    collaborators["pre_packager"].execute.assert_called_once_with(
        "some-prepackage-script", buildpack_root
    )

    bundle = collaborators["file_bundler"].bundle
    root_dir, include_files, config = bundle.call_args.args
    assert root_dir == buildpack_root
    assert include_files == ["bin/build", "bin/detect", "buildpack.toml"]
    assert config["buildpack"]["version"] == "some-buildpack-version"

    output, files = collaborators["tar_builder"].build.call_args.args
    assert output == "some-output.tgz"
    assert len(files) == 1
    assert files[0].name == "buildpack.toml"
    assert files[0].size == len(BUILDPACK_TOML_CONTENTS)
    assert files[0].content.read() == BUILDPACK_TOML_CONTENTS


def test_execute_buildpack_in_working_directory(
    collaborators: dict[str, MagicMock],
) -> None:
    """A bare descriptor file name duplicates the working directory."""
    # Execute
    _pack(collaborators, io.StringIO()).execute("buildpack.toml", "out.tgz", "1.0.0")

    # Assert
    source_path, _ = collaborators["directory_duplicator"].duplicate.call_args.args
    assert source_path == os.curdir


@pytest.mark.parametrize(
    "collaborator, method, error, expected",
    [
        (
            "directory_duplicator",
            "duplicate",
            OSError("duplication failed"),
            "failed to duplicate directory: duplication failed",
        ),
        (
            "pre_packager",
            "execute",
            PrePackageError("script failed"),
            'failed to execute pre-packaging script "some-prepackage-script": '
            "script failed",
        ),
        (
            "file_bundler",
            "bundle",
            FileNotFoundError("read failed"),
            "failed to bundle files: read failed",
        ),
        (
            "file_bundler",
            "bundle",
            ValueError("malformed include pattern"),
            "failed to bundle files: malformed include pattern",
        ),
        (
            "tar_builder",
            "build",
            OSError("failed to build tarball"),
            "failed to create output: failed to build tarball",
        ),
    ],
)
def test_execute_failures(
    collaborators: dict[str, MagicMock],
    collaborator: str,
    method: str,
    error: Exception,
    expected: str,
) -> None:
    """Collaborator failures are wrapped with the failing step."""
    # Prepare
    getattr(collaborators[collaborator], method).side_effect = error

    # Execute
    with pytest.raises(PackError) as exc_info:
        _pack(collaborators, io.StringIO()).execute(
            "some-buildpack.toml", "some-output.tgz", "some-buildpack-version"
        )

    # Assert
    assert str(exc_info.value) == expected
    assert exc_info.value.__cause__ is error


def test_execute_parse_failure(collaborators: dict[str, MagicMock]) -> None:
    """Descriptor errors are wrapped and nothing is bundled."""
    # Prepare
    collaborators["config_parser"].parse.side_effect = ConfigError(
        "no-such-buildpack.toml", ["failed to parse"]
    )

    # Execute
    with pytest.raises(PackError) as exc_info:
        _pack(collaborators, io.StringIO()).execute(
            "no-such-buildpack.toml", "some-output.tgz", "some-buildpack-version"
        )

    # Assert
    assert "failed to parse buildpack.toml:" in str(exc_info.value)
    assert "failed to parse" in str(exc_info.value)
    collaborators["file_bundler"].bundle.assert_not_called()
    collaborators["tar_builder"].build.assert_not_called()
