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
"""Collect the files of a buildpack that go into its tarball."""


import io
import os
import stat
from collections.abc import Iterable
from logging import DEBUG
from pathlib import Path
from typing import Any

import pathspec

from packit.common.constant import BUILDPACK_CONFIG_FILE
from packit.common.logger import log

from .config import dumps
from .file import File


def build_pathspec(patterns: Iterable[str]) -> pathspec.PathSpec:
    """Build a PathSpec from a list of patterns."""
    return pathspec.PathSpec.from_lines("gitwildmatch", patterns)


def list_files(root_dir: Path) -> list[str]:
    """List all files and symlinks below ``root_dir`` as sorted relative paths.

    Symlinked directories are listed as links and not descended into.
    """
    paths = []
    for dirpath, dirnames, filenames in os.walk(root_dir):
        links = [
            name for name in dirnames if os.path.islink(os.path.join(dirpath, name))
        ]
        for name in filenames + links:
            rel_path = os.path.relpath(os.path.join(dirpath, name), root_dir)
            # Ensure consistent path separators across platforms
            paths.append(rel_path.replace(os.sep, "/"))
    return sorted(paths)


class FileBundler:
    """Selects buildpack files by include pattern and opens them for packaging."""

    def bundle(
        self,
        root_dir: str | Path,
        include_files: list[str],
        config: dict[str, Any],
    ) -> list[File]:
        """Return the files of ``root_dir`` matched by ``include_files``.

        Patterns use gitignore syntax and are expanded in the given order; the
        matches of a single pattern are sorted, and a file matched by several
        patterns is only bundled once. ``buildpack.toml`` is encoded from
        ``config`` instead of being read from disk, so the bundled descriptor
        carries the version being packaged.

        Raises
        ------
        FileNotFoundError
            If a pattern does not match any file.
        """
        root_dir = Path(root_dir)
        available = list_files(root_dir)

        selected: list[str] = []
        for pattern in include_files:
            spec = build_pathspec([pattern])
            matches = [path for path in available if spec.match_file(path)]
            if not matches:
                raise FileNotFoundError(
                    f"no file in {root_dir} matches include pattern {pattern!r}"
                )
            selected += [path for path in matches if path not in selected]

        files = []
        for name in selected:
            log(DEBUG, "Bundling %s", name)
            files.append(self._bundle_file(root_dir, name, config))
        return files

    @staticmethod
    def _bundle_file(root_dir: Path, name: str, config: dict[str, Any]) -> File:
        path = root_dir / name
        info = path.lstat()
        mode = stat.S_IMODE(info.st_mode)

        if stat.S_ISLNK(info.st_mode):
            return File(name=name, size=0, mode=mode, link=os.readlink(path))

        if name == BUILDPACK_CONFIG_FILE:
            content = dumps(config).encode("utf-8")
            return File(
                name=name, size=len(content), mode=mode, content=io.BytesIO(content)
            )

        # pylint: disable-next=consider-using-with
        return File(name=name, size=info.st_size, mode=mode, content=path.open("rb"))
