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
"""Write buildpack files into a gzip compressed tarball."""


import gzip
import posixpath
import tarfile
from logging import INFO
from pathlib import Path

from packit.common.constant import TARBALL_DIR_MODE, TARBALL_MTIME
from packit.common.logger import log

from .file import File


def _parent_dirs(name: str) -> list[str]:
    """Return the parent directories of ``name``, outermost first."""
    parents = []
    parent = posixpath.dirname(name)
    while parent:
        parents.insert(0, parent)
        parent = posixpath.dirname(parent)
    return parents


class TarBuilder:
    """Builds reproducible ``.tgz`` files from bundled buildpack files."""

    def build(self, path: str | Path, files: list[File]) -> None:
        """Write ``files`` to the tarball at ``path``.

        Parent directories are added as explicit entries before the first file
        that needs them. All entries share a fixed modification time, so building
        the same files twice yields identical bytes. The content stream of every
        file is closed once it has been written.
        """
        path = Path(path)
        log(INFO, "Building tarball: %s", path)

        path.parent.mkdir(parents=True, exist_ok=True)
        written_dirs: set[str] = set()
        with path.open("wb") as out, gzip.GzipFile(
            filename="", mode="wb", fileobj=out, mtime=TARBALL_MTIME
        ) as gz, tarfile.open(fileobj=gz, mode="w", format=tarfile.PAX_FORMAT) as tar:
            for file in files:
                for parent in _parent_dirs(file.name):
                    if parent in written_dirs:
                        continue
                    tar.addfile(_tar_info(parent, TARBALL_DIR_MODE, tarfile.DIRTYPE))
                    written_dirs.add(parent)

                log(INFO, "  %s", file.name)
                if file.is_symlink:
                    info = _tar_info(file.name, file.mode, tarfile.SYMTYPE)
                    info.linkname = file.link
                    tar.addfile(info)
                    continue

                if file.content is None:
                    raise ValueError(f"File {file.name} has no content to write")
                info = _tar_info(file.name, file.mode, tarfile.REGTYPE)
                info.size = file.size
                with file.content as content:
                    tar.addfile(info, content)


def _tar_info(name: str, mode: int, type_: bytes) -> tarfile.TarInfo:
    info = tarfile.TarInfo(name)
    info.type = type_
    info.mode = mode
    info.mtime = TARBALL_MTIME
    return info
