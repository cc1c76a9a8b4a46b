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
"""Two-phase extraction of archive entries onto disk."""


import os
import shutil
from collections.abc import Iterable
from logging import DEBUG
from typing import NamedTuple

from packit.common.logger import log

from .entry import ArchiveEntry, EntryKind
from .errors import (
    DirectoryCreateError,
    FileCreateError,
    PathTraversalError,
    SymlinkCreateError,
    SymlinkTargetMissingError,
)
from .path_safety import is_within, resolve


class PendingSymlink(NamedTuple):
    """Symlink recorded during the first pass and created in the second."""

    entry_path: str
    link_path: str
    raw_target: str


def extract_entries(entries: Iterable[ArchiveEntry], destination: str) -> None:
    """Extract archive entries below ``destination``.

    Directories and regular files are written in archive order. Symlinks are
    queued and only created once every other entry exists on disk, so a link may
    be stored in the archive before the file it points to.

    The first failing entry aborts the extraction. Nothing is rolled back: files
    and directories written up to that point stay in ``destination``.

    Parameters
    ----------
    entries : Iterable[ArchiveEntry]
        Entries in archive order. Each entry's content is consumed before the
        next entry is requested.
    destination : str
        Existing directory the entries are extracted into.
    """
    root = os.path.abspath(destination)
    if not os.path.isdir(root):
        raise NotADirectoryError(f"Destination {destination} is not a directory")

    pending = _extract_content(entries, root)
    _create_symlinks(pending, root)


def _extract_content(
    entries: Iterable[ArchiveEntry], root: str
) -> list[PendingSymlink]:
    """Write directories and regular files, and collect symlinks."""
    pending: list[PendingSymlink] = []
    for entry in entries:
        if entry.is_top_level_marker:
            continue

        path, ok = resolve(root, entry.path)
        if not ok:
            raise PathTraversalError(entry.path)

        if entry.kind is EntryKind.DIRECTORY:
            _write_directory(entry, path)
        elif entry.kind is EntryKind.REGULAR_FILE:
            _write_file(entry, path)
        else:
            raw_target = entry.read_link_target()
            log(DEBUG, "Deferring symlink %s -> %s", entry.path, raw_target)
            pending.append(PendingSymlink(entry.path, path, raw_target))
    return pending


def _write_directory(entry: ArchiveEntry, path: str) -> None:
    log(DEBUG, "Creating directory %s", entry.path)
    try:
        os.makedirs(path, mode=entry.mode, exist_ok=True)
        # The leaf may predate this entry, and `makedirs` applies the umask
        os.chmod(path, entry.mode)
    except OSError as err:
        raise DirectoryCreateError(entry.path, err) from err


def _make_parents(entry_path: str, path: str) -> None:
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
    except OSError as err:
        raise DirectoryCreateError(
            entry_path, err, operation="create parent directory"
        ) from err


def _write_file(entry: ArchiveEntry, path: str) -> None:
    _make_parents(entry.path, path)

    log(DEBUG, "Writing file %s (%d bytes)", entry.path, entry.size)
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, entry.mode)
        with os.fdopen(fd, "wb") as dst:
            shutil.copyfileobj(entry.content, dst)
            # The mode passed to `os.open` is masked by the umask
            os.fchmod(dst.fileno(), entry.mode)
    except OSError as err:
        raise FileCreateError(entry.path, err) from err


def _create_symlinks(pending: list[PendingSymlink], root: str) -> None:
    """Validate the targets of all queued symlinks and create them."""
    real_root = os.path.realpath(root)
    for link in pending:
        # Missing parents of the link are created as plain directories later on
        link_dir = os.path.realpath(os.path.dirname(link.link_path))
        target = os.path.normpath(os.path.join(link_dir, link.raw_target))
        try:
            resolved = os.path.realpath(target, strict=True)
        except OSError as err:
            raise SymlinkTargetMissingError(link.entry_path, err) from err

        if not is_within(real_root, resolved):
            raise PathTraversalError(link.entry_path)

        _make_parents(link.entry_path, link.link_path)
        log(DEBUG, "Creating symlink %s -> %s", link.entry_path, link.raw_target)
        try:
            os.symlink(link.raw_target, link.link_path)
        except OSError as err:
            raise SymlinkCreateError(link.entry_path, err) from err
