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
"""Errors raised while decompressing archives."""


class VacationError(Exception):
    """Base class for all errors raised while decompressing an archive.

    Each error carries the archive-relative ``path`` of the entry that failed and
    the ``operation`` that was being performed on it, so that a failed extraction
    can be traced back to a single archive member.
    """

    operation = "decompress archive"

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class FormatError(VacationError):
    """The input stream is not a valid archive container."""

    operation = "open archive"

    def __init__(self, archive_format: str, reason: object):
        super().__init__(f"failed to create {archive_format} reader: {reason}")
        self.archive_format = archive_format


class PathTraversalError(VacationError):
    """An entry (or a symlink target) resolves outside the destination directory."""

    operation = "validate path"

    def __init__(self, path: str):
        super().__init__(
            f'illegal file path "{path}": the file path does not occur within the '
            "destination directory",
            path,
        )


class _EntryOperationError(VacationError):
    """An OS level operation failed for a single archive entry."""

    def __init__(self, path: str, reason: object, operation: str | None = None):
        if operation is not None:
            self.operation = operation
        super().__init__(f'failed to {self.operation} for "{path}": {reason}', path)


class DirectoryCreateError(_EntryOperationError):
    """A directory (or a missing parent of a file) could not be created."""

    operation = "create directory"


class FileCreateError(_EntryOperationError):
    """A regular file could not be created or written."""

    operation = "create file"


class SymlinkTargetMissingError(_EntryOperationError):
    """The target of a symlink does not exist once all files are extracted."""

    operation = "evaluate symlink"


class SymlinkCreateError(_EntryOperationError):
    """The symlink could not be created, e.g. because the path is occupied."""

    operation = "create symlink"
