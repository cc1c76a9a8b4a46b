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
"""Archive entry model shared by all archive formats."""


import os
import posixpath
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO


class EntryKind(Enum):
    """Archive entry types understood by the extraction engine."""

    DIRECTORY = 0
    REGULAR_FILE = 1
    SYMLINK = 2


@dataclass
class ArchiveEntry:
    """A single member of an archive.

    ``content`` is only valid until the archive iterator moves on to the next
    entry. For symlinks its contents are the link target text.
    """

    path: str
    kind: EntryKind
    mode: int
    size: int
    content: BinaryIO

    @property
    def is_top_level_marker(self) -> bool:
        """Whether the entry only names the archive root, e.g. ``./``."""
        return posixpath.normpath(self.path) == "."

    def read_link_target(self) -> str:
        """Read the full content stream as symlink target text.

        Targets that are not valid UTF-8 keep their raw bytes as surrogate escapes,
        the same way `os` decodes file names.
        """
        return os.fsdecode(self.content.read())
