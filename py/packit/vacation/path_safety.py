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
"""Destination boundary checks for archive entries."""


import os


def resolve(destination_root: str, entry_path: str) -> tuple[str, bool]:
    """Resolve an archive path against the destination directory.

    The check is purely lexical: ``..`` segments are collapsed with
    ``os.path.normpath`` and the file system is never consulted.

    Parameters
    ----------
    destination_root : str
        Directory the archive is extracted into.
    entry_path : str
        Archive-relative path of an entry, as stored in the archive.

    Returns
    -------
    Tuple[str, bool]
        The absolute, normalized path of the entry and whether that path is the
        destination directory itself or lies below it.
    """
    root = os.path.normpath(os.path.abspath(destination_root))
    target = os.path.normpath(os.path.join(root, entry_path))
    return target, is_within(root, target)


def is_within(root: str, path: str) -> bool:
    """Check whether the normalized ``path`` equals ``root`` or lies below it."""
    if path == root:
        return True
    prefix = root if root.endswith(os.sep) else root + os.sep
    return path.startswith(prefix)
