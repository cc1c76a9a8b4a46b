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
"""Files handed from the file bundler to the tarball builder."""


from dataclasses import dataclass
from typing import BinaryIO


@dataclass
class File:
    """A file to be written into a buildpack tarball.

    Regular files carry an open ``content`` stream which is closed by the
    consumer. Symlinks carry the link target in ``link`` and no content.
    """

    name: str
    size: int
    mode: int
    content: BinaryIO | None = None
    link: str = ""

    @property
    def is_symlink(self) -> bool:
        """Whether the file is a symlink."""
        return bool(self.link)
