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
"""File system existence probe."""


import os
from pathlib import Path


def file_exists(path: str | Path) -> bool:
    """Check whether a file or directory exists at ``path``.

    Unlike ``os.path.exists``, only a missing path yields ``False``. Any other
    failure to stat the path, such as a permission error on a parent directory,
    is raised to the caller.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True
