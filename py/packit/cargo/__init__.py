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
"""Buildpack packaging collaborators."""


from .config import ConfigError, ConfigParser
from .directory_duplicator import DirectoryDuplicator
from .file import File
from .file_bundler import FileBundler
from .pre_packager import PrePackageError, PrePackager
from .tar_builder import TarBuilder

__all__ = [
    "ConfigError",
    "ConfigParser",
    "DirectoryDuplicator",
    "File",
    "FileBundler",
    "PrePackageError",
    "PrePackager",
    "TarBuilder",
]
