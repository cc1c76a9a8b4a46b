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
"""packit constants."""


# Environment variables
PACKIT_LOG_LEVEL = "PACKIT_LOG_LEVEL"  # If set, override the console log level

# Buildpack descriptor
BUILDPACK_CONFIG_FILE = "buildpack.toml"

# Archive formats
ZIP_MAGIC = b"PK\x03\x04"
ZIP_EMPTY_MAGIC = b"PK\x05\x06"  # Archive with an end of central directory only
ZIP_CREATE_SYSTEM_UNIX = 3
MSDOS_READ_ONLY_ATTR = 0x01

# Fallback permissions for archive members without Unix mode bits
DEFAULT_FILE_MODE = 0o666
DEFAULT_DIR_MODE = 0o777

# Tarball output
TARBALL_MTIME = 1577836800  # 2020-01-01T00:00:00Z, fixed for reproducible output
TARBALL_DIR_MODE = 0o755
