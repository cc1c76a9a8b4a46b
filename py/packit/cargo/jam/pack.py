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
"""`jam pack` command."""


import os
import sys
import tarfile
import tempfile
from typing import Annotated, TextIO

import click
import typer

from packit.cargo import (
    ConfigError,
    ConfigParser,
    DirectoryDuplicator,
    FileBundler,
    PrePackageError,
    PrePackager,
    TarBuilder,
)
from packit.cargo.config import get_include_files, get_pre_package


class PackError(click.ClickException):
    """Exception raised when a buildpack cannot be packaged."""


class Pack:
    """Packages a buildpack directory into a tarball.

    The buildpack is copied to a temporary directory first, so the pre-packaging
    script can modify the tree without touching the source.
    """

    # pylint: disable-next=too-many-arguments,too-many-positional-arguments
    def __init__(
        self,
        directory_duplicator: DirectoryDuplicator,
        config_parser: ConfigParser,
        pre_packager: PrePackager,
        file_bundler: FileBundler,
        tar_builder: TarBuilder,
        stdout: TextIO,
    ) -> None:
        self.directory_duplicator = directory_duplicator
        self.config_parser = config_parser
        self.pre_packager = pre_packager
        self.file_bundler = file_bundler
        self.tar_builder = tar_builder
        self.stdout = stdout

    def execute(self, buildpack_path: str, output: str, version: str) -> None:
        """Package the buildpack described by ``buildpack_path`` into ``output``."""
        with tempfile.TemporaryDirectory(prefix="dup-dest") as buildpack_dir:
            try:
                self.directory_duplicator.duplicate(
                    os.path.dirname(buildpack_path) or os.curdir, buildpack_dir
                )
            except OSError as err:
                raise PackError(f"failed to duplicate directory: {err}") from err

            try:
                config = self.config_parser.parse(
                    os.path.join(buildpack_dir, os.path.basename(buildpack_path))
                )
            except ConfigError as err:
                raise PackError(f"failed to parse buildpack.toml: {err}") from err

            config["buildpack"]["version"] = version
            typer.echo(
                f"Packing {config['buildpack']['name']} {version}...", file=self.stdout
            )

            script = get_pre_package(config)
            try:
                self.pre_packager.execute(script, buildpack_dir)
            except PrePackageError as err:
                raise PackError(
                    f'failed to execute pre-packaging script "{script}": {err}'
                ) from err

            try:
                files = self.file_bundler.bundle(
                    buildpack_dir, get_include_files(config), config
                )
            except (OSError, ValueError) as err:
                raise PackError(f"failed to bundle files: {err}") from err

            try:
                self.tar_builder.build(output, files)
            except (OSError, tarfile.TarError, ValueError) as err:
                raise PackError(f"failed to create output: {err}") from err


def pack(
    buildpack: Annotated[
        str | None,
        typer.Option(help="Path to the buildpack.toml of the buildpack to package."),
    ] = None,
    output: Annotated[
        str | None,
        typer.Option(help="Path of the tarball to write."),
    ] = None,
    version: Annotated[
        str | None,
        typer.Option(help="Version of the buildpack being packaged."),
    ] = None,
) -> None:
    """Package a buildpack into a tarball.

    The files listed in ``metadata.include_files`` of the given ``buildpack.toml``
    are bundled, after running the optional ``metadata.pre_package`` script:

    ``jam pack --buildpack ./buildpack.toml --version 1.2.3 --output bp.tgz``
    """
    if not buildpack:
        raise click.ClickException("missing required flag --buildpack")
    if not output:
        raise click.ClickException("missing required flag --output")
    if not version:
        raise click.ClickException("missing required flag --version")

    command = Pack(
        DirectoryDuplicator(),
        ConfigParser(),
        PrePackager(),
        FileBundler(),
        TarBuilder(),
        sys.stdout,
    )
    command.execute(buildpack, output, version)
