# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from envpaths.config import DEFAULT_SUFFIX, Options
from envpaths.exceptions import EnvPathsError, HomeDirectoryError
from envpaths.platforms import Platform
from envpaths.resolver import PathBundle, resolve, resolve_now
from envpaths.snapshot import EnvironmentSnapshot, snapshot

__all__ = [
    "DEFAULT_SUFFIX",
    "EnvPathsError",
    "EnvironmentSnapshot",
    "HomeDirectoryError",
    "Options",
    "PathBundle",
    "Platform",
    "resolve",
    "resolve_now",
    "snapshot",
]
