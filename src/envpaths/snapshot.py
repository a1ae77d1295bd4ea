# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

import os
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from envpaths.exceptions import HomeDirectoryError
from envpaths.log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class EnvironmentSnapshot:
    """The part of the process environment which is needed to
    derive the base directories, captured at a single instant.

    A snapshot is never updated. Changes to the environment after
    :func:`snapshot` returned are not reflected; take a new one.
    """

    home: str
    tmp: str
    app_data: str | None = None
    local_app_data: str | None = None
    xdg_data_home: str | None = None
    xdg_config_home: str | None = None
    xdg_cache_home: str | None = None
    xdg_state_home: str | None = None


def getenv_icase(environ: Mapping[str, str], key: str) -> str | None:
    """Returns the value of the first variable in ``environ`` whose
    name equals ``key`` ignoring case, or None."""
    key = key.upper()
    for k, v in environ.items():
        if k.upper() == key:
            return v
    return None


def _home_dir() -> str:
    try:
        return os.fspath(Path.home())
    except (RuntimeError, KeyError) as e:
        raise HomeDirectoryError(str(e)) from e


def snapshot(
    environ: Mapping[str, str] | None = None,
    home: str | None = None,
    tmp: str | None = None,
) -> EnvironmentSnapshot:
    """Captures the current environment.

    :param environ: Replaces ``os.environ`` as the source of variables.
    :param home: Replaces the home directory reported by the OS.
    :param tmp: Replaces the temp directory reported by the OS.
    """
    env = os.environ if environ is None else environ

    snap = EnvironmentSnapshot(
        home=_home_dir() if home is None else home,
        tmp=tempfile.gettempdir() if tmp is None else tmp,
        app_data=getenv_icase(env, "APPDATA"),
        local_app_data=getenv_icase(env, "LOCALAPPDATA"),
        xdg_data_home=env.get("XDG_DATA_HOME"),
        xdg_config_home=env.get("XDG_CONFIG_HOME"),
        xdg_cache_home=env.get("XDG_CACHE_HOME"),
        xdg_state_home=env.get("XDG_STATE_HOME"),
    )

    found = [k for k, v in vars(snap).items() if k not in ("home", "tmp") and v is not None]
    logger.debug(f"environment snapshot: home={snap.home} tmp={snap.tmp} set={found}")
    return snap
