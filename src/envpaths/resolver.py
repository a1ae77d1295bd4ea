# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass
from pathlib import PurePath, PurePosixPath, PureWindowsPath

from envpaths.config import Options
from envpaths.log import TRACE, get_logger
from envpaths.platforms import Platform
from envpaths.snapshot import EnvironmentSnapshot, snapshot

logger = get_logger(__name__)


@dataclass(frozen=True)
class PathBundle:
    data: str
    config: str
    cache: str
    log: str
    temp: str


def _leaf(flavour: type[PurePath], name: str) -> PurePath:
    # An anchored name would replace the base directory when joined.
    leaf = flavour(name)
    return leaf.relative_to(leaf.anchor) if leaf.anchor else leaf


def _macos(env: EnvironmentSnapshot, resolved_name: str) -> PathBundle:
    name = _leaf(PurePosixPath, resolved_name)
    library = PurePosixPath(env.home, "Library")
    return PathBundle(
        data=str(library / "Application Support" / name),
        config=str(library / "Preferences" / name),
        cache=str(library / "Caches" / name),
        log=str(library / "Logs" / name),
        temp=str(PurePosixPath(env.tmp) / name),
    )


def _windows(env: EnvironmentSnapshot, resolved_name: str) -> PathBundle:
    name = _leaf(PureWindowsPath, resolved_name)
    home = PureWindowsPath(env.home)
    app_data = PureWindowsPath(env.app_data) if env.app_data else home / "AppData" / "Roaming"
    local_app_data = (
        PureWindowsPath(env.local_app_data) if env.local_app_data else home / "AppData" / "Local"
    )
    return PathBundle(
        data=str(local_app_data / name / "Data"),
        config=str(app_data / name / "Config"),
        cache=str(local_app_data / name / "Cache"),
        log=str(local_app_data / name / "Log"),
        temp=str(PureWindowsPath(env.tmp) / name),
    )


# https://specifications.freedesktop.org/basedir/latest/
def _xdg(env: EnvironmentSnapshot, resolved_name: str) -> PathBundle:
    name = _leaf(PurePosixPath, resolved_name)
    home = PurePosixPath(env.home)
    # Splits on both separators, so a Windows style home still yields the user name.
    username = PureWindowsPath(env.home).name

    def base(value: str | None, fallback: PurePath) -> PurePath:
        return PurePosixPath(value) if value else fallback

    return PathBundle(
        data=str(base(env.xdg_data_home, home / ".local" / "share") / name),
        config=str(base(env.xdg_config_home, home / ".config") / name),
        cache=str(base(env.xdg_cache_home, home / ".cache") / name),
        log=str(base(env.xdg_state_home, home / ".local" / "state") / name),
        # The temp directory is shared between users on these systems.
        temp=str(PurePosixPath(env.tmp, username) / name),
    )


def resolve(
    env: EnvironmentSnapshot,
    name: str,
    suffix: str | None = None,
    platform: Platform | str | None = None,
) -> PathBundle:
    """Derives the base directories of the application ``name``
    from the snapshot ``env``. No directory is created or checked.

    :param suffix: Appended to ``name`` as is; defaults to ``-nodejs``.
    :param platform: The platform whose conventions are used. None
                     selects the running platform. Anything that is
                     neither Windows nor macOS gets the XDG layout.
    """
    opts = Options(suffix=suffix, platform=platform)
    resolved_name = opts.resolved_name(name)

    match opts.platform:
        case Platform.MACOS:
            paths = _macos(env, resolved_name)
        case Platform.WINDOWS:
            paths = _windows(env, resolved_name)
        case _:
            paths = _xdg(env, resolved_name)

    logger.log(TRACE, f"resolved {resolved_name!r} for {opts.platform.name}: {paths}")
    return paths


def resolve_now(name: str, suffix: str | None = None) -> PathBundle:
    """Like :func:`resolve`, but with a fresh snapshot of the
    current environment and the running platform."""
    return resolve(snapshot(), name, suffix)
