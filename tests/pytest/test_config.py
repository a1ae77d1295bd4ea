# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

import sys

import pytest
from pydantic import ValidationError

from envpaths import DEFAULT_SUFFIX, Options, Platform


def test_options_defaults() -> None:
    opts = Options()
    assert opts.suffix is None
    assert opts.platform == Platform.detect()
    assert opts.resolved_name("foo") == "foo" + DEFAULT_SUFFIX


def test_options_none_platform_detects() -> None:
    assert Options(platform=None).platform == Platform.detect()


@pytest.mark.parametrize(
    "suffix,expected",
    [
        (None, "foo-nodejs"),
        ("", "foo"),
        ("-dev", "foo-dev"),
        ("bar", "foobar"),
    ],
)
def test_resolved_name(suffix: str | None, expected: str) -> None:
    assert Options(suffix=suffix).resolved_name("foo") == expected


def test_options_frozen() -> None:
    opts = Options(suffix="-x")
    with pytest.raises(ValidationError):
        opts.suffix = "-y"  # type: ignore[misc]


def test_options_invalid_suffix() -> None:
    with pytest.raises(ValidationError):
        Options(suffix=42)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "value,expected",
    [
        (Platform.WINDOWS, Platform.WINDOWS),
        ("win32", Platform.WINDOWS),
        ("Windows", Platform.WINDOWS),
        ("darwin", Platform.MACOS),
        ("MACOS", Platform.MACOS),
        ("other", Platform.OTHER),
        ("linux", Platform.OTHER),
        ("", Platform.OTHER),
        (3.14, Platform.OTHER),
    ],
)
def test_options_platform_coercion(value: object, expected: Platform) -> None:
    assert Options(platform=value).platform is expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ("win32", Platform.WINDOWS),
        ("darwin", Platform.MACOS),
        ("linux", Platform.OTHER),
        ("sunos5", Platform.OTHER),
        (None, Platform.OTHER),
    ],
)
def test_platform_missing(value: object, expected: Platform) -> None:
    """Platform() never fails, unknown values become OTHER."""
    assert Platform(value) is expected


def test_platform_detect() -> None:
    match sys.platform:
        case "win32":
            assert Platform.detect() is Platform.WINDOWS
        case "darwin":
            assert Platform.detect() is Platform.MACOS
        case _:
            assert Platform.detect() is Platform.OTHER
