# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from envpaths.platforms import Platform

DEFAULT_SUFFIX = "-nodejs"


def _coerce_platform(value: Any) -> Platform:
    if value is None:
        return Platform.detect()
    return value if isinstance(value, Platform) else Platform(value)


PlatformArg = Annotated[Platform, BeforeValidator(_coerce_platform)]
"""
Special type for a platform field, which never fails to validate.

None selects the running platform, unknown values become Platform.OTHER.

Usage: x: PlatformArg = ....
"""


class Options(BaseModel):
    """The optional inputs of :func:`envpaths.resolve`."""

    model_config = ConfigDict(frozen=True)

    suffix: str | None = Field(
        None,
        description=f"Appended to the application name without a separator; {DEFAULT_SUFFIX!r} if unset",
    )
    platform: PlatformArg = Field(
        default_factory=Platform.detect,
        description="The platform whose conventions are applied",
    )

    def resolved_name(self, name: str) -> str:
        return name + (self.suffix if self.suffix is not None else DEFAULT_SUFFIX)
