# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import sys
from enum import StrEnum, unique
from typing import Any


@unique
class Platform(StrEnum):
    # Values follow sys.platform.
    WINDOWS = "win32"
    MACOS = "darwin"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value: Any) -> Platform:
        if isinstance(value, str):
            for member in cls:
                if value.lower() in (member.value, member.name.lower()):
                    return member
        return cls.OTHER

    @classmethod
    def detect(cls) -> Platform:
        return cls(sys.platform)
