# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0


class EnvPathsError(Exception):
    pass


class HomeDirectoryError(EnvPathsError, RuntimeError):
    def __init__(self, reason: str):
        super().__init__(f"cannot determine the home directory of the current user: {reason}")
