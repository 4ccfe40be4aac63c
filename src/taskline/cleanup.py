# SPDX-License-Identifier: MIT

import atexit

from taskline.repository.configuration import CONFIGURATION_REPO


def flush_and_sync() -> None:
    # The snapshot is read-only, only settings are ever written back
    CONFIGURATION_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
