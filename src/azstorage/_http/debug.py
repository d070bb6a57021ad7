from __future__ import annotations

import os
from typing import Any


def debug(message: str, *args: Any) -> None:
    debug_env = os.getenv("DEBUG", "")
    if "azstorage" in debug_env:
        print(f"azstorage: {message}", *args)


__all__ = ["debug"]
