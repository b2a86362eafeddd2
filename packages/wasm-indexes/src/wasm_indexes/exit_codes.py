from __future__ import annotations

OK = 0
ERR_CONFIG = 10
ERR_VALIDATION = 13
ERR_FILESYSTEM = 14
ERR_INTERNAL = 99
