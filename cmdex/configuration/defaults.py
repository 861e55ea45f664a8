"""Built-in default configuration for cmdex."""

from __future__ import annotations

DEFAULT_CONFIG_DICT = {
    "store": {
        # Relative paths resolve against the directory cmdex is run from.
        "path": "cmdex.db",
        "lock_timeout": 1.0,
    },
    "run": {
        "split_mode": "fields",
    },
}
