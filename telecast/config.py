"""Bot configuration from environment variables.

Loads a ``.env`` file via ``python-dotenv`` and maps these variables onto the
configuration mapping accepted by :class:`~telecast.bot.controller.Bot`:

=======================  ==============  ===========================
Variable                 Config key      Default
=======================  ==============  ===========================
``TELEGRAM_BOT_TOKEN``   ``token``       *(required by Bot)*
``TELECAST_EXCEPTIONS``  ``exceptions``  ``True``
``TELECAST_ASYNC``       ``async``       ``False``
``TELECAST_TIMEOUT``     ``timeout``     ``10``
``TELECAST_API_URL``     ``api_url``     ``https://api.telegram.org``
=======================  ==============  ===========================

Unlike a module-level constants file, values are read when
:func:`load_config` is called so tests can patch the environment.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import os
from typing import Any

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── core ─────────────────────────────────────────────────────────────────────
from telecast.core.exceptions import ConfigError
from telecast.core.logger import TelecastLogger
from telecast.sdk.client import DEFAULT_API_URL, DEFAULT_TIMEOUT

logger = TelecastLogger.get_logger()

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_bool(name: str, raw: str | None, default: bool) -> bool:
    """Parse ``1/0/true/false/yes/no/on/off`` (case-insensitive)."""
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"Environment variable {name} must be a boolean, got {raw!r}")


def _parse_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"Environment variable TELECAST_TIMEOUT must be a number, got {raw!r}") from None
    if timeout <= 0:
        raise ConfigError("Environment variable TELECAST_TIMEOUT must be positive")
    return timeout


# ── Public API ───────────────────────────────────────────────────────────────


def load_config(dotenv_path: str | None = None) -> dict[str, Any]:
    """Return a ``Bot`` configuration mapping built from the environment.

    Variables already present in the process environment win over ``.env``.

    Raises:
        ConfigError: If a boolean or numeric variable cannot be parsed.
    """
    load_dotenv(dotenv_path)

    token = os.environ.get("TELEGRAM_BOT_TOKEN")
    config: dict[str, Any] = {
        "token": token,
        "exceptions": _parse_bool("TELECAST_EXCEPTIONS", os.environ.get("TELECAST_EXCEPTIONS"), True),
        "async": _parse_bool("TELECAST_ASYNC", os.environ.get("TELECAST_ASYNC"), False),
        "timeout": _parse_timeout(os.environ.get("TELECAST_TIMEOUT")),
        "api_url": os.environ.get("TELECAST_API_URL") or DEFAULT_API_URL,
    }

    if token:
        logger.info("Config loaded — TELEGRAM_BOT_TOKEN is set")
    else:
        logger.warning("Config loaded — TELEGRAM_BOT_TOKEN is NOT set")
    return config
