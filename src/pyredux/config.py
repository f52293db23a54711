"""Library configuration for pyredux."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyredux._redact import DEFAULT_REDACT_KEYS


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class ReduxConfig:
    """Store and reducer-composer configuration.

    Parameters
    ----------
    production : bool
        Production mode.  Disables developer diagnostics (missing reducer
        keys, unexpected state shape).  Fatal errors are raised regardless.
    log_payloads : bool
        Include a rendered copy of each dispatched action in the DEBUG
        dispatch log line.  Off by default because payloads may carry
        user data.
    max_log_string : int
        Strings longer than this are truncated when rendering payloads
        for logs.
    redact_keys : frozenset of str
        Payload keys whose values are replaced by ``<redacted>`` in logs.
        Matching ignores case, ``_`` and ``-``.
    """

    production: bool = False
    log_payloads: bool = False
    max_log_string: int = 512
    redact_keys: frozenset[str] = DEFAULT_REDACT_KEYS

    @property
    def diagnostics_enabled(self) -> bool:
        return not self.production

    @classmethod
    def from_env(cls, **overrides: Any) -> ReduxConfig:
        """Create configuration from environment variables.

        Reads ``PYREDUX_ENV`` (``"production"`` enables production mode),
        ``PYREDUX_PRODUCTION``, ``PYREDUX_LOG_PAYLOADS``,
        ``PYREDUX_MAX_LOG_STRING`` and ``PYREDUX_REDACT_KEYS``.  Explicit keyword arguments override
        environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        ReduxConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "production" not in overrides:
            env_name = (env.get("PYREDUX_ENV") or "").strip().lower()
            config_kwargs["production"] = _env_bool(
                env.get("PYREDUX_PRODUCTION"),
                env_name == "production",
            )

        if "log_payloads" not in overrides:
            config_kwargs["log_payloads"] = _env_bool(env.get("PYREDUX_LOG_PAYLOADS"), False)

        max_string_env = env.get("PYREDUX_MAX_LOG_STRING")
        if max_string_env is not None and "max_log_string" not in overrides:
            config_kwargs["max_log_string"] = int(max_string_env)

        # Comma-separated keys are added to the defaults, not substituted for them.
        redact_env = env.get("PYREDUX_REDACT_KEYS")
        if redact_env is not None and "redact_keys" not in overrides:
            extra_keys = {key.strip() for key in redact_env.split(",") if key.strip()}
            config_kwargs["redact_keys"] = DEFAULT_REDACT_KEYS | extra_keys

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
