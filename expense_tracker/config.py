# expense_tracker/config.py
import logging
import os

import yaml

DEFAULT_CONFIG = {
    'log_level': None,
    'listeners': [
        'expense_tracker.listeners.logging_listener.LoggingListener',
    ],
}

LOG_LEVEL_ENV = 'EXPENSE_TRACKER_LOG_LEVEL'


def load_config(path=None):
    """
    Read a YAML config file and fill in anything it leaves out from
    DEFAULT_CONFIG. With no path, return a copy of the defaults.
    """
    cfg = {key: (list(value) if isinstance(value, list) else value)
           for key, value in DEFAULT_CONFIG.items()}
    if path is None:
        return cfg
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    cfg.update(data)
    if cfg.get('listeners') is None:
        cfg['listeners'] = []
    listeners = cfg['listeners']
    if not isinstance(listeners, list) or not all(isinstance(p, str) and '.' in p for p in listeners):
        raise ValueError(f"'listeners' must be a list of dotted class paths, got {listeners!r}")
    level = cfg.get('log_level')
    if level is not None:
        _check_log_level(level)
    return cfg


def _check_log_level(level):
    if not isinstance(logging.getLevelName(str(level).upper()), int):
        raise ValueError(f"Unknown log_level: {level!r}")
    return str(level).upper()


def configure_logging(level=None):
    """Set up root logging from level, falling back to the environment, then INFO."""
    level = level or os.getenv(LOG_LEVEL_ENV) or 'INFO'
    logging.basicConfig(level=_check_log_level(level))
    return logging.getLogger().level
