# -*- coding: utf-8 -*-
"""
Copyright simplesum developers
"""

import logging
from os.path import dirname, join

import yaml

from simplesum.exceptions import WrongArgumentsError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = join(dirname(__file__), 'config.yaml')


class Section(dict):
    """Nested mapping of the yaml file whose keys can be read as attributes."""

    def __init__(self, mapping):
        super().__init__((k, Section(v) if isinstance(v, dict) else v)
                         for k, v in mapping.items())

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None


_config = None


def config(args=None):
    """Return the configuration, loading it on first call.

    Parameters
    ----------
    args: list of str, optional
        Command line style arguments. `--config=path.yaml` selects another
        file, `--log.level=DEBUG` overwrites a single value. Nothing is read
        from `sys.argv`: scripts pass `sys.argv[1:]` themselves.
    """
    global _config
    if _config is None:
        args = list(args or [])
        path = DEFAULT_CONFIG_PATH
        for arg in args:
            if arg.startswith('--config='):
                path = arg[len('--config='):]
        logger.info('Reading config from %s', path)
        with open(path) as f:
            _config = Section(yaml.safe_load(f) or {})
        apply_overrides(_config, args)
    return _config


def reset_config():
    global _config
    _config = None


def _convert(old, raw):
    if isinstance(old, bool):
        return raw.lower() in ('true', '1', 'yes')
    if isinstance(old, int):
        return int(raw)
    if isinstance(old, float):
        return float(raw)
    return raw


def apply_overrides(cfg, args):
    """Overwrite values of `cfg` from `--section.key=value` arguments.

    Arguments naming keys absent from `cfg` belong to someone else (pytest,
    the host script) and are skipped. Values are cast to the type of the
    value they replace.
    """
    for arg in args:
        if not arg.startswith('--') or '=' not in arg:
            continue
        path, raw = arg[2:].split('=', 1)
        if path == 'config':
            continue
        *parents, key = path.split('.')
        section = cfg
        for step in parents:
            section = section.get(step) if isinstance(section, dict) else None
        if not isinstance(section, dict) or key not in section:
            logger.debug('Ignoring unknown option --%s', path)
            continue
        if isinstance(section[key], dict):
            raise WrongArgumentsError('--{} names a section, not a value'.format(path))
        try:
            section[key] = _convert(section[key], raw)
        except ValueError:
            raise WrongArgumentsError('Bad value for --{}: {!r}'.format(path, raw)) from None


def dump_config(cfg=None, prefix=()):
    """Log every leaf of the configuration at DEBUG level."""
    if cfg is None:
        cfg = config()
    for k, v in cfg.items():
        if isinstance(v, dict):
            dump_config(v, prefix + (k,))
        else:
            logger.debug('%s=%s', '.'.join(prefix + (k,)), v)
