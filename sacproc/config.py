"""
Configuration for SACPROC processing chains.

Options may be read from a YAML file, whose path can also be given in the
``SACPROC_CONFIG`` environment variable. Keys are normalised by replacing
hyphens with underscores so ``taper-width`` and ``taper_width`` are
equivalent.
"""

import os
import logging

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'SACPROC_CONFIG'

DEFAULTS = {
    'rmean': True,
    'rtrend': True,
    'taper': True,
    'taper_width': 0.05,
    'taper_form': 'hanning',
}


def normalize_keys(cfg):
    """Return a copy of ``cfg`` with hyphens in keys replaced by underscores."""
    return {str(k).replace('-', '_'): v for k, v in cfg.items()}


def load_config(path=None):
    """
    Load processing options, merged over ``DEFAULTS``.

    Parameters
    ----------
    path : str, optional
        YAML file to read. If None, the file named by the ``SACPROC_CONFIG``
        environment variable is used; if that is unset too, the defaults
        are returned.

    Returns
    -------
    config : dict
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)

    config = dict(DEFAULTS)
    if not path:
        return config

    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as fh:
        cfg = yaml.safe_load(fh) or {}
    cfg = normalize_keys(cfg)

    unknown = sorted(set(cfg) - set(DEFAULTS))
    if unknown:
        logger.warning(f"Unknown config keys in {path}: {unknown}")

    config.update(cfg)
    logger.info(f"Loaded config from {path}")
    return config
