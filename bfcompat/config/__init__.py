"""YAML configuration

A configuration file holds one or more YAML documents; each document is a
section that inherits the settings of the sections before it.
"""
import yaml

from . import root
from .config import merge_dicts

# open() below hides the builtin
open_file = open


def open(file_name=None):
    """
    Reads configuration settings from a yaml file.

    Returns a list of configuration objects, one for each document section in
    the file; with no file name, a single empty configuration.
    """
    if file_name is None:
        return [root.RootConfig({})]

    with open_file(file_name) as f:
        docs = list(yaml.safe_load_all(f))

    res = []
    cfg = {}
    for doc in docs or [{}]:
        cfg = merge_dicts(cfg, doc or {})
        res.append(root.RootConfig(cfg))

    return res


def save(config_list, file_name):
    """Write configurations as one YAML document each"""
    with open_file(file_name, 'w') as f:
        yaml.safe_dump_all([cfg._cfg for cfg in config_list], f)
