"""
Central strategy registry and registration decorator for Left-Right-Center across strategies.
Use @register_strategy("name") above your strategy class to make it available to GameConfig and the scripts.
All strategy modules must be imported here to ensure registration occurs.
"""

STRATEGY_MAP = {}

def register_strategy(name):
    """
    Decorator to register a strategy class under a given name.
    Usage:
        @register_strategy("left")
        class PreferLeft(AcrossStrategy): ...
    """
    def decorator(cls):
        cls.name = name
        STRATEGY_MAP[name] = cls
        return cls
    return decorator

# Automatically import all strategy modules in this directory to ensure registration decorators run
import importlib
import os
import pkgutil

_this_dir = os.path.dirname(__file__)
_pkg_name = __name__
for _, modname, ispkg in pkgutil.iter_modules([_this_dir]):
    if not ispkg and modname not in ("__init__", "base"):
        importlib.import_module(f"{_pkg_name}.{modname}")
