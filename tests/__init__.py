import asyncio
import decorator
from everett.manager import ConfigManager, ConfigDictEnv

__all__ = ["timeout", "config_from_dict"]


def timeout(time):
    def deco(coro):
        async def wrapper_function(fn, *args, **kwargs):
            return await asyncio.wait_for(fn(*args, **kwargs), time)
        # Needed for fixtures to work
        return decorator.decorator(wrapper_function, coro)
    return deco


def config_from_dict(d):
    def flatten_dict(d, prefix=""):
        newd = {}
        for key, val in d.items():
            if isinstance(val, dict):
                flatval = flatten_dict(val, f"{prefix}{key}_")
                newd.update(flatval)
            else:
                newd[f"{prefix}{key}"] = val
        return newd

    flatd = flatten_dict(d)
    return ConfigManager([ConfigDictEnv(flatd)])
