import math
from typing import Dict, Iterable, Union

from simulation.config import Config

from .errors import InvalidValueError, OverrideSyntaxError, UnknownParameterError

Number = Union[int, float]

# short and long operator names for the fields everyone tweaks
ALIASES: Dict[str, str] = {
    "a": "world_animals",
    "animals": "world_animals",
    "f": "world_foods",
    "foods": "world_foods",
    "n": "brain_neurons",
    "neurons": "brain_neurons",
    "p": "eye_cells",
    "photoreceptors": "eye_cells",
}


def parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise InvalidValueError(f"invalid integer for {name}: {raw!r}") from None


def parse_float(name: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise InvalidValueError(f"invalid number for {name}: {raw!r}") from None
    if not math.isfinite(value):
        raise InvalidValueError(f"invalid number for {name}: {raw!r}")
    return value


def collect_overrides(tokens: Iterable[str]) -> Dict[str, Number]:
    """Turn ``name=value`` tokens into field -> value, later tokens winning."""
    values: Dict[str, Number] = {}

    for token in tokens:
        arg_name, sep, arg_value = token.partition("=")
        if not sep:
            raise OverrideSyntaxError(f"expected name=value, got: {token}")

        if arg_name.startswith("i:"):
            field = arg_name[2:]
            value = parse_int(field, arg_value)
        elif arg_name.startswith("f:"):
            field = arg_name[2:]
            value = parse_float(field, arg_value)
        elif arg_name in ALIASES:
            field = ALIASES[arg_name]
            value = parse_int(arg_name, arg_value)
        else:
            raise UnknownParameterError(f"unknown parameter: {arg_name}")

        values.pop(field, None)
        values[field] = value

    return values


def parse_overrides(defaults: Config, tokens: Iterable[str]) -> Config:
    # generic names are only checked by the engine, in Config.with_overrides
    return defaults.with_overrides(collect_overrides(tokens))
