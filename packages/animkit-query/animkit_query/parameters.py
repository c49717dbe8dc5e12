"""Parameter lookup keyed on (name hash, type), and parameter factories."""
from __future__ import annotations

from animkit import Controller, Parameter, ParameterType, string_to_hash


def get_parameter_of_type(
    controller: Controller, name: str, type: ParameterType
) -> Parameter | None:
    """First parameter with matching name hash AND type, or None.

    A parameter sharing the name but not the type does not match.
    """
    name_hash = string_to_hash(name)
    for parameter in controller.parameters:
        if parameter.name_hash == name_hash and parameter.type == type:
            return parameter
    return None


def has_parameter_of_type(
    controller: Controller, name: str, type: ParameterType
) -> bool:
    return get_parameter_of_type(controller, name, type) is not None


def has_parameter(controller: Controller, parameter: Parameter) -> bool:
    """Check for a parameter with the same name and type as *parameter*."""
    return has_parameter_of_type(controller, parameter.name, parameter.type)


def float_parameter(name: str, default: float = 0.0) -> Parameter:
    return Parameter(name=name, type=ParameterType.FLOAT, default_float=default)


def int_parameter(name: str, default: int = 0) -> Parameter:
    return Parameter(name=name, type=ParameterType.INT, default_int=default)


def bool_parameter(name: str, default: bool = False) -> Parameter:
    return Parameter(name=name, type=ParameterType.BOOL, default_bool=default)


def trigger_parameter(name: str) -> Parameter:
    return Parameter(name=name, type=ParameterType.TRIGGER)
