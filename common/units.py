"""
Unit Registry for Distances and Angles.

Distances produced by this package are plain floats in meters. This module
lets callers get them as `pint` quantities instead so that conversions to
kilometers or nautical miles are explicit.

Example Usage
-------------
>>> from common.units import Q_
>>> Q_(111321.38, 'm').to('km')
<Quantity(111.32138, 'kilometer')>
"""

from functools import wraps
from typing import Callable
import inspect

import pint
from pint import UnitRegistry as PintUnitRegistry

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity


def validate_units(expected_units: dict):
    """Decorator to validate units of function arguments and return values.

    Only arguments that are already ``pint.Quantity`` objects are checked;
    bare floats pass through untouched.

    Parameters
    ----------
    expected_units : dict[str, str]
        Mapping from argument names to expected unit strings.
        Use 'return' key for return value validation.

    Examples
    --------
    >>> @validate_units({'distance': 'm', 'return': 'km'})
    ... def to_km(distance):
    ...     return distance.to('km')
    """
    def decorator(func: Callable) -> Callable:
        sig = inspect.signature(func)

        @wraps(func)
        def wrapper(*args, **kwargs):
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            for param_name, expected_unit in expected_units.items():
                if param_name == 'return':
                    continue

                value = bound.arguments.get(param_name)
                if isinstance(value, pint.Quantity):
                    try:
                        value.to(expected_unit)
                    except pint.DimensionalityError as e:
                        raise ValueError(
                            f"Parameter '{param_name}' has incompatible units. "
                            f"Expected {expected_unit}, got {value.units}"
                        ) from e

            result = func(*args, **kwargs)

            if 'return' in expected_units and isinstance(result, pint.Quantity):
                try:
                    result.to(expected_units['return'])
                except pint.DimensionalityError as e:
                    raise ValueError(
                        f"Return value has incompatible units. "
                        f"Expected {expected_units['return']}, got {result.units}"
                    ) from e

            return result
        return wrapper
    return decorator


# Unit attached to quantities returned by the package
STANDARD_UNITS = {
    "distance": "meter",
}
