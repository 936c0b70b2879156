"""
The parameter sorter imposes the display order on every sibling list of a
parameter tree and numbers the siblings accordingly.

Order within one sibling list:

1. Required parameters before optional ones
2. Fewer sub-parameters before more
3. Ascending label (code point order)

Sort numbers are continuous across the required/optional split so that
comparing the numbers alone reproduces the order.
"""

# Standard
from typing import List, Tuple

# First Party
import alog

# Local
from . import config
from .parameter import UIParameter

log = alog.use_channel("SORTR")

## Public ######################################################################


def sort_parameters(params: List[UIParameter]) -> List[UIParameter]:
    """Sort a sibling list in place and recurse into every nested list

    Args:
        params:  List[UIParameter]
            The siblings to order

    Returns:
        params:  List[UIParameter]
            The same list object, reordered and renumbered
    """
    if not params:
        return params

    base = _sort_base(params)
    params.sort(key=_sort_key)
    for offset, param in enumerate(params):
        param.sort = base + offset
        log.debug4("Sorted [%s] -> %d", param.json_key, param.sort)
        if param.sub_parameters:
            sort_parameters(param.sub_parameters)
        if param.additional_parameter and param.additional_parameter.sub_parameters:
            sort_parameters(param.additional_parameter.sub_parameters)
    return params


## Implementation ##############################################################


def _sort_key(param: UIParameter) -> Tuple[bool, int, str]:
    return (not param.required, param.sub_parameter_count, param.label or "")


def _sort_base(params: List[UIParameter]) -> int:
    """The first sort number for a list is the smallest one already present,
    falling back to the configured default
    """
    present = [param.sort for param in params if param.sort is not None]
    if not present:
        return config.default_sort
    return min(present)
