"""
Authoring checks for override documents. These run when an operator submits
a document, not when a tree is rendered.
"""

# Standard
from typing import List

# First Party
import alog

# Local
from . import constants
from .exceptions import assert_override
from .parameter import UIParameter

log = alog.use_channel("VALID")


def validate_overrides(overrides: List[UIParameter]):
    """Check every entry of an override document, recursively

    Args:
        overrides:  List[UIParameter]
            The parsed override document

    Raises:
        OverrideValidationError:  If any entry or condition is malformed
    """
    for override in overrides:
        assert_override(bool(override.json_key), "The json key can not be empty")
        for condition in override.conditions or []:
            log.debug4("Checking condition on [%s]", override.json_key)
            assert_override(
                bool(condition.json_key),
                f"The json key of the condition on [{override.json_key}] can not be"
                " empty",
            )
            assert_override(
                (condition.op or "") in constants.CONDITION_OPS,
                f"The op of the condition on [{override.json_key}] must be one of"
                f" {constants.CONDITION_OPS[1:]}, got [{condition.op}]",
            )
            assert_override(
                (condition.action or "") in constants.CONDITION_ACTIONS,
                f"The action of the condition on [{override.json_key}] must be one"
                f" of {constants.CONDITION_ACTIONS[1:]} or empty, got"
                f" [{condition.action}]",
            )
        if override.sub_parameters:
            validate_overrides(override.sub_parameters)
        if override.additional_parameter:
            validate_overrides([override.additional_parameter])
