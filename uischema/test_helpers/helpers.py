"""
This module holds common helper functions for making testing easy
"""

# Standard
from contextlib import contextmanager
from typing import List, Optional
import json
import os

# Third Party
import yaml

# First Party
import alog

# Local
from uischema.config import library_config as config_detail_dict
from uischema.parameter import UIParameter, Validate

log = alog.use_channel("TEST")


def configure_logging():
    alog.configure(
        os.environ.get("LOG_LEVEL", "off"),
        os.environ.get("LOG_FILTERS", ""),
        formatter="json"
        if os.environ.get("LOG_JSON", "").lower() == "true"
        else "pretty",
        thread_id=os.environ.get("LOG_THREAD_ID", "").lower() == "true",
    )


configure_logging()

TEST_DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


def load_test_data(file_name: str):
    """Load a JSON or YAML file from the test data directory"""
    with open(os.path.join(TEST_DATA_DIR, file_name), encoding="utf-8") as handle:
        if file_name.endswith(".json"):
            return json.load(handle)
        return yaml.safe_load(handle)


def read_test_data(file_name: str) -> str:
    """Read the raw text of a file from the test data directory"""
    with open(os.path.join(TEST_DATA_DIR, file_name), encoding="utf-8") as handle:
        return handle.read()


def make_param(
    label: str,
    required: Optional[bool] = False,
    sub_labels: Optional[List[str]] = None,
    sort: Optional[int] = None,
    json_key: Optional[str] = None,
    **kwargs,
) -> UIParameter:
    """Build a parameter with a given number of (leaf) sub-parameters"""
    sub_parameters = None
    if sub_labels is not None:
        sub_parameters = [
            UIParameter(json_key=f"{json_key or label}.{sub}", label=sub)
            for sub in sub_labels
        ]
    return UIParameter(
        json_key=json_key or label,
        label=label,
        validate=Validate(required=required) if required is not None else None,
        sub_parameters=sub_parameters,
        sort=sort,
        **kwargs,
    )


def keys(params: List[UIParameter]) -> List[str]:
    return [param.json_key for param in params]


def all_keys(params: List[UIParameter]) -> List[str]:
    """Every json key in the tree, depth first"""
    out = []
    for param in params:
        out.append(param.json_key)
        out.extend(all_keys(param.sub_parameters or []))
    return out


@contextmanager
def library_config(**config_overrides):
    """This context manager sets library config values temporarily and reverts
    them on completion
    """
    previous = {key: config_detail_dict.get(key) for key in config_overrides}
    try:
        for key, val in config_overrides.items():
            config_detail_dict[key] = val
        yield
    finally:
        for key, val in previous.items():
            config_detail_dict[key] = val
