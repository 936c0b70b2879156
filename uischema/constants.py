"""
Shared module to hold constant values for the library
"""

# Condition operators understood by the UI renderer. The empty string is
# interpreted as equality.
CONDITION_OP_EQUAL = "=="
CONDITION_OP_NOT_EQUAL = "!="
CONDITION_OP_IN = "in"
CONDITION_OPS = ["", CONDITION_OP_EQUAL, CONDITION_OP_NOT_EQUAL, CONDITION_OP_IN]

# Actions a condition may trigger. The empty string leaves the default
# (enable) in place.
CONDITION_ACTION_ENABLE = "enable"
CONDITION_ACTION_DISABLE = "disable"
CONDITION_ACTIONS = ["", CONDITION_ACTION_ENABLE, CONDITION_ACTION_DISABLE]

# JSON-Schema type names
SCHEMA_TYPE_OBJECT = "object"
SCHEMA_TYPE_ARRAY = "array"
SCHEMA_TYPE_STRING = "string"
SCHEMA_TYPE_NUMBER = "number"
SCHEMA_TYPE_INTEGER = "integer"
SCHEMA_TYPE_BOOLEAN = "boolean"
NUMERIC_SCHEMA_TYPES = [SCHEMA_TYPE_NUMBER, SCHEMA_TYPE_INTEGER]
