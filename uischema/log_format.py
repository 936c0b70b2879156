"""
Custom logging formats that carry the identity of the definition being
rendered
"""

# First Party
from alog import AlogJsonFormatter


class UISchemaJsonFormatter(AlogJsonFormatter):
    """Custom Log Format that extends AlogJsonFormatter to add the definition
    name and type and the id of the render call. Callers attach these with the
    `extra` argument of a log call, or bind them for a whole render by passing
    them to the constructor.
    """

    _FIELDS_TO_PRINT = AlogJsonFormatter._FIELDS_TO_PRINT + [
        "definitionName",
        "definitionType",
        "renderId",
    ]

    def __init__(self, definition_name=None, definition_type=None, render_id=None):
        super().__init__()
        self.definition_name = definition_name
        self.definition_type = definition_type
        self.render_id = render_id

    def format(self, record):
        for attr, bound in [
            ("definitionName", self.definition_name),
            ("definitionType", self.definition_type),
            ("renderId", self.render_id),
        ]:
            if bound is not None and getattr(record, attr, None) is None:
                setattr(record, attr, bound)
        return super().format(record)
