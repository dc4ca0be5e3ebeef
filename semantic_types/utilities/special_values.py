UNKNOWN_TYPE_ID = ""
"""
Returned by the registry when a label or type id cannot be resolved:
    - find_type_id() for unknown labels
    - find_type_label() for unknown ids *and* for hidden ids without a label

Callers cannot tell those cases apart from this value alone.
"""

INTERNAL_PREFIX = "_"
"""
All built-in type ids start with this prefix. Ids with a single prefix are offered to users and should
have a label in the language files.
"""

HIDDEN_PREFIX = "__"
"""
Ids starting with a double prefix are system types. They have no user label and are never offered
when choosing the type of a property.
"""

TYPE_URI_BASE = "http://semantic-mediawiki.org/swivt/1.0#"
""" Namespace of the type page URIs stored by __typ values. """


def is_hidden_type_id(type_id: str) -> bool:
    return type_id.startswith(HIDDEN_PREFIX)
