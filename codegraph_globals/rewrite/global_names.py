"""
Global access expressions
"""

DEFAULT_BINDING = "default"
LOCAL_ALIAS_PREFIX = "_local_"
TEMP_NAME_PREFIX = "_global_"


def make_global_name(prop: str, name: str) -> str:
    """
    Access expression for an imported property of a global object.

    >>> make_global_name("default", "React")
    'React'
    >>> make_global_name("useState", "React")
    'React.useState'
    """
    if prop == DEFAULT_BINDING:
        return name
    return f"{name}.{prop}"
