"""
Result models.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TransformResult:
    """
    Outcome of transforming one file.

    Attributes:
        file_path: File the code came from
        code: Rewritten code when touched, otherwise the original code
        touched: True if any import/export/reference was rewritten
    """

    file_path: str
    code: str
    touched: bool
