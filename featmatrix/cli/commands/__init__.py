"""
Click command implementations for featmatrix CLI.

Commands are registered with the main CLI group via the
register_commands() function in featmatrix.cli.
"""

from ...core.models.invocation import SubcommandKind
from .matrix import make_matrix_command

MATRIX_COMMANDS = [make_matrix_command(kind) for kind in SubcommandKind]

__all__ = ["MATRIX_COMMANDS", "make_matrix_command"]
