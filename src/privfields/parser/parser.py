"""Parser assembly: combines all parsing mixins into the final Parser class."""

from .core import ParserBase, ParseError
from .statements import StatementsMixin
from .control_flow import ControlFlowMixin
from .expressions import ExpressionsMixin
from .postfix import PostfixMixin
from .primary import PrimaryMixin
from .functions import FunctionsMixin
from .classes import ClassesMixin


class Parser(
    ClassesMixin,
    FunctionsMixin,
    PrimaryMixin,
    PostfixMixin,
    ExpressionsMixin,
    ControlFlowMixin,
    StatementsMixin,
    ParserBase,
):
    """Recursive descent parser for the base JavaScript grammar."""
    pass


__all__ = ["Parser", "ParseError"]
