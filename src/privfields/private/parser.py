"""Parser with private class members and static fields layered on the base grammar."""

from ..options import Options
from ..parser import Parser
from ..tokens import Token
from .checks import ContextualChecksMixin
from .class_elements import ClassElementsMixin
from .member_access import MemberAccessMixin
from .scope import PrivateNameScope


class PrivateNameParser(
    ContextualChecksMixin,
    MemberAccessMixin,
    ClassElementsMixin,
    Parser,
):
    def __init__(self, tokens: list[Token], options: Options | None = None):
        super().__init__(tokens, options)
        self.private_scope = PrivateNameScope()
        self.in_static_field_value = False
        self.in_private_method = False
