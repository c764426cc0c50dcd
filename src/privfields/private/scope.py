"""Private name resolution across nested class bodies.

Every class body gets a frame holding the private names it declares and the
names it used before (or without) a matching declaration. Lookups fall back
to the enclosing frames, so an inner class can reach its outer class's
private members. When a class body ends, names it could not resolve move to
the enclosing frame; at the outermost class they are reported.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field

from .errors import DuplicatePrivateElementError, UndeclaredPrivateNameError

Position = tuple[int, int]


@dataclass
class ClassScopeFrame:
    # name -> "field" | "method" | "get" | "set" | "both"
    bound: dict[str, str] = field(default_factory=dict)
    # name -> earliest unresolved use
    unresolved: dict[str, Position] = field(default_factory=dict)


def _undeclared(name: str, position: Position) -> UndeclaredPrivateNameError:
    line, col = position
    return UndeclaredPrivateNameError(f"Usage of undeclared private name #{name}", line, col)


class PrivateNameScope:
    def __init__(self):
        self.frames: list[ClassScopeFrame] = []

    @property
    def depth(self) -> int:
        return len(self.frames)

    def enter_class(self):
        self.frames.append(ClassScopeFrame())

    def is_bound(self, name: str) -> bool:
        return any(name in frame.bound for frame in self.frames)

    def declare(self, name: str, kind: str, line: int, col: int):
        frame = self.frames[-1]
        existing = frame.bound.get(name)
        if existing is not None:
            if {existing, kind} != {"get", "set"}:
                raise DuplicatePrivateElementError(
                    f"Duplicate private element #{name}", line, col)
            kind = "both"
        frame.bound[name] = kind
        frame.unresolved.pop(name, None)

    def use(self, name: str, line: int, col: int):
        if not self.frames:
            raise _undeclared(name, (line, col))
        if self.is_bound(name):
            return
        _record(self.frames[-1].unresolved, name, (line, col))

    def exit_class(self):
        frame = self.frames.pop()
        if self.frames:
            outer = self.frames[-1].unresolved
            for name, position in frame.unresolved.items():
                _record(outer, name, position)
        elif frame.unresolved:
            name, position = min(frame.unresolved.items(), key=lambda item: item[1])
            raise _undeclared(name, position)

    @contextmanager
    def class_body(self):
        """Scope one class body; the frame is dropped unresolved if parsing fails."""
        self.enter_class()
        try:
            yield
        except Exception:
            self.frames.pop()
            raise
        self.exit_class()


def _record(unresolved: dict[str, Position], name: str, position: Position):
    if name not in unresolved or position < unresolved[name]:
        unresolved[name] = position
