"""Type expressions used as values inside typed objects."""

from abc import ABC, abstractmethod


class Type(ABC):
    """Base class for a type expression which can render in either dialect."""

    @staticmethod
    def to_type(type_like: "str | Type") -> "Type":
        """Wrap a plain string in Raw, passing Type instances through."""
        if isinstance(type_like, str):
            return Raw(type_like)
        return type_like

    @abstractmethod
    def describe(self) -> str:
        """Short description used inside TypedObject.describe."""

    @abstractmethod
    def generate_rbi(self) -> str:
        pass

    @abstractmethod
    def generate_rbs(self) -> str:
        pass

    def __eq__(self, other):
        if not isinstance(other, Type):
            return NotImplemented
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self):
        return hash((type(self).__name__, self.describe()))

    def __repr__(self):
        return f"<{type(self).__name__} {self.describe()}>"


class Raw(Type):
    """A type given verbatim as a string, identical in both dialects."""

    def __init__(self, type_str: str):
        self.type_str = type_str

    def describe(self) -> str:
        return self.type_str

    def generate_rbi(self) -> str:
        return self.type_str

    def generate_rbs(self) -> str:
        return self.type_str


class Nilable(Type):
    """A type which may also be nil."""

    def __init__(self, type_like: str | Type):
        self.type = Type.to_type(type_like)

    def describe(self) -> str:
        return f"Nilable<{self.type.describe()}>"

    def generate_rbi(self) -> str:
        return f"T.nilable({self.type.generate_rbi()})"

    def generate_rbs(self) -> str:
        return f"{self.type.generate_rbs()}?"


class Union(Type):
    """Any one of several types."""

    def __init__(self, types: list[str | Type]):
        self.types = [Type.to_type(t) for t in types]

    def describe(self) -> str:
        return f"Union<{', '.join(t.describe() for t in self.types)}>"

    def generate_rbi(self) -> str:
        return f"T.any({', '.join(t.generate_rbi() for t in self.types)})"

    def generate_rbs(self) -> str:
        return f"({' | '.join(t.generate_rbs() for t in self.types)})"


class Array(Type):
    """An array whose elements share one type."""

    def __init__(self, element: str | Type):
        self.element = Type.to_type(element)

    def describe(self) -> str:
        return f"Array<{self.element.describe()}>"

    def generate_rbi(self) -> str:
        return f"T::Array[{self.element.generate_rbi()}]"

    def generate_rbs(self) -> str:
        return f"::Array[{self.element.generate_rbs()}]"


class Hash(Type):
    """A hash with typed keys and values."""

    def __init__(self, key: str | Type, value: str | Type):
        self.key = Type.to_type(key)
        self.value = Type.to_type(value)

    def describe(self) -> str:
        return f"Hash<{self.key.describe()}, {self.value.describe()}>"

    def generate_rbi(self) -> str:
        return f"T::Hash[{self.key.generate_rbi()}, {self.value.generate_rbi()}]"

    def generate_rbs(self) -> str:
        return f"::Hash[{self.key.generate_rbs()}, {self.value.generate_rbs()}]"
