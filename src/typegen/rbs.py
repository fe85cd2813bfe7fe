"""Objects which render as RBS signature definitions."""

from abc import abstractmethod

from typegen.options import Options
from typegen.plugin import Plugin
from typegen.typed_object import Dialect, DescribeAttr, TypedObject
from typegen.types import Type


class RbsObject(TypedObject):
    """Abstract base for everything that appears in an RBS file."""

    dialect = Dialect.RBS

    @abstractmethod
    def generate_rbs(self, indent_level: int, options: Options) -> list[str]:
        """Generate the RBS lines for this object, comments included.

        Args:
            indent_level: The indentation level to generate the lines at
            options: The formatting options to use

        Returns:
            The RBS lines, formatted as specified
        """


class Constant(RbsObject):
    """A constant declaration, e.g. ``FOO: Integer``."""

    def __init__(self, name: str, type: str | Type, generated_by: Plugin | None = None):
        super().__init__(name, generated_by=generated_by)
        self.type = Type.to_type(type)

    def describe_attrs(self) -> list[DescribeAttr]:
        return ["type"]

    def generate_rbs(self, indent_level: int, options: Options) -> list[str]:
        return self.generate_comments(indent_level, options) + [
            options.indented(indent_level, f"{self.name}: {self.type.generate_rbs()}")
        ]


class TypeAlias(RbsObject):
    """A type alias, e.g. ``type id = Integer | String``."""

    def __init__(self, name: str, type: str | Type, generated_by: Plugin | None = None):
        super().__init__(name, generated_by=generated_by)
        self.type = Type.to_type(type)

    def describe_attrs(self) -> list[DescribeAttr]:
        return ["type"]

    def generate_rbs(self, indent_level: int, options: Options) -> list[str]:
        return self.generate_comments(indent_level, options) + [
            options.indented(indent_level, f"type {self.name} = {self.type.generate_rbs()}")
        ]
