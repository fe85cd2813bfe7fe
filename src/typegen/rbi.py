"""Objects which render as Sorbet RBI definitions."""

from abc import abstractmethod
from dataclasses import dataclass

from typegen.options import Options
from typegen.plugin import Plugin
from typegen.typed_object import Dialect, DescribeAttr, TypedObject
from typegen.types import Type


class RbiObject(TypedObject):
    """Abstract base for everything that appears in an RBI file."""

    dialect = Dialect.RBI

    @abstractmethod
    def generate_rbi(self, indent_level: int, options: Options) -> list[str]:
        """Generate the RBI lines for this object, comments included.

        Args:
            indent_level: The indentation level to generate the lines at
            options: The formatting options to use

        Returns:
            The RBI lines, formatted as specified
        """


class Constant(RbiObject):
    """A constant assignment, e.g. ``FOO = T.let(3, Integer)``."""

    def __init__(
        self,
        name: str,
        value: str | Type,
        eigen_constant: bool = False,
        generated_by: Plugin | None = None,
    ):
        super().__init__(name, generated_by=generated_by)
        self.value = value
        self.eigen_constant = eigen_constant

    def describe_attrs(self) -> list[DescribeAttr]:
        return ["value", "eigen_constant"]

    def generate_rbi(self, indent_level: int, options: Options) -> list[str]:
        value = self.value.generate_rbi() if isinstance(self.value, Type) else self.value
        return self.generate_comments(indent_level, options) + [
            options.indented(indent_level, f"{self.name} = {value}")
        ]


@dataclass
class Parameter:
    """A method parameter.

    Keyword parameters end with a colon (``name:``), splats start with ``*``
    and block parameters with ``&``.
    """
    name: str
    type: str | Type = "T.untyped"
    default: str | None = None

    @property
    def bare_name(self) -> str:
        return self.name.lstrip("*&").rstrip(":")

    def to_def_param(self) -> str:
        if self.default is None:
            return self.name
        if self.name.endswith(":"):
            return f"{self.name} {self.default}"
        return f"{self.name} = {self.default}"

    def to_sig_param(self) -> str:
        return f"{self.bare_name}: {Type.to_type(self.type).generate_rbi()}"


class Method(RbiObject):
    """A method definition together with its ``sig``."""

    def __init__(
        self,
        name: str,
        parameters: list[Parameter] | None = None,
        return_type: str | Type | None = None,
        abstract: bool = False,
        override: bool = False,
        class_method: bool = False,
        type_parameters: list[str] | None = None,
        generated_by: Plugin | None = None,
    ):
        super().__init__(name, generated_by=generated_by)
        self.parameters = parameters or []
        self.return_type = Type.to_type(return_type) if return_type is not None else None
        self.abstract = abstract
        self.override = override
        self.class_method = class_method
        self.type_parameters = type_parameters or []

    def describe_attrs(self) -> list[DescribeAttr]:
        return_type = self.return_type.describe() if self.return_type else "(void)"
        return [
            "parameters",
            {"return_type": return_type},
            "abstract",
            "override",
            "class_method",
            "type_parameters",
        ]

    def generate_rbi(self, indent_level: int, options: Options) -> list[str]:
        lines = self.generate_comments(indent_level, options)
        lines.extend(self._generate_sig(indent_level, options))

        prefix = "self." if self.class_method else ""
        if self.parameters:
            def_params = ", ".join(p.to_def_param() for p in self.parameters)
            lines.append(options.indented(
                indent_level, f"def {prefix}{self.name}({def_params}); end"
            ))
        else:
            lines.append(options.indented(indent_level, f"def {prefix}{self.name}; end"))
        return lines

    def _generate_sig(self, indent_level: int, options: Options) -> list[str]:
        """Build the sig line, splitting parameters once there are enough of them."""
        qualifiers = ""
        if self.abstract:
            qualifiers += "abstract."
        if self.override:
            qualifiers += "override."
        if self.type_parameters:
            type_params = ", ".join(f":{t}" for t in self.type_parameters)
            qualifiers += f"type_parameters({type_params})."

        returns = f"returns({self.return_type.generate_rbi()})" if self.return_type else "void"

        if not self.parameters:
            return [options.indented(indent_level, f"sig {{ {qualifiers}{returns} }}")]

        sig_params = [p.to_sig_param() for p in self.parameters]
        if len(sig_params) < options.break_params:
            params = ", ".join(sig_params)
            return [options.indented(
                indent_level, f"sig {{ {qualifiers}params({params}).{returns} }}"
            )]

        lines = [
            options.indented(indent_level, "sig do"),
            options.indented(indent_level + 1, f"{qualifiers}params("),
        ]
        for i, param in enumerate(sig_params):
            separator = "," if i < len(sig_params) - 1 else ""
            lines.append(options.indented(indent_level + 2, f"{param}{separator}"))
        lines.append(options.indented(indent_level + 1, f").{returns}"))
        lines.append(options.indented(indent_level, "end"))
        return lines
