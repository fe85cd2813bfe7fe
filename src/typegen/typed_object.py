"""Common base for every object that forms part of a generated type definition."""

import enum
import json
import logging
import weakref
from abc import ABC, abstractmethod
from collections.abc import Callable, Collection
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, Union, runtime_checkable

from typegen.errors import DescribeAttrError, UnknownTypeSystemError

if TYPE_CHECKING:
    from typegen.options import Options
    from typegen.plugin import Plugin

logger = logging.getLogger(__name__)


class Dialect(enum.Enum):
    """Output formats a typed object can be rendered in."""
    RBI = "RBI"
    RBS = "RBS"


@runtime_checkable
class Describable(Protocol):
    """Anything that renders its own short descriptor."""

    def describe(self) -> str: ...


@dataclass(frozen=True)
class Field:
    """Selects a live attribute of the described object.

    Attributes:
        key: Label shown in the descriptor.
        getter: Reads the value from the object. When None, the attribute
            named by ``key`` is read instead.
    """
    key: str
    getter: Callable[[Any], Any] | None = None

    def resolve(self, obj: Any) -> Any:
        if self.getter is None:
            return getattr(obj, self.key)
        return self.getter(obj)


@dataclass(frozen=True)
class Literal:
    """A fixed key/value pair shown verbatim in the descriptor."""
    key: str
    value: str


DescribeAttr = Union[str, Field, Literal, dict[str, str]]


class TypedObject(ABC):
    """A generic superclass of all objects which form part of type definitions
    in specific formats, such as RbiObject and RbsObject.

    Concrete kinds set ``dialect`` through their dialect base and list the
    attributes worth describing in ``describe_attrs``.
    """

    dialect: ClassVar[Dialect | None] = None

    def __init__(self, name: str, generated_by: "Plugin | None" = None):
        """Create a new typed object.

        Args:
            name: The name of this object
            generated_by: The plugin in control of generation when this object
                was created, if any
        """
        self._name = name
        self._comments: list[str] = []
        self._generated_by = weakref.ref(generated_by) if generated_by is not None else None

    @property
    def name(self) -> str:
        """The name of this object."""
        return self._name

    @property
    def comments(self) -> list[str]:
        """Comments placed above the object's definition, one line each.

        Returns a copy; use add_comment to change them.
        """
        return list(self._comments)

    @property
    def generated_by(self) -> "Plugin | None":
        """The plugin which created this object, or None.

        Only a weak reference is held, so this returns None once the plugin
        itself has been discarded.
        """
        if self._generated_by is None:
            return None
        return self._generated_by()

    def add_comment(self, comment: str | list[str] | tuple[str, ...]) -> None:
        """Add one or more comments to this object.

        Comments always go above the definition for this object, not in the
        definition's body.

        Args:
            comment: A single comment line, or a list of lines appended in order

        Notes:
            Any other value is ignored and logged as a warning.
        """
        if isinstance(comment, str):
            self._comments.append(comment)
        elif isinstance(comment, (list, tuple)):
            self._comments.extend(comment)
        else:
            logger.warning(
                f"Ignoring comment of type {type(comment).__name__} on {self._name!r}"
            )

    add_comments = add_comment

    def generate_comments(self, indent_level: int, options: "Options") -> list[str]:
        """Generate the lines for this object's comments.

        Args:
            indent_level: The indentation level to generate the lines at
            options: The formatting options to use

        Returns:
            One formatted line per comment, or an empty list if there are none
        """
        return [options.indented(indent_level, f"# {c}") for c in self._comments]

    def describe(self) -> str:
        """Return a brief human-readable description of this object.

        This is shown in diagnostics and when conflicting definitions are
        presented for manual resolution, e.g. ``RBI:Method:foo parameters=2``.

        Raises:
            UnknownTypeSystemError: If the class has no known dialect
            DescribeAttrError: If describe_attrs returns a malformed selector
        """
        if not isinstance(self.dialect, Dialect):
            raise UnknownTypeSystemError("unknown type system")
        type_system = self.dialect.value

        attr_strings = []
        for attr in self.describe_attrs():
            rendered = self._render_attr(attr)
            if rendered is not None:
                attr_strings.append(rendered)

        class_name = type(self).__name__
        if not attr_strings:
            return f"{type_system}:{class_name}:{self._name}"
        return f"{type_system}:{class_name}:{self._name} {' '.join(attr_strings)}"

    def _render_attr(self, attr: DescribeAttr) -> str | None:
        """Render one selector as ``key=value``, ``key``, or None to omit it."""
        if isinstance(attr, dict):
            if len(attr) != 1:
                raise DescribeAttrError("describe_attrs dict must have one key")
            ((key, value),) = attr.items()
            return f"{key}={value}"
        if isinstance(attr, Literal):
            return f"{attr.key}={attr.value}"

        if isinstance(attr, str):
            attr = Field(attr)
        elif not isinstance(attr, Field):
            raise DescribeAttrError(
                f"Unsupported describe_attrs selector: {attr!r}"
            )

        key = attr.key
        value = attr.resolve(self)

        if isinstance(value, str):
            value = _inspect_string(value)
        elif isinstance(value, Collection) and not isinstance(value, bytes):
            value = len(value)
            if value == 0:
                return None
        elif isinstance(value, Describable) and not isinstance(value, type):
            value = value.describe()
        elif value is True:
            return key
        elif value is False:
            return None

        return f"{key}={value}"

    @abstractmethod
    def describe_attrs(self) -> list[DescribeAttr]:
        """The attributes of this object to include in ``describe``.

        Each element is one of:
            - a str or Field: the attribute is read from this object and
              converted to a string according to its type
            - a Literal or a single-entry dict of str to str: the key and value
              are shown as given

        Returns:
            The selectors in display order, possibly empty
        """


def _inspect_string(value: str) -> str:
    """Quote a string the way it would appear as a source literal."""
    return json.dumps(value, ensure_ascii=False)
