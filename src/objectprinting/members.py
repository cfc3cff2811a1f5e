"""Member descriptors for composite objects.

Replaces reflective member enumeration with an explicit, cached list of
``MemberInfo`` descriptors per type, in a deterministic order:

1. Annotated fields (dataclass fields and class annotations), base classes first
2. ``__slots__`` entries not already annotated
3. Readable properties, base classes first

Instance attributes the type never declared (assigned in ``__init__``) are
appended per instance, in insertion order. Names starting with ``_`` are
never members.

Also resolves member selectors (names, ``property`` objects, or
``lambda p: p.field`` callables) into member keys, rejecting anything that
is not a single plain attribute access.

Example:
    >>> @dataclass
    ... class Person:
    ...     name: str
    ...     age: int | None = None
    >>> [(m.name, m.declared_type) for m in describe_type(Person)]
    [('name', <class 'str'>), ('age', <class 'int'>)]
    >>> resolve_member(Person, lambda p: p.age)
    ByMember(owner=<class '__main__.Person'>, name='age')

"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import keyword
import types
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, get_args, get_origin, get_type_hints

from objectprinting.errors import MemberSelectorError
from objectprinting.formatters import ByMember
from objectprinting.utils.logger import get_logger

logger = get_logger(__name__)

FIELD = "field"
PROPERTY = "property"
ATTRIBUTE = "attribute"

_MISSING = object()


@dataclass(frozen=True, slots=True)
class MemberInfo:
    """Descriptor of one public, readable member of a type.

    Attributes:
        owner: Type the member was enumerated on
        name: Member name
        declared_type: Declared type, or None when it cannot be determined
        kind: "field", "property", or "attribute" (undeclared instance attribute)

    """

    owner: type
    name: str
    declared_type: type | None = None
    kind: str = FIELD

    @property
    def key(self) -> ByMember:
        """Identity of this member for exclusion and formatter lookup."""
        return ByMember(self.owner, self.name)

    def get_value(self, obj: Any) -> Any:
        """Read the member's current value off ``obj``."""
        return getattr(obj, self.name)


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def as_type(annotation: Any) -> type | None:
    """Reduce an annotation to the plain type used for matching.

    ``X | None`` becomes ``X``, generic aliases become their origin
    (``list[int]`` becomes ``list``), ``Annotated[X, ...]`` becomes ``X``.
    Anything else that is not a class (strings, ``Any``, type variables,
    multi-member unions) yields None.
    """
    if annotation is Any:
        return None
    origin = get_origin(annotation)
    if origin is None:
        return annotation if isinstance(annotation, type) else None
    if origin is typing.Annotated:
        return as_type(get_args(annotation)[0])
    if origin is typing.Union or origin is types.UnionType:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        return as_type(args[0]) if len(args) == 1 else None
    if isinstance(origin, type):
        return origin
    return None


def _annotations(cls: type) -> dict[str, Any]:
    """Merged annotations of ``cls`` and its bases, base classes first."""
    try:
        return get_type_hints(cls)
    except (NameError, TypeError) as exc:
        logger.debug("Unresolvable annotations on %s: %s", cls.__qualname__, exc)

    merged: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        try:
            merged.update(inspect.get_annotations(klass))
        except NameError:
            continue
    return merged


def _return_type(prop: property) -> type | None:
    try:
        hints = get_type_hints(prop.fget)
    except (NameError, TypeError):
        return None
    return as_type(hints.get("return"))


@functools.lru_cache(maxsize=512)
def describe_type(cls: type) -> tuple[MemberInfo, ...]:
    """Static member descriptors declared by ``cls``.

    Cached per type. Field types that cannot be resolved are left as None;
    ``public_members`` fills them from the runtime value.

    Args:
        cls: Type to describe

    Returns:
        Tuple of member descriptors in declaration order
    """
    members: dict[str, MemberInfo] = {}

    for name, annotation in _annotations(cls).items():
        if not _is_public(name) or _is_class_var(annotation):
            continue
        if isinstance(annotation, dataclasses.InitVar):
            continue
        members[name] = MemberInfo(cls, name, as_type(annotation), FIELD)

    for klass in reversed(cls.__mro__):
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if _is_public(name) and name not in members:
                members[name] = MemberInfo(cls, name, None, FIELD)

    for klass in reversed(cls.__mro__):
        for name, attr in vars(klass).items():
            if isinstance(attr, property) and attr.fget is not None and _is_public(name):
                members[name] = MemberInfo(cls, name, _return_type(attr), PROPERTY)

    return tuple(members.values())


def public_members(obj: Any) -> list[MemberInfo]:
    """All public readable members of ``obj``, in rendering order.

    Declared fields the instance does not actually carry (annotation-only,
    unset slots) are skipped. Properties are never read here.
    Fields whose read fails with any other error are kept, so the printer
    can render the failure.

    Args:
        obj: Instance to enumerate

    Returns:
        List of member descriptors
    """
    cls = type(obj)
    members: list[MemberInfo] = []
    seen: set[str] = set()

    for member in describe_type(cls):
        seen.add(member.name)
        if member.kind == FIELD:
            try:
                value = getattr(obj, member.name)
            except AttributeError:
                continue
            except Exception as exc:
                # Kept so the printer renders the failure inline.
                logger.debug("Reading %s.%s failed: %r", cls.__name__, member.name, exc)
                members.append(member)
                continue
            if member.declared_type is None:
                member = dataclasses.replace(member, declared_type=type(value))
        members.append(member)

    instance_dict = getattr(obj, "__dict__", None)
    if isinstance(instance_dict, dict):
        for name, value in instance_dict.items():
            if isinstance(name, str) and _is_public(name) and name not in seen:
                members.append(MemberInfo(cls, name, type(value), ATTRIBUTE))

    return members


class _AccessedMember:
    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name


class _AccessProbe:
    """Stand-in instance that records attribute accesses made by a selector."""

    __slots__ = ("_probe_accesses",)

    def __init__(self) -> None:
        self._probe_accesses: list[str] = []

    def __getattr__(self, name: str) -> _AccessedMember:
        self._probe_accesses.append(name)
        return _AccessedMember(name)


def _probe_selector(owner: type, selector: Callable[[Any], Any]) -> str:
    probe = _AccessProbe()
    try:
        result = selector(probe)
    except Exception as exc:
        msg = f"selector {selector!r} is not a simple member access ({exc})"
        raise MemberSelectorError(owner, msg) from exc

    accesses = probe._probe_accesses
    if not isinstance(result, _AccessedMember) or accesses != [result.name]:
        msg = f"selector {selector!r} must return exactly one member, e.g. lambda obj: obj.name"
        raise MemberSelectorError(owner, msg)
    return result.name


def _property_name(owner: type, prop: property) -> str:
    for klass in owner.__mro__:
        for name, attr in vars(klass).items():
            if attr is prop:
                return name
    msg = f"property {prop!r} is not defined on {owner.__name__} or its bases"
    raise MemberSelectorError(owner, msg)


def _validate_name(owner: type, name: str) -> None:
    if not name.isidentifier() or keyword.iskeyword(name):
        raise MemberSelectorError(owner, f"{name!r} is not a valid member name")
    if not _is_public(name):
        raise MemberSelectorError(owner, f"{name!r} is not a public member")
    attr = inspect.getattr_static(owner, name, _MISSING)
    if isinstance(attr, (staticmethod, classmethod)) or inspect.isfunction(attr):
        raise MemberSelectorError(owner, f"{name!r} is a method, not a field or property")
    if attr is _MISSING and name not in {member.name for member in describe_type(owner)}:
        logger.debug(
            "%s declares no member %r; it only matches instance attributes", owner.__name__, name
        )


def resolve_member(owner: type | None, selector: Any) -> ByMember:
    """Resolve a member selector into a member key.

    Accepted selectors:
        - member name: ``"age"``
        - property object: ``Person.full_name``
        - single attribute access: ``lambda p: p.age``
        - ``(OtherType, selector)`` to address a member of another type

    Args:
        owner: Type the selector refers to (may be None for the tuple form)
        selector: Selector to resolve

    Returns:
        ByMember key

    Raises:
        MemberSelectorError: If the selector does not denote a simple member access
    """
    if isinstance(selector, tuple) and len(selector) == 2 and isinstance(selector[0], type):
        owner, selector = selector
    if owner is None:
        msg = f"cannot resolve {selector!r} without an owner type"
        raise MemberSelectorError(None, msg)

    if isinstance(selector, str):
        name = selector
    elif isinstance(selector, property):
        name = _property_name(owner, selector)
    elif callable(selector):
        name = _probe_selector(owner, selector)
    else:
        raise MemberSelectorError(owner, f"unsupported member selector {selector!r}")

    _validate_name(owner, name)
    return ByMember(owner, name)


__all__ = [
    "MemberInfo",
    "as_type",
    "describe_type",
    "public_members",
    "resolve_member",
]
