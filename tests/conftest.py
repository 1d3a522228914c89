from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Provides small declaration trees shared by unit and integration tests.
"""

import os
import sys
from types import SimpleNamespace
from typing import Sequence

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from declcompare.domain.tree_models import DeclarationNode, NodeKind  # noqa: E402


# -----------------------------------------------------------------------------
# Node Builders
# -----------------------------------------------------------------------------
def fun(name: str, params: str = "", owner_final: bool = True) -> DeclarationNode:
    modifier = "public final fun" if owner_final else "public fun"
    return DeclarationNode(
        kind=NodeKind.FUNCTION,
        name=name,
        signature=f"{modifier} {name}({params}): kotlin.Unit",
    )


def prop(name: str, type_name: str = "kotlin.Int") -> DeclarationNode:
    return DeclarationNode(
        kind=NodeKind.PROPERTY,
        name=name,
        signature=f"public final val {name}: {type_name}",
    )


def ctor(class_name: str, params: str = "", primary: bool = False) -> DeclarationNode:
    return DeclarationNode(
        kind=NodeKind.CONSTRUCTOR,
        name="<init>",
        signature=f"public constructor {class_name}({params})",
        is_primary=primary,
    )


def klass(
        name: str,
        members: Sequence[DeclarationNode] = (),
        constructors: Sequence[DeclarationNode] = (),
        objects: Sequence[DeclarationNode] = (),
        class_object: DeclarationNode | None = None,
) -> DeclarationNode:
    return DeclarationNode(
        kind=NodeKind.CLASS,
        name=name,
        signature=f"public final class {name}",
        constructors=tuple(constructors),
        members=tuple(members),
        objects=tuple(objects),
        class_object=class_object,
    )


def namespace(
        fq_name: str,
        members: Sequence[DeclarationNode] = (),
        objects: Sequence[DeclarationNode] = (),
) -> DeclarationNode:
    return DeclarationNode(
        kind=NodeKind.NAMESPACE,
        name=fq_name.rsplit(".", 1)[-1],
        signature=f"package {fq_name}",
        fq_name=fq_name,
        members=tuple(members),
        objects=tuple(objects),
    )


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def builders() -> SimpleNamespace:
    """Expose the node builders to test modules."""
    return SimpleNamespace(fun=fun, prop=prop, ctor=ctor, klass=klass, namespace=namespace)


@pytest.fixture
def sample_tree() -> DeclarationNode:
    """
    Return a package with one top-level function and one class.

    Structure:
    package test
      fun bar()
      class A
        constructor A() (primary)
        val x
        fun foo()
        fun equals(other)
    """
    equals = DeclarationNode(
        kind=NodeKind.FUNCTION,
        name="equals",
        signature="public open fun equals(other: kotlin.Any?): kotlin.Boolean",
    )
    a = klass(
        "A",
        members=[fun("foo"), equals, prop("x")],
        constructors=[ctor("A", primary=True)],
    )
    return namespace("test", members=[a, fun("bar", owner_final=False)])


@pytest.fixture
def sample_tree_text() -> str:
    """Canonical serialization of sample_tree under the default policy."""
    return (
        "package test\n"
        "\n"
        "public fun bar(): kotlin.Unit\n"
        "\n"
        "public final class A {\n"
        "    public constructor A()\n"
        "    public final val x: kotlin.Int\n"
        "    public final fun foo(): kotlin.Unit\n"
        "}\n"
    )
