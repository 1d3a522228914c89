from __future__ import annotations

"""
Declaration Tree Data Models.

Provides the tagged node type used to describe a symbol model: namespaces,
classes and their members. Node kinds are dispatched on an enum rather than
a class hierarchy; container kinds expose their children through
collect_children().
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

# -----------------------------------------------------------------------------
# NODE KINDS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Declaration kinds understood by the serializer."""
    NAMESPACE = "namespace"
    CLASS = "class"
    CONSTRUCTOR = "constructor"
    FUNCTION = "function"
    PROPERTY = "property"
    OTHER = "other"

    @property
    def is_container(self) -> bool:
        """True for class-or-namespace-like kinds that own child declarations."""
        return self in (NodeKind.NAMESPACE, NodeKind.CLASS)

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DeclarationNode:
    """
    A single declaration of the symbol tree.

    Attributes:
        kind: Declaration kind tag.
        name: Simple (unqualified) name.
        signature: Opaque rendered signature supplied by an external renderer.
        fq_name: Fully-qualified dotted name, meaningful for namespaces.
        is_primary: Whether a constructor is the primary one of its class.
        constructors: Declared constructors (classes only).
        members: All declarations of the default member scope.
        objects: Object declarations of the member scope.
        class_object: Companion object of a class, if any.
    """
    kind: NodeKind
    name: str
    signature: str = ""
    fq_name: str = ""
    is_primary: bool = False

    constructors: Tuple["DeclarationNode", ...] = ()
    members: Tuple["DeclarationNode", ...] = ()
    objects: Tuple["DeclarationNode", ...] = ()
    class_object: Optional["DeclarationNode"] = None

    @property
    def is_container(self) -> bool:
        return self.kind.is_container


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def collect_children(node: DeclarationNode) -> List[DeclarationNode]:
    """
    Gather the unordered child declarations of a container node.

    Classes contribute constructors, member scope declarations, object
    declarations and their class object. Namespaces contribute member scope
    declarations and object declarations only.

    Args:
        node: A class or namespace declaration.

    Returns:
        List[DeclarationNode]: Children in supply order (not yet sorted).

    Raises:
        RuntimeError: If the node is neither a class nor a namespace.
    """
    children: List[DeclarationNode] = []

    if node.kind is NodeKind.CLASS:
        children.extend(node.constructors)
        children.extend(node.members)
        children.extend(node.objects)
        if node.class_object is not None:
            children.append(node.class_object)
    elif node.kind is NodeKind.NAMESPACE:
        children.extend(node.members)
        children.extend(node.objects)
    else:
        raise RuntimeError(f"Should be class or namespace: {node.kind.value} '{node.name}'")

    return children
