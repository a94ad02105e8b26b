# arch-decoder - prefix code message decoding
# huffman.py
# 10/18/26

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Tuple, Union

INTERNAL = '^' # payload marking a structural (non-leaf) node


class TreeDecodeError(ValueError):
    """Base class for problems with a code tree or the bits fed through it."""

class EmptyTreeSpec(TreeDecodeError):
    pass

class MalformedTreeSpec(TreeDecodeError):
    pass

class DegenerateTree(TreeDecodeError):
    pass

class InvalidBitString(TreeDecodeError):
    pass

class TruncatedMessage(TreeDecodeError):
    pass

class UnknownSymbol(TreeDecodeError, KeyError):
    def __str__(self):
        return ValueError.__str__(self)


class MsgNode: # Node for a message code tree
    def __init__(self, payload):
        self.payload = payload  # character, or INTERNAL
        self.left = None
        self.right = None

    def is_internal(self):
        return self.payload == INTERNAL

    def is_leaf(self):
        return self.left is None and self.right is None

    def __eq__(self, other):
        if not isinstance(other, MsgNode):
            return NotImplemented
        return (self.payload == other.payload
                and self.left == other.left
                and self.right == other.right)

    __hash__ = None

    def __repr__(self):
        if self.is_leaf():
            return f"MsgNode({self.payload!r})"
        return f"MsgNode({self.payload!r}, {self.left!r}, {self.right!r})"


def build_tree(shape: str) -> MsgNode:
    """
    Rebuild a code tree from its pre-order serialization without recursion.

    Internal nodes appear as '^' and leaves as their literal character.
    Every internal node is pushed when it is created; each leaf pops the
    most recent one so its right slot is filled next. A leaf that arrives
    with nothing left on the stack completes the tree.

    Raises EmptyTreeSpec for an empty shape and MalformedTreeSpec when the
    shape leaves a slot unfilled or carries characters past the end of the tree.
    """
    if not shape:
        raise EmptyTreeSpec("tree shape is empty")

    root = MsgNode(shape[0])
    if not root.is_internal():
        if len(shape) > 1:
            raise MalformedTreeSpec(
                f"unexpected {shape[1]!r} at position 1: root {root.payload!r} is a leaf")
        return root

    stack = [root] # internal nodes awaiting their right child
    current = root
    fill_left = True
    complete = False

    for index in range(1, len(shape)):
        ch = shape[index]
        if complete:
            raise MalformedTreeSpec(f"unexpected {ch!r} at position {index}: tree is already complete")

        node = MsgNode(ch)
        if fill_left:
            current.left = node
        else:
            current.right = node

        if node.is_internal():
            stack.append(node)
            current = node
            fill_left = True # internal nodes always take their left child next
        else:
            if stack:
                current = stack.pop() # resume the nearest parent still missing a right child
            else:
                complete = True
            fill_left = False

    if not complete:
        raise MalformedTreeSpec(f"tree shape ended after {len(shape)} characters with unfilled children")

    return root


def decode(root: MsgNode, bits: str, strict: bool = False) -> str:
    """
    Walk the tree bit by bit ('0' left, '1' right), emitting a character at
    every leaf and restarting at the root.

    A trailing partial path is dropped unless strict is set, in which case
    TruncatedMessage is raised.
    """
    if not bits:
        return ""
    if root.is_leaf():
        raise DegenerateTree(f"root {root.payload!r} is a leaf; cannot decode {len(bits)} bits")

    decoded = []
    node = root
    for position, bit in enumerate(bits):
        if bit == '0':
            node = node.left
        elif bit == '1':
            node = node.right
        else:
            raise InvalidBitString(f"invalid bit {bit!r} at position {position}")

        if node.is_leaf():
            decoded.append(node.payload)
            node = root # back to the root for the next character

    if strict and node is not root:
        raise TruncatedMessage(f"bit message ends in the middle of a code after {len(decoded)} characters")

    return "".join(decoded)


def code_table(root: MsgNode) -> List[Tuple[str, str]]: # (character, code) pairs in tree order
    table = []
    def collect(node, code):
        if node is None:
            return

        # Leaf -> record its path
        if node.is_leaf():
            table.append((node.payload, code))
            return

        collect(node.left, code + '0')
        collect(node.right, code + '1')

    collect(root, '')
    return table


def serialize_tree(root: MsgNode) -> str:
    out = []
    def visit(node):
        if node is None:
            return
        out.append(INTERNAL if node.is_internal() else node.payload)
        visit(node.left)
        visit(node.right)

    visit(root)
    return "".join(out)


def count_leaves(root: MsgNode) -> int:
    if root is None:
        return 0
    if root.is_leaf():
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def encode(message: str, table: Union[Mapping[str, str], Iterable[Tuple[str, str]]]) -> str:
    """Concatenate the code of every character in message."""
    code_map: Dict[str, str] = dict(table)
    try:
        return ''.join(code_map[ch] for ch in message)
    except KeyError as exc:
        raise UnknownSymbol(f"no code for character {exc.args[0]!r}") from None
