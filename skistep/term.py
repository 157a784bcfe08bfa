"""Terms of the SKI calculus in flattened-spine form.

A term is a tag plus an argument stack. The stack lists the arguments
applied to the tag, rightmost argument first, so that the topmost element
(the end of the list) is the leftmost pending argument::

    Term(S, args=[z, y, x])  denotes  S x y z

The top of a Root term's stack is the head of the whole program, and
flatten_top() keeps it a bare (argument free) node.
"""

import sys

_ROOT = sys.intern('ROOT')
_S = sys.intern('S')
_K = sys.intern('K')
_I = sys.intern('I')
_ATOM = sys.intern('ATOM')

COMBINATORS = frozenset([_S, _K, _I])
RESERVED = frozenset('SKI()')


class Term(object):
    __slots__ = ['tag', 'name', 'args']

    def __init__(self, tag, name=None, args=()):
        self.tag = sys.intern(tag)
        self.name = name
        self.args = list(args)

    def __repr__(self):
        if self.is_atom:
            head = 'ATOM({!r})'.format(self.name)
        else:
            head = self.tag
        if not self.args:
            return head
        return 'Term({}, args={!r})'.format(head, self.args)

    @property
    def is_root(self):
        return self.tag is _ROOT

    @property
    def is_atom(self):
        return self.tag is _ATOM

    @property
    def is_combinator(self):
        return self.tag in COMBINATORS

    @property
    def is_leaf(self):
        return not self.args

    def push(self, term):
        assert isinstance(term, Term), term
        self.args.append(term)

    def pop(self):
        return self.args.pop()

    def top(self):
        return self.args[-1]

    def bare(self):
        """Copy of this node's head, without arguments."""
        return Term(self.tag, self.name)

    def copy(self):
        """Deep copy."""
        result = self.bare()
        pending = [(self, result)]
        while pending:
            source, target = pending.pop()
            for arg in source.args:
                copied = arg.bare()
                target.args.append(copied)
                pending.append((arg, copied))
        return result

    def flatten_top(self):
        """Absorb one level of nesting from the topmost argument.

        The arguments of the topmost element are spliced into this stack,
        keeping their order, and a bare copy of its head is pushed on top.
        This is a no-op on an empty stack or a bare topmost element.
        """
        if not self.args:
            return
        head = self.pop()
        for arg in head.args:
            self.push(arg)
        self.push(head.bare())

    def __eq__(self, other):
        """Syntactic equality of heads and argument stacks."""
        if not isinstance(other, Term):
            return NotImplemented
        pending = [(self, other)]
        while pending:
            lhs, rhs = pending.pop()
            if lhs is rhs:
                continue
            if lhs.tag is not rhs.tag or lhs.name != rhs.name:
                return False
            if len(lhs.args) != len(rhs.args):
                return False
            pending.extend(zip(lhs.args, rhs.args))
        return True

    __hash__ = None


# ----------------------------------------------------------------------------
# Builders

def ROOT(body):
    """Wrap a program. Call flatten_top() to expose its spine."""
    assert isinstance(body, Term), body
    assert not body.is_root, body
    return Term(_ROOT, args=[body])


def S():
    return Term(_S)


def K():
    return Term(_K)


def I():
    return Term(_I)


def ATOM(name):
    if not isinstance(name, str) or not name:
        raise ValueError('Atom names must be nonempty strings: {!r}'.format(
            name))
    if name in RESERVED:
        raise ValueError('Atom names cannot be one of S,K,I,(,): {}'.format(
            name))
    return Term(_ATOM, name)


def APP(head, *args):
    """Apply head to args, given in source order.

    This takes ownership of head and args; pass copies to share them.
    """
    assert isinstance(head, Term), head
    assert not head.is_root, head
    for arg in args:
        assert isinstance(arg, Term), arg
    # A head that already has arguments keeps them: (K a) b is K a b.
    head.args = list(reversed(args)) + head.args
    return head


def complexity(term):
    """Number of nodes in a term."""
    assert isinstance(term, Term), term
    result = 0
    pending = [term]
    while pending:
        term = pending.pop()
        result += 1
        pending.extend(term.args)
    return result
