"""One-step rewriting of flattened SKI spines.

step() rewrites the first combinator on the top-level spine of a term,
skipping over atoms, according to:

    S x y z -> x z (y z)
    K x y   -> x
    I x     -> x

Redexes nested inside arguments are not reduced until some earlier
rewrite floats them up to the spine.
"""

from skistep.printer import print_term
from skistep.term import _I, _K, _ROOT, _S, Term
from skistep.util import BUDGET, LOG, UnreachableError, logged

ARITY = {
    _S: 3,
    _K: 2,
    _I: 0,
}


class ArityError(ValueError):
    def __init__(self, name, required, available):
        ValueError.__init__(
            self,
            '{} requires {} arguments, found {}'.format(
                name, required, available))
        self.name = name
        self.required = required
        self.available = available


def _reduce_S(term):
    x = term.pop()
    y = term.pop()
    z = term.pop()
    yz = y.copy()
    yz.args.insert(0, z.copy())  # z is the rightmost argument of (y z).
    term.push(yz)
    term.push(z)
    term.push(x)


def _reduce_K(term):
    x = term.pop()
    term.pop()
    term.push(x)


def _reduce_I(term):
    pass


_RULES = {
    _S: _reduce_S,
    _K: _reduce_K,
    _I: _reduce_I,
}


@logged(print_term)
def step(term):
    """Try to perform one rewrite step in-place.

    Returns:
      True or False, depending on whether a rewrite was performed. The
      term is left as it was when no rewrite was performed.

    Raises:
      ArityError if the first combinator on the spine has too few
      arguments. On this or any other error the term is left as it was
      before the call.
    """
    assert isinstance(term, Term), term
    saved = list(term.args)
    skipped = []
    try:
        progress = _step(term, skipped)
    except BaseException:
        term.args = saved
        raise
    if not progress:
        term.args = saved
        return False
    term.flatten_top()
    while skipped:
        term.push(skipped.pop())
    return True


def _step(term, skipped):
    while True:
        term.flatten_top()
        if not term.args:
            return False
        op = term.pop()
        if op.is_atom:
            LOG.debug('skip {}'.format(op.name))
            skipped.append(op)
            continue
        if op.tag is _ROOT:
            term.push(op)
            return False
        if op.tag not in _RULES:
            raise UnreachableError(op)
        available = len(term.args)
        if available < ARITY[op.tag]:
            raise ArityError(op.tag, ARITY[op.tag], available)
        LOG.debug('rewrite {}'.format(op.tag))
        _RULES[op.tag](term)
        return True


def trace(term, budget=BUDGET):
    """Step a term at most budget times, yielding it after each rewrite.

    Stops early at the first step that performs no rewrite.
    """
    for _ in range(budget):
        if not step(term):
            return
        yield term
