from skistep.term import Term
from skistep.util import UnreachableError

SENTINEL = '#'
_CLOSE = ')'


def print_head(term):
    assert isinstance(term, Term), term
    if term.is_root:
        return SENTINEL
    elif term.is_atom:
        return term.name
    elif term.is_combinator:
        return term.tag
    raise UnreachableError(term)


def print_term(term):
    """Print a term, parenthesizing every node that has arguments.

    Examples:
      S                 -> S
      Term(S, [y, x])   -> (Sxy)
      ROOT(x) flattened -> (#x)
    """
    assert isinstance(term, Term), term
    tokens = []
    pending = [term]
    while pending:
        term = pending.pop()
        if term is _CLOSE:
            tokens.append(_CLOSE)
        elif not term.args:
            tokens.append(print_head(term))
        else:
            tokens.append('(')
            tokens.append(print_head(term))
            pending.append(_CLOSE)
            pending.extend(term.args)  # The topmost argument prints first.
    return ''.join(tokens)


def print_program(term):
    """Print the spine of a Root term without the sentinel.

    On flattened programs this is a right inverse of parse(), modulo atoms
    with multi-character names.
    """
    assert isinstance(term, Term), term
    assert term.is_root, term
    return ''.join(print_term(arg) for arg in reversed(term.args))
