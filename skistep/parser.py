from skistep.term import APP, ATOM, ROOT, I, K, S


class ParseError(ValueError):
    def __init__(self, message, pos='unknown'):
        ValueError.__init__(self, message)
        self.message = str(message)
        self.pos = pos

    def __str__(self):
        return 'ParseError at position {0}: {1}'.format(self.pos, self.message)


_BUILDERS = {
    'S': S,
    'K': K,
    'I': I,
}


def parse(string):
    """Parse a string to a flattened Root term.

    Every character other than S, K, I and parentheses is an atom.
    Parentheses are not checked for balance: a missing ) ends the group at
    the end of input, and an extra ) ends the enclosing group early. At the
    outermost level an extra ) ends the program.

    Raises:
      ParseError if the program or some group is empty.
    """
    assert isinstance(string, str), type(string)
    groups = [(0, [])]  # : (position of first char, terms) per open group
    pos = 0
    while pos < len(string):
        char = string[pos]
        if char == '(':
            groups.append((pos + 1, []))
        elif char == ')':
            if len(groups) == 1:
                break
            _close_group(groups)
        elif char in _BUILDERS:
            groups[-1][1].append(_BUILDERS[char]())
        else:
            groups[-1][1].append(ATOM(char))
        pos += 1
    while len(groups) > 1:
        _close_group(groups)
    beg, terms = groups.pop()
    if not terms:
        raise ParseError('empty program', beg)
    term = ROOT(APP(*terms))
    term.flatten_top()
    return term


def _close_group(groups):
    """Apply the innermost group and add it to its enclosing group."""
    beg, terms = groups.pop()
    if not terms:
        raise ParseError('empty group', beg)
    groups[-1][1].append(APP(*terms))
