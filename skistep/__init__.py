from skistep.parser import ParseError, parse
from skistep.printer import print_program, print_term
from skistep.reducer import ArityError, step, trace
from skistep.term import Term, complexity

__all__ = [
    'ArityError',
    'ParseError',
    'Term',
    'complexity',
    'parse',
    'print_program',
    'print_term',
    'step',
    'trace',
]
