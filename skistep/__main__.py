import sys

from parsable import parsable

from skistep import parser, printer, reducer
from skistep.term import complexity
from skistep.util import BUDGET


def log_error(message):
    sys.stderr.write(message)
    sys.stderr.write('\n')
    sys.stderr.flush()


@parsable
def parse(string):
    """Parse a term and print it with and without the root sentinel."""
    term = parser.parse(string)
    print(printer.print_term(term))
    result = printer.print_program(term)
    print(result)
    return result


@parsable
def step(string, steps=BUDGET):
    """Step through the reduction sequence of a term.

    Returns the number of steps taken if reduction stopped before running
    out of steps, else None.
    """
    term = parser.parse(string)
    print(printer.print_program(term))
    for count in range(int(steps)):
        try:
            progress = reducer.step(term)
        except reducer.ArityError as e:
            log_error(str(e))
            return count
        if not progress:
            print('DONE')
            return count
        print(printer.print_program(term))
    return None


@parsable
def size(string, steps=BUDGET):
    """Print the number of nodes in a term after each reduction step."""
    term = parser.parse(string)
    sizes = [complexity(term)]
    print(sizes[-1])
    try:
        for term in reducer.trace(term, int(steps)):
            sizes.append(complexity(term))
            print(sizes[-1])
    except reducer.ArityError as e:
        log_error(str(e))
    return sizes


if __name__ == '__main__':
    parsable()
