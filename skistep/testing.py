"""Tools for testing the parser, printer and reducer."""

import inspect

import hypothesis.strategies as s
import pytest

from skistep.printer import print_term
from skistep.term import APP, ATOM, I, K, S


def for_each(examples):
    def decorator(fun):
        args, vargs, kwargs, defaults = inspect.getfullargspec(fun)[:4]
        if vargs or kwargs or defaults:
            raise TypeError(
                "\n  ".join(
                    [
                        f"Unsupported signature: {fun}",
                        f"args = {args}",
                        f"vargs = {vargs}",
                        f"kwargs = {kwargs}",
                        f"defaults = {defaults}",
                    ]
                )
            )
        argnames = ",".join(args)
        return pytest.mark.parametrize(argnames, examples)(fun)

    return decorator


# ----------------------------------------------------------------------------
# hypothesis strategies

s_names = s.sampled_from('abcxyz')

s_leaves = s.one_of(
    s.builds(S),
    s.builds(K),
    s.builds(I),
    s.builds(ATOM, s_names),
)


def _app(head, args):
    return APP(head, *args)


def s_terms_extend(terms):
    return s.builds(_app, terms, s.lists(terms, min_size=1, max_size=3))


s_terms = s.recursive(s_leaves, s_terms_extend, max_leaves=20)
s_sources = s.builds(print_term, s_terms)
