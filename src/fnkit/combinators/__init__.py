"""Combinators - arity transformers and function composition."""

# Combinators satisfy the following algebraic laws:
#
# 1. Identity: pipe(f, pipe())(x) == pipe(pipe(), f)(x) == f(x)
#    The empty pipeline is the identity on one argument
#
# 2. Associativity: pipe(pipe(f, g), h)(x) == pipe(f, pipe(g, h))(x)
#    Grouping of steps does not matter
#
# 3. Duality: compose(f, g, h)(x) == pipe(h, g, f)(x)
#    compose is pipe read backwards
#
# 4. Curry equivalence: curry(f)(a)(b) == curry(f)(a, b) == f(a, b)
#    Argument grouping does not matter once the arity is reached

from .arity import curry, partial, required_arity
from .flow import Pipeline, compose, pipe

__all__ = [
    "Pipeline",
    "compose",
    "curry",
    "partial",
    "pipe",
    "required_arity",
]
