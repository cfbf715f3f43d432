from hypothesis import strategies as st

from .exceptions import DivisionByZero
from .operators import Operator

operators = lambda: st.sampled_from(["+", "-", "*", "/"])
numbers = lambda max_value=1000: st.integers(min_value=0, max_value=max_value)


def chain_value(chain):
    """
    Reduce a [value, op, value, ..., op, value] chain to a single integer.

    Operators with higher precedence are applied first. Among operators with
    the same precedence, the leftmost is applied first.
    """
    values = list(chain[::2])
    ops = [Operator.from_name(op) for op in chain[1::2]]

    while ops:
        idx = max(range(len(ops)), key=lambda i: (ops[i].precedence_level, -i))
        rhs = values.pop(idx + 1)
        values[idx] = ops.pop(idx).apply(values[idx], rhs)
    return values[0]


def join_chain(parts):
    first, rest = parts
    src, chain = [first[0]], [first[1]]
    for op, (text, value) in rest:
        src.extend([op, text])
        chain.extend([op, value])
    try:
        return " ".join(src), chain_value(chain)
    except DivisionByZero:
        return None


def chains(atoms, max_size=4):
    """
    Strategy for operator chains joining the given atoms.

    Atoms must be (source, value) pairs.
    """
    parts = st.tuples(atoms, st.lists(st.tuples(operators(), atoms), max_size=max_size))
    return parts.map(join_chain).filter(lambda x: x is not None)


def expressions(max_leaves=12):
    """
    Strategy for (source, value) pairs of well-formed expressions.

    Source strings use a single space between tokens.
    """
    number = numbers().map(lambda n: (str(n), n))
    parenthesize = lambda e: (f"( {e[0]} )", e[1])
    return st.recursive(
        number,
        lambda sub: chains(st.one_of(number, sub.map(parenthesize))),
        max_leaves=max_leaves,
    )


whitespace = lambda: st.text(alphabet=" \t", max_size=3)
