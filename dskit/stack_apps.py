"""Stack applications: bracket matching, postfix expressions, recursion."""

import operator
from enum import IntEnum

from dskit.errors import UnderflowError
from dskit.stack import ArrayStack

_STACK_CAPACITY = 100
_STRING_CAPACITY = 2000
_DIGITS = "0123456789"
_OPENERS = "([{"
_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


class Matching(IntEnum):
    """Outcome of a bracket check; non-zero values name the broken rule."""

    OK = 0
    UNCLOSED = 1
    UNEXPECTED_CLOSE = 2
    MISMATCH = 3


def check_matching(expr):
    """Check that the brackets in ``expr`` are balanced and properly nested."""
    stack = ArrayStack(_STACK_CAPACITY)
    for ch in expr:
        if ch in _OPENERS:
            stack.push(ch)
        elif ch in _CLOSERS:
            if stack.is_empty():
                return Matching.UNEXPECTED_CLOSE
            if stack.pop() != _CLOSERS[ch]:
                return Matching.MISMATCH
    return Matching.OK if stack.is_empty() else Matching.UNCLOSED


def eval_postfix(expr):
    """Evaluate a postfix expression of single-digit operands."""
    stack = ArrayStack(_STACK_CAPACITY)
    for ch in expr:
        if ch in _DIGITS:
            stack.push(float(ch))
        elif ch in _OPERATIONS:
            right = stack.pop()
            left = stack.pop()
            stack.push(_OPERATIONS[ch](left, right))
    return stack.pop()


def precedence(op):
    """Return the precedence of an operator; -1 for anything else."""
    if op in "()" and op:
        return 0
    if op in ("+", "-"):
        return 1
    if op in ("*", "/"):
        return 2
    return -1


def infix_to_postfix(expr):
    """Convert an infix expression of single-digit operands to postfix."""
    stack = ArrayStack(_STACK_CAPACITY)
    output = []
    for ch in expr:
        if ch in _DIGITS:
            output.append(ch)
        elif ch == "(":
            stack.push(ch)
        elif ch == ")":
            while not stack.is_empty():
                op = stack.pop()
                if op == "(":
                    break
                output.append(op)
        elif ch in _OPERATIONS:
            while not stack.is_empty() and precedence(ch) <= precedence(stack.peek()):
                output.append(stack.pop())
            stack.push(ch)
    while not stack.is_empty():
        output.append(stack.pop())
    return " ".join(output)


def reverse_string(text):
    """Return ``text`` reversed by pushing and popping every character."""
    stack = ArrayStack(_STRING_CAPACITY)
    for ch in text:
        stack.push(ch)
    return "".join(stack.pop() for _ in range(len(stack)))


def factorial_iter(n):
    """Return ``n!`` computed with a loop."""
    result = 1
    for i in range(1, n + 1):
        result *= i
    return result


def factorial(n):
    """Return ``n!`` computed recursively; ``n`` must be at least 1."""
    if n < 1:
        raise ValueError("factorial is defined here for n >= 1")
    if n == 1:
        return 1
    return n * factorial(n - 1)


def factorial_trace(n):
    """Return ``(n!, trace)`` where trace lists each call and return in order."""
    if n < 1:
        raise ValueError("factorial is defined here for n >= 1")
    trace = []

    def walk(k):
        trace.append(f"call factorial({k})")
        value = 1 if k == 1 else k * walk(k - 1)
        trace.append(f"return factorial({k}) --> {value}")
        return value

    return walk(n), trace


def hanoi_tower(n, source="A", spare="B", target="C"):
    """Return an iterator of ``(disk, from_peg, to_peg)`` moves solving the puzzle."""
    if n < 1:
        raise ValueError("at least one disk is required")

    def moves(k, src, tmp, dst):
        if k == 1:
            yield (1, src, dst)
            return
        yield from moves(k - 1, src, dst, tmp)
        yield (k, src, dst)
        yield from moves(k - 1, tmp, src, dst)

    return moves(n, source, spare, target)


__all__ = [
    "Matching",
    "UnderflowError",
    "check_matching",
    "eval_postfix",
    "precedence",
    "infix_to_postfix",
    "reverse_string",
    "factorial_iter",
    "factorial",
    "factorial_trace",
    "hanoi_tower",
]