"""Infix to postfix conversion, postfix evaluation and binary expression trees."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

OPERATORS = frozenset("+-*/^")
_DIGITS = frozenset("0123456789")
_BLANKS = frozenset(" \t")
_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}


class ExpressionError(ValueError):
    """Raised for malformed or non-computable expressions."""


def precedence(symbol: str) -> int:
    """Return the binding strength of an operator; 0 for anything else."""
    return _PRECEDENCE.get(symbol, 0)


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression into postfix notation.

    Operators of equal precedence are treated as left-associative.
    """
    output: list[str] = []
    stack: list[str] = []
    for symbol in infix:
        if symbol in _BLANKS:
            continue
        if symbol == "(":
            stack.append(symbol)
        elif symbol == ")":
            while True:
                if not stack:
                    raise ExpressionError("unbalanced ')' in expression")
                top = stack.pop()
                if top == "(":
                    break
                output.append(top)
        elif symbol in OPERATORS:
            while stack and precedence(stack[-1]) >= precedence(symbol):
                output.append(stack.pop())
            stack.append(symbol)
        else:
            output.append(symbol)
    while stack:
        top = stack.pop()
        if top == "(":
            raise ExpressionError("unbalanced '(' in expression")
        output.append(top)
    return "".join(output)


def _power(base: int, exponent: int) -> int:
    if exponent >= 0:
        return base**exponent
    if base == 0:
        raise ExpressionError("zero raised to a negative power")
    return int(base**exponent)


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "^":
        return _power(left, right)
    if operator == "/":
        if right == 0:
            raise ExpressionError("division by zero")
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    raise ExpressionError(f"unknown operator {operator!r}")


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix expression of single-digit operands."""
    stack: list[int] = []
    for symbol in postfix:
        if symbol in _DIGITS:
            stack.append(int(symbol))
        elif symbol in OPERATORS:
            if len(stack) < 2:
                raise ExpressionError(f"missing operand for {symbol!r}")
            right = stack.pop()
            left = stack.pop()
            stack.append(_apply(symbol, left, right))
        else:
            raise ExpressionError(f"unexpected symbol {symbol!r}")
    if not stack:
        raise ExpressionError("empty expression")
    return stack.pop()


@dataclass
class ExprNode:
    """A node of a binary expression tree."""

    data: str
    left: Optional[ExprNode] = None
    right: Optional[ExprNode] = None

    def inorder(self) -> str:
        """Return the symbols of the subtree in inorder, without parentheses."""
        parts = []
        if self.left is not None:
            parts.append(self.left.inorder())
        parts.append(self.data)
        if self.right is not None:
            parts.append(self.right.inorder())
        return "".join(parts)

    def evaluate(self) -> int:
        """Compute the integer value of the subtree."""
        return _compute(self, None)


_StepHook = Optional[Callable[[ExprNode, int], None]]


def _compute(node: ExprNode, on_step: _StepHook) -> int:
    if node.left is None and node.right is None:
        if node.data not in _DIGITS:
            raise ExpressionError(f"operand {node.data!r} is not a digit")
        return int(node.data)
    left = _compute(node.left, on_step) if node.left is not None else 0
    right = _compute(node.right, on_step) if node.right is not None else 0
    result = _apply(node.data, left, right)
    if on_step is not None:
        on_step(node, result)
    return result


def build_tree(postfix: str) -> ExprNode:
    """Build an expression tree from a postfix expression."""
    stack: list[ExprNode] = []
    for symbol in postfix:
        node = ExprNode(symbol)
        if symbol in OPERATORS:
            if len(stack) < 2:
                raise ExpressionError(f"missing operand for {symbol!r}")
            node.right = stack.pop()
            node.left = stack.pop()
        stack.append(node)
    if len(stack) != 1:
        raise ExpressionError("malformed postfix expression")
    return stack[0]


def _print_step(node: ExprNode, result: int) -> None:
    print("Inorder Traversal of each subtree:")
    print(node.inorder())
    if node.data == "^":
        print(f"Result : {float(result):f}")
    else:
        print(f"Result : {result}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Convert, display and evaluate an infix expression."""
    parser = argparse.ArgumentParser(
        prog="structkit-expression",
        description="Convert an infix expression and evaluate it.",
    )
    parser.add_argument("expression", nargs="?", help="infix expression")
    args = parser.parse_args(argv)
    expression = args.expression
    if expression is None:
        expression = input("Enter the infix expression:")
    try:
        postfix = infix_to_postfix(expression)
        tree = build_tree(postfix)
        print("Postfix expression:")
        print(postfix)
        print("Inorder Traversal:")
        print(tree.inorder())
        print()
        result = _compute(tree, _print_step)
    except ExpressionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"\nFinal Result : {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())