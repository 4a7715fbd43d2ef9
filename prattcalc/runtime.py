import logging
import math
from typing import assert_never

from prattcalc.parser import BinaryOperation, BinaryOperator, Expression, Literal, UnaryOperation, UnaryOperator, parse
from prattcalc.tokenizer import tokenize

logger = logging.getLogger(__name__)


def evaluate(expression: Expression) -> float:
    """Post-order walk with explicit stacks, long lines build trees deeper than the recursion limit.

    Operators are pushed below their operands and applied once the operand results are on ``results``.
    The left operand is always evaluated before the right one.
    """
    results: list[float] = []
    pending: list[Expression | UnaryOperator | BinaryOperator] = [expression]
    while pending:
        item = pending.pop()
        match item:
            case Literal(value=value):
                results.append(value)
            case UnaryOperation(operator=operator, operand=operand):
                pending.append(operator)
                pending.append(operand)
            case BinaryOperation(operator=operator, left=left, right=right):
                pending.append(operator)
                pending.append(right)
                pending.append(left)
            case UnaryOperator():
                results.append(eval_unary_operation(item, results.pop()))
            case BinaryOperator():
                right_res = results.pop()
                left_res = results.pop()
                results.append(eval_binary_operation(item, left_res, right_res))
            case _:
                assert_never(item)
    return results.pop()


def eval_unary_operation(operator: UnaryOperator, operand: float) -> float:
    match operator:
        case UnaryOperator.POS:
            return operand
        case UnaryOperator.NEG:
            return -operand
        case _:
            assert_never(operator)


def eval_binary_operation(operator: BinaryOperator, a: float, b: float) -> float:
    match operator:
        case BinaryOperator.ADD:
            return a + b
        case BinaryOperator.SUB:
            return a - b
        case BinaryOperator.MUL:
            return a * b
        case BinaryOperator.DIV:
            return ieee_div(a, b)
        case _:
            assert_never(operator)


def ieee_div(a: float, b: float) -> float:
    """Float division giving +-inf or nan for a zero divisor instead of raising ZeroDivisionError"""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def calculate(code: str) -> float:
    result = evaluate(parse(tokenize(code)))
    logger.debug("Evaluated %r to %s", code, result)
    return result
