import pytest
from hypothesis import given, strategies as st

from dsakit.stacks import (
    Stack,
    StackOverflowError,
    StackUnderflowError,
    infix_to_postfix,
    precedence,
)

OPERATORS = "+-*/^"


def test_source_stack_session():
    stack = Stack(5)
    for value in (10, 20, 30):
        stack.push(value)
    assert stack.pop() == 30
    assert stack.peek() == 20
    drained = []
    while not stack.is_empty():
        drained.append(stack.pop())
    assert drained == [20, 10]


def test_overflow_at_capacity():
    stack = Stack(2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackOverflowError):
        stack.push(3)
    assert len(stack) == 2


def test_default_capacity_is_ten():
    stack = Stack()
    for value in range(10):
        stack.push(value)
    with pytest.raises(StackOverflowError):
        stack.push(10)


def test_underflow_on_empty():
    stack = Stack()
    assert stack.is_empty() is True
    with pytest.raises(StackUnderflowError):
        stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.peek()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(-1)


@given(st.lists(st.integers(), max_size=20))
def test_pop_returns_reverse_of_pushes(values):
    stack = Stack(len(values))
    for value in values:
        stack.push(value)
    assert [stack.pop() for _ in values] == values[::-1]
    assert stack.is_empty()


def test_precedence_table():
    assert precedence("^") == 3
    assert precedence("*") == precedence("/") == 2
    assert precedence("+") == precedence("-") == 1
    assert precedence("(") == -1


def test_infix_source_example():
    assert infix_to_postfix("a+b*(c^d-e)^(f+g*h)-i") == "abcd^e-fgh*+^*+i-"


def test_unbalanced_close_paren_rejected():
    with pytest.raises(ValueError):
        infix_to_postfix("a+b)")


def test_operands_alone_pass_through():
    assert infix_to_postfix("abc123") == "abc123"


def _expressions():
    operand = st.sampled_from("abcxyz019")
    return st.recursive(
        operand,
        lambda inner: st.one_of(
            st.builds(lambda a, op, b: a + op + b, inner, st.sampled_from(OPERATORS), inner),
            st.builds(lambda e: "(" + e + ")", inner),
        ),
        max_leaves=8,
    )


@given(_expressions())
def test_postfix_keeps_operands_and_drops_parentheses(expression):
    result = infix_to_postfix(expression)
    assert "(" not in result and ")" not in result
    assert [c for c in result if c.isalnum()] == [c for c in expression if c.isalnum()]
    assert sorted(c for c in result if c in OPERATORS) == sorted(
        c for c in expression if c in OPERATORS
    )


@given(_expressions())
def test_postfix_is_well_formed(expression):
    depth = 0
    for char in infix_to_postfix(expression):
        depth += 1 if char.isalnum() else -1
        assert depth >= 1
    assert depth == 1