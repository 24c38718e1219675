import pytest

from structkit.expression import (
    ExprNode,
    ExpressionError,
    build_tree,
    evaluate_postfix,
    infix_to_postfix,
    main,
    precedence,
)

PLAIN_EXPRESSIONS = ["1+2*3", "8-3-2", "9/2*4", "2^3+1", "7-9", "4*5-6/3"]
ALL_EXPRESSIONS = PLAIN_EXPRESSIONS + ["(1+2)*(3+4)", "(8-3)/2", "2^(1+1)"]


@pytest.mark.parametrize(
    "symbol, expected",
    [("^", 3), ("*", 2), ("/", 2), ("+", 1), ("-", 1), ("(", 0), ("a", 0)],
)
def test_precedence(symbol, expected):
    assert precedence(symbol) == expected


def test_infix_to_postfix_pinned():
    assert infix_to_postfix("1+2*3") == "123*+"
    assert infix_to_postfix("(1+2)*3") == "12+3*"


def test_blanks_are_ignored():
    assert infix_to_postfix(" 1 +\t2 ") == infix_to_postfix("1+2")


@pytest.mark.parametrize("expression", PLAIN_EXPRESSIONS)
def test_tree_inorder_reproduces_infix(expression):
    tree = build_tree(infix_to_postfix(expression))
    assert tree.inorder() == expression


@pytest.mark.parametrize("expression", ALL_EXPRESSIONS)
def test_tree_and_postfix_evaluation_agree(expression):
    postfix = infix_to_postfix(expression)
    assert build_tree(postfix).evaluate() == evaluate_postfix(postfix)


def test_evaluate_postfix_pinned():
    assert evaluate_postfix("93-") == 6


def test_subtraction_keeps_operand_order():
    forward = evaluate_postfix("12-")
    assert forward < 0
    assert forward == -evaluate_postfix("21-")


def test_division_truncates_toward_zero():
    assert evaluate_postfix("07-2/") == -evaluate_postfix("72/")


def test_power_is_left_associative():
    left = infix_to_postfix("2^3^2")
    grouped = infix_to_postfix("(2^3)^2")
    assert left == grouped
    assert evaluate_postfix(left) == evaluate_postfix(grouped)


def test_build_tree_structure():
    tree = build_tree("12+")
    assert tree.data == "+"
    assert tree.left == ExprNode("1")
    assert tree.right == ExprNode("2")


@pytest.mark.parametrize("infix", [")", "(1+2", "1+2)"])
def test_unbalanced_parentheses(infix):
    with pytest.raises(ExpressionError):
        infix_to_postfix(infix)


@pytest.mark.parametrize("postfix", ["1+", "", "10/", "1a", "+"])
def test_evaluate_postfix_errors(postfix):
    with pytest.raises(ExpressionError):
        evaluate_postfix(postfix)


@pytest.mark.parametrize("postfix", ["+", "12", ""])
def test_build_tree_errors(postfix):
    with pytest.raises(ExpressionError):
        build_tree(postfix)


def test_non_digit_leaf_cannot_be_evaluated():
    with pytest.raises(ExpressionError):
        ExprNode("a").evaluate()


def test_tree_division_by_zero():
    with pytest.raises(ExpressionError):
        build_tree("50/").evaluate()


def test_main_prints_result(capsys):
    expression = "(1+2)*3"
    postfix = infix_to_postfix(expression)
    assert main([expression]) == 0
    out = capsys.readouterr().out
    assert postfix in out
    assert f"Final Result : {build_tree(postfix).evaluate()}" in out


def test_main_reports_error(capsys):
    assert main([")"]) == 1
    assert "error" in capsys.readouterr().err