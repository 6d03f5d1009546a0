"""Tests for the calculator engine."""

import pytest
from unicalc.core.engine.calculator import CalculatorEngine, Operator, evaluate
from unicalc.core.engine.formatting import ERROR


def press(engine, *inputs):
    """Feed digits and operators to the engine; return the last display."""
    display = engine.display
    for item in inputs:
        if item in "+-*/=":
            display = engine.apply_operator(item)
        else:
            for d in item:
                display = engine.input_digit(d)
    return display


class TestDigitEntry:
    def test_initial_display(self):
        assert CalculatorEngine().display == "0"

    def test_digits_replace_leading_zero(self):
        engine = CalculatorEngine()
        assert press(engine, "007") == "7"

    def test_dot_after_zero(self):
        engine = CalculatorEngine()
        assert engine.input_digit(".") == "0."
        assert engine.input_digit("5") == "0.5"

    def test_duplicate_dot_rejected(self):
        engine = CalculatorEngine()
        assert press(engine, "1.2.3.") == "1.23"
        assert engine.current_entry.count(".") == 1

    def test_dot_starts_new_entry_after_operator(self):
        engine = CalculatorEngine()
        press(engine, "4", "+")
        assert engine.input_digit(".") == "0."
        assert engine.awaiting_new_entry is False

    def test_invalid_digit_ignored(self):
        engine = CalculatorEngine()
        press(engine, "12")
        assert engine.input_digit("x") == "12"
        assert engine.input_digit("") == "12"


class TestOperators:
    def test_addition(self):
        engine = CalculatorEngine()
        engine.clear_all()
        assert press(engine, "5", "+", "3", "=") == "8"

    def test_chained_operations_evaluate_left_to_right(self):
        engine = CalculatorEngine()
        assert press(engine, "2", "+", "3", "*", "4", "=") == "20"

    def test_intermediate_result_is_shown(self):
        engine = CalculatorEngine()
        assert press(engine, "2", "+", "3", "*") == "5"
        assert engine.pending_operand == 5

    def test_divide_by_zero_is_error(self):
        engine = CalculatorEngine()
        engine.clear_all()
        assert press(engine, "1", "/", "0", "=") == "Error"
        assert engine.pending_operand is None

    def test_error_mid_chain_drops_operand(self):
        engine = CalculatorEngine()
        assert press(engine, "1", "/", "0", "+") == "Error"
        assert engine.pending_operand is None
        assert engine.pending_operator == Operator.ADD

    def test_recovers_after_error(self):
        engine = CalculatorEngine()
        press(engine, "1", "/", "0", "=")
        assert press(engine, "6", "*", "7", "=") == "42"

    def test_equals_clears_pending_state(self):
        engine = CalculatorEngine()
        press(engine, "9", "-", "4", "=")
        assert engine.pending_operator is None
        assert engine.pending_operand is None
        assert engine.awaiting_new_entry is True

    def test_equals_without_operator(self):
        engine = CalculatorEngine()
        assert press(engine, "12", "=") == "12"
        assert engine.pending_operand is None

    def test_digit_after_equals_starts_fresh(self):
        engine = CalculatorEngine()
        press(engine, "5", "+", "3", "=")
        assert press(engine, "2") == "2"

    def test_repeated_operator_reanchors_operand(self):
        engine = CalculatorEngine()
        press(engine, "5", "+")
        press(engine, "*")
        assert engine.pending_operand == 5
        assert engine.pending_operator == Operator.MULTIPLY
        assert press(engine, "3", "=") == "15"

    def test_tied_result_rounds_up(self):
        engine = CalculatorEngine()
        assert press(engine, "1234567890124", "+", "1", "=") == "1234567890130"

    def test_long_result_is_rounded(self):
        engine = CalculatorEngine()
        assert press(engine, "1", "/", "3", "=") == "0.333333333333"

    def test_float_noise_is_hidden(self):
        engine = CalculatorEngine()
        assert press(engine, ".1", "+", ".2", "=") == "0.3"

    def test_unknown_operator_ignored(self):
        engine = CalculatorEngine()
        press(engine, "3")
        assert engine.apply_operator("^") == "3"
        assert engine.pending_operator is None
        assert engine.awaiting_new_entry is False


class TestEvaluate:
    @pytest.mark.parametrize("a", [0, 1, -2.5, 1e300])
    def test_division_by_zero(self, a):
        assert evaluate(a, 0, "/") == ERROR

    def test_basic_arithmetic(self):
        assert evaluate(5, 3, "+") == "8"
        assert evaluate(5, 3, "-") == "2"
        assert evaluate(5, 3, "*") == "15"
        assert evaluate(6, 3, "/") == "2"

    def test_text_operands_are_coerced(self):
        assert evaluate("2.5", "4", "*") == "10"

    def test_non_numeric_operand_is_error(self):
        assert evaluate("abc", 1, "+") == ERROR

    def test_none_operand_counts_as_zero(self):
        assert evaluate(None, 7, "+") == "7"

    def test_overflow_is_error(self):
        assert evaluate(1e308, 10, "*") == ERROR

    def test_unknown_operator_returns_b(self):
        assert evaluate(1, 9, "%") == "9"
        assert evaluate(1, 2 / 3, "%") == "0.6666666666666666"


class TestActions:
    def test_clear_all_resets_state(self):
        engine = CalculatorEngine()
        press(engine, "5", "+", "3")
        assert engine.clear_all() == "0"
        state = engine.state
        assert state.current_entry == "0"
        assert state.pending_operand is None
        assert state.pending_operator is None
        assert state.awaiting_new_entry is False

    def test_toggle_sign(self):
        engine = CalculatorEngine()
        press(engine, "12.5")
        assert engine.toggle_sign() == "-12.5"
        assert engine.toggle_sign() == "12.5"

    def test_toggle_sign_on_zero_is_noop(self):
        engine = CalculatorEngine()
        assert engine.toggle_sign() == "0"

    def test_toggle_sign_on_partial_zero(self):
        engine = CalculatorEngine()
        engine.input_digit(".")
        assert engine.toggle_sign() == "0"

    def test_percent(self):
        engine = CalculatorEngine()
        engine.clear_all()
        engine.input_digit("2")
        assert engine.percent() == "0.02"

    def test_percent_is_rounded(self):
        engine = CalculatorEngine()
        press(engine, "1", "/", "3", "=")
        assert engine.percent() == "0.00333333333333"

    def test_backspace(self):
        engine = CalculatorEngine()
        press(engine, "123")
        assert engine.backspace() == "12"
        assert engine.backspace() == "1"
        assert engine.backspace() == "0"
        assert engine.backspace() == "0"

    def test_backspace_leaves_lone_sign(self):
        engine = CalculatorEngine()
        press(engine, "5")
        engine.toggle_sign()
        assert engine.backspace() == "-"
        assert engine.input_digit("3") == "-3"

    def test_backspace_on_error_trims_text(self):
        engine = CalculatorEngine()
        press(engine, "1", "/", "0", "=")
        assert engine.backspace() == "Erro"
        assert engine.input_digit("4") == "4"

    def test_percent_tie_rounds_up(self):
        engine = CalculatorEngine()
        press(engine, "12345678901250")
        assert engine.percent() == "123456789013"


class TestDisplayCallback:
    def test_called_after_each_operation(self):
        seen = []
        engine = CalculatorEngine(on_display_changed=seen.append)
        press(engine, "5", "+", "3", "=")
        engine.clear_all()
        assert seen == ["5", "5", "3", "8", "0"]
