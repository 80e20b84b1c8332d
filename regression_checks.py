from calculator_session import CalculatorSession
from calculator_engine import DIVISION_BY_ZERO, NEGATIVE_ROOT
from number_formatter import MAX_DISPLAY_LENGTH
import sys


def _walk(tokens: list[str]):
	session = CalculatorSession()
	states = []

	for token in tokens:
		session.press(token)
		states.append((token, session.state))

	return session.view, states


def inspect_tokens(tokens: list[str]) -> None:
	"""Imprime el estado de la calculadora tras cada token."""
	view, states = _walk(tokens)

	print("Token inspection")
	print(f"tokens:  {' '.join(tokens)}")
	for token, state in states:
		print(
			f"  {token:>4} -> display={state.display!r} operand={state.operand!r} "
			f"operator={state.operator!r} waiting={state.waiting}"
		)

	print(f"final display: {view.display}")
	print("history:")
	for entry in view.history:
		print(f"  {entry}")


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	view, _ = _walk(["7", "+", "3", "="])
	expected_actual.append(("7 + 3 =", "10", view.display))
	checks.append(("sum lands in history", view.history[:1] == ["7 + 3 = 10"]))

	view, _ = _walk(["5", "÷", "0", "="])
	expected_actual.append(("5 ÷ 0 =", DIVISION_BY_ZERO, view.display))

	view, _ = _walk(["9", "x²"])
	expected_actual.append(("9 x²", "81", view.display))
	checks.append(("square lands in history", view.history[:1] == ["x²(9) = 81"]))

	view, states = _walk(["1", "2", "3", "+", "4", "+", "="])
	checks.append((
		"second operator folds the running total",
		states[5][1].display == "127" and states[5][1].operand == "127",
	))
	expected_actual.append(("123 + 4 + =", "254", view.display))

	view, _ = _walk([".", "."])
	expected_actual.append((". .", "0.", view.display))

	view, _ = _walk(["5", "±", "DEL"])
	expected_actual.append(("-5 DEL", "0", view.display))

	view, _ = _walk(["2", "±", "√"])
	expected_actual.append(("√-2", NEGATIVE_ROOT, view.display))

	view, _ = _walk(["0", "1/x"])
	expected_actual.append(("1/x of 0", DIVISION_BY_ZERO, view.display))

	view, _ = _walk(["5", "0", "%"])
	expected_actual.append(("50 %", "5", view.display))

	view, _ = _walk(["1", "÷", "3", "="])
	expected_actual.append(("1 ÷ 3 =", "0.33333333333333", view.display))

	view, _ = _walk(["5", "÷", "0", "=", "+", "1", "="])
	expected_actual.append(("error cascades", "Error", view.display))

	view, _ = _walk(["1"] * 20)
	checks.append(("typing stops at the display limit", len(view.display) == MAX_DISPLAY_LENGTH))

	view, _ = _walk(["9"] * 16 + ["x²"] * 6)
	checks.append(("huge squares stay inside the display", len(view.display) <= MAX_DISPLAY_LENGTH))

	tokens = []
	for n in range(1, 8):
		tokens += ["C", str(n), "x²"]
	view, _ = _walk(tokens)
	checks.append(("history keeps five entries", len(view.history) == 5))
	checks.append(("newest history entry first", view.history[0] == "x²(7) = 49"))

	for label, expected, actual in expected_actual:
		checks.append((label, expected == actual))

	failed = [name for name, ok in checks if not ok]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	print("\nExpected vs Actual:")
	for label, expected, actual in expected_actual:
		status = "OK" if expected == actual else "FAIL"
		print(f"- {label}: {status}")
		print(f"  expected: {expected}")
		print(f"  actual:   {actual}")

	if failed:
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_checks.py
	#   python regression_checks.py --inspect 1 2 3 + 4 + =
	if "--inspect" in sys.argv:
		tokens = sys.argv[sys.argv.index("--inspect") + 1:]
		if not tokens:
			raise SystemExit("Missing tokens after --inspect")
		inspect_tokens(tokens)
	else:
		run_regressions()
