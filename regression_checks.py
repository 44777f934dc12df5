from calculator_engine import CalculatorEngine
import sys


# Nombre de tecla → operación del motor
_KEY_ACTIONS = {
	"=": lambda engine: engine.equals(),
	"%": lambda engine: engine.percent(),
	"C": lambda engine: engine.clear(),
	"<": lambda engine: engine.backspace(),
}


def _press(engine: CalculatorEngine, key: str) -> None:
	if key in _KEY_ACTIONS:
		_KEY_ACTIONS[key](engine)
	elif key in ("+", "-", "×", "÷", "*", "/"):
		engine.input_operator(key)
	else:
		for char in key:
			engine.input_digit(char)


def _run(keys: str, engine: CalculatorEngine | None = None) -> CalculatorEngine:
	"""Pulsa las teclas separadas por espacios; '12' pulsa '1' y '2'."""
	engine = engine if engine is not None else CalculatorEngine()
	for key in keys.split():
		_press(engine, key)
	return engine


def inspect_keys(keys: str) -> None:
	"""Imprime el estado del motor después de cada tecla."""
	engine = CalculatorEngine()

	print("Key inspection")
	print(f"keys:     {keys}")
	for key in keys.split():
		_press(engine, key)
		print(
			f"  {key:>6} -> display={engine.display!r} "
			f"equation={engine.equation!r} finished={engine.finished}"
		)

	if engine.history:
		print("history:")
		for entry in engine.history:
			print(f"  {entry.equation} = {entry.result}")


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	engine = _run("2 + 3 × 4 =")
	expected_actual.append(("2 + 3 × 4 =", "20", engine.display))
	checks.append(("left-to-right fold ignores precedence", engine.display == "20"))
	checks.append(("history records full equation", engine.history[0].equation == "2 + 3 × 4"))

	engine = _run("5 ÷ 0 =")
	expected_actual.append(("5 ÷ 0 =", "0", engine.display))
	checks.append(("division by zero yields zero", engine.display == "0"))

	engine = _run("0.1 + 0.2 =")
	expected_actual.append(("0.1 + 0.2 =", "0.3", engine.display))
	checks.append(("rounding hides float noise", engine.display == "0.3"))

	engine = _run("1 ÷ 3 =")
	expected_actual.append(("1 ÷ 3 =", "0.33333333", engine.display))

	engine = _run("9 + - × 2 =")
	expected_actual.append(("9 + - × 2 =", "18", engine.display))
	checks.append(("last consecutive operator wins", engine.history[0].equation == "9 × 2"))

	engine = _run("7 + 3 = 2")
	checks.append(("digit after result starts fresh", engine.display == "2"))

	engine = _run("7 + 3 = × 4 =")
	expected_actual.append(("7 + 3 = × 4 =", "40", engine.display))
	checks.append(("operator after result chains onto it", engine.history[0].equation == "10 × 4"))

	engine = _run("1.2.3")
	checks.append(("second decimal point ignored", engine.display == "1.23"))

	engine = _run("200 + 50 %")
	checks.append(("percent divides display by 100", engine.display == "0.5"))
	checks.append(("percent leaves equation untouched", engine.equation == "200 + "))

	engine = _run("5 < < <")
	checks.append(("backspace stops at zero", engine.display == "0"))

	engine = _run("8 + 1 = <")
	checks.append(("backspace ignored after result", engine.display == "9"))

	engine = CalculatorEngine()
	for i in range(51):
		_run(f"{i} + 1 =", engine)
	checks.append(("history capped at 50", len(engine.history) == 50))
	checks.append(("newest history entry first", engine.history[0].equation == "50 + 1"))
	checks.append(("oldest history entry evicted", engine.history[-1].equation == "1 + 1"))

	failed = [name for name, ok in checks if not ok]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	print("\nExpected vs Actual:")
	for label, expected, actual in expected_actual:
		status = "OK" if expected == actual else "FAIL"
		print(f"- {label}: {status}")
		print(f"  expected: {expected}")
		print(f"  actual:   {actual}")

	if failed or any(expected != actual for _, expected, actual in expected_actual):
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


if __name__ == "__main__":
	# Uso rápido:
	#   python regression_checks.py
	#   python regression_checks.py --inspect "12 + 3 × 4 ="
	if "--inspect" in sys.argv:
		try:
			keys = sys.argv[sys.argv.index("--inspect") + 1]
		except (ValueError, IndexError):
			raise SystemExit("Missing key sequence after --inspect")

		inspect_keys(keys)
	else:
		run_regressions()
