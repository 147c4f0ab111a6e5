from linecalc.nodes import depth, render
from linecalc.parser import ParserError, parse
from linecalc.runtime import CalcRuntimeError, evaluate
from linecalc.tokenizer import TokenizerError, tokenize

for code in [
    "5",
    "1 + 1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "10 - 2 - 3",
    "7 / 2",
    "-7 / 2",
    "2147483647 + 1",
    "5 / 0",
    "(1 + 2",
    "1 + 2 =",
    "1 + a",
    "",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
    except TokenizerError as e:
        print(e)
        continue

    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    try:
        expression = parse(tokens)
    except ParserError as e:
        print(e)
        continue
    print(f"ast: {render(expression)} (depth {depth(expression)})")

    try:
        print(f"result: {evaluate(expression)}")
    except CalcRuntimeError as e:
        print(e)
