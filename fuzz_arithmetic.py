import random
import re
import string
import warnings

from linecalc.parser import parse
from linecalc.runtime import evaluate
from linecalc.tokenizer import tokenize
from linecalc.utils import wrap_int32

warnings.filterwarnings("ignore")


def eval_py(code: str) -> int | str:
    """Reference result computed with Python's own arithmetic on small expressions"""
    try:
        res = eval(code.replace("=", ""))
    except Exception as e:
        return str(e)
    if isinstance(res, int):
        return wrap_int32(res)
    return f"not a number: {res!r}"


def eval_my(code: str) -> int | str:
    try:
        return evaluate(parse(tokenize(code)))
    except Exception as e:
        return str(e)


if __name__ == "__main__":
    alphabet = string.digits + "()+-*/ "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"/\s*/", code):
            continue  # avoid generating int division (10 // 3)

        if re.findall(r"(^|[-+*/(])\s*[-+]", code):
            continue  # unary plus and minus are not supported

        if re.findall(r"/", code):
            continue  # python's true division differs from truncating division on chained operations

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, int) and isinstance(res_my, int) and res_py == res_my:
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        if isinstance(res_py, str) and res_py.startswith("invalid syntax") and re.findall(r"\d\s+\d", code):
            continue  # spaces inside numbers are elided by the tokenizer
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
