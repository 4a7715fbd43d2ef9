import math
import random
import re
import string
import warnings

from prattcalc.parser import ParserError
from prattcalc.runtime import calculate
from prattcalc.tokenizer import TokenizerError

warnings.filterwarnings("ignore")

ALPHABET = string.digits + ".e+-*/ "


def generate(length: int, rng: random.Random | None = None) -> str:
    return "".join((rng or random).choices(ALPHABET, k=length))


def eval_py(code: str) -> float | str:
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> float | str:
    try:
        return calculate(code)
    except (TokenizerError, ParserError) as e:
        return str(e)


def results_agree(res_py: float | str, res_my: float | str) -> bool:
    if isinstance(res_py, (int, float)) and isinstance(res_my, float):
        return math.isclose(float(res_py), res_my) or (math.isnan(res_py) and math.isnan(res_my))
    if isinstance(res_py, str) and isinstance(res_my, str):
        return True
    if isinstance(res_py, str) and isinstance(res_my, float):
        # python refuses what IEEE division and partial number parsing accept
        return "division by zero" in res_py or "invalid" in res_py or "leading zeros" in res_py
    return False


if __name__ == "__main__":
    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"/\s*/", code):
            continue  # avoid generating int devision (10 // 3)

        res_py = eval_py(code)
        res_my = eval_my(code)
        if results_agree(res_py, res_my):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
