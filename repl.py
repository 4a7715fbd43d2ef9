import logging

from prattcalc.parser import ParserError, parse
from prattcalc.runtime import evaluate
from prattcalc.tokenizer import TokenizerError, tokenize

PROMPT = "evaluator -> "
EXIT_COMMAND = "exit"

logger = logging.getLogger("repl")


def eval_line(line: str) -> str:
    try:
        tokens = tokenize(line)
    except TokenizerError as e:
        logger.debug("Tokenizer rejected %r", line)
        return str(e)

    try:
        expression = parse(tokens)
    except ParserError as e:
        logger.debug("Parser rejected %r", line)
        return str(e)

    try:
        result = evaluate(expression)
    except Exception as e:
        logger.debug("Evaluation failed for %r", line)
        return str(e)

    return str(result)


def main() -> None:
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            break
        if line == EXIT_COMMAND:
            break
        print(eval_line(line))


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    main()
