import logging
from dataclasses import dataclass
from typing import Callable, Iterable

from linecalc.config import DEFAULT_CONFIG, CalculatorConfig
from linecalc.parser import ParserError, parse
from linecalc.runtime import DivisionByZeroError, evaluate
from linecalc.tokenizer import TokenizerError, tokenize

logger = logging.getLogger(__name__)

LINE_END = "\r\n"


@dataclass(frozen=True)
class Reply:
    text: str
    ok: bool


def calculate(line: str, config: CalculatorConfig = DEFAULT_CONFIG) -> Reply:
    """Evaluate one line, turning any error into the matching diagnostic"""
    try:
        value = _evaluate_line(line, config)
    except (TokenizerError, ParserError) as e:
        logger.debug("Rejected %r: %s", line, e.errmsg)
        return Reply(config.invalid_input_message, ok=False)
    except DivisionByZeroError as e:
        logger.debug("Failed to evaluate %r: %s", line, e.errmsg)
        return Reply(config.division_by_zero_message, ok=False)
    logger.debug("%r = %d", line, value)
    return Reply(str(value), ok=True)


def _evaluate_line(line: str, config: CalculatorConfig) -> int:
    expression = parse(tokenize(line, config.max_line_length), config.max_nesting_depth)
    try:
        return evaluate(expression)
    finally:
        # the tree must not outlive the line it was built from
        del expression


def format_reply(line: str, reply: Reply) -> str:
    if reply.ok:
        return f"{line} {reply.text}{LINE_END}"
    return f"{line} \n{reply.text}{LINE_END}"


class Session:
    def __init__(
        self,
        source: Iterable[str],
        sink: Callable[[str], None],
        config: CalculatorConfig = DEFAULT_CONFIG,
    ) -> None:
        self.source = source
        self.sink = sink
        self.config = config

    def run(self) -> int:
        """Process lines until the source runs dry or the exit command arrives, returns processed line count"""
        self.sink(self.config.greeting)
        processed = 0
        for line in self.source:
            if line == self.config.exit_command:
                logger.info("Exit command received after %d lines", processed)
                break
            self.sink(format_reply(line, calculate(line, self.config)))
            processed += 1
        self.sink(self.config.farewell)
        return processed
