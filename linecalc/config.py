from dataclasses import dataclass

# line buffer holds 32 chars including the terminator
LINE_BUFFER_SIZE = 32
MAX_LINE_LENGTH = LINE_BUFFER_SIZE - 1
MAX_NESTING_DEPTH = 64


@dataclass(frozen=True)
class CalculatorConfig:
    max_line_length: int = MAX_LINE_LENGTH
    max_nesting_depth: int = MAX_NESTING_DEPTH
    queue_size: int = 10
    exit_command: str = "exit"
    invalid_input_message: str = "invalid input"
    division_by_zero_message: str = "division by zero"
    greeting: str = (
        "Hello! I'm a simple calculator.\n"
        "Give me an expression or type 'exit' to leave and press enter:\n"
    )
    farewell: str = "Quitting...\n"


DEFAULT_CONFIG = CalculatorConfig()
