import argparse
import logging
import sys
import threading

from linecalc.config import DEFAULT_CONFIG, CalculatorConfig
from linecalc.serial import CharacterSink, LineAssembler, LineQueue
from linecalc.session import Session


def read_stdin(assembler: LineAssembler, lines: LineQueue) -> None:
    while chunk := sys.stdin.readline():
        assembler.feed(chunk)
    assembler.feed("\n")
    lines.close()


if __name__ == "__main__":
    argparser = argparse.ArgumentParser(description="Interactive integer calculator")
    argparser.add_argument("--queue-size", type=int, default=DEFAULT_CONFIG.queue_size)
    argparser.add_argument("--max-depth", type=int, default=DEFAULT_CONFIG.max_nesting_depth)
    argparser.add_argument("-v", "--verbose", action="store_true")
    args = argparser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = CalculatorConfig(queue_size=args.queue_size, max_nesting_depth=args.max_depth)
    lines = LineQueue(maxsize=config.queue_size)
    assembler = LineAssembler(lines)

    threading.Thread(target=read_stdin, args=(assembler, lines), daemon=True).start()

    sink = CharacterSink(sys.stdout.write)
    Session(lines, sink, config).run()
    sys.stdout.flush()
