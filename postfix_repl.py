import logging
import readline
import sys

import postfix

logger = logging.getLogger('postfix.repl')

PROMPT = '> '
BANNER = "Postfix++ Interpreter. Type 'exit' to quit."
FAREWELL = 'Goodbye.'
EXIT_WORD = 'exit'
ERROR_FORMAT = 'Error: %s'


def postfix_repl(evaluator=None, read=None, stdout=None, stderr=None):
    """
    Reads lines with `read` until "exit" or end of file, evaluating each one
    and echoing the stack afterwards. An error is reported on `stderr` and
    empties the stack; variables survive it.
    """
    read = read if read is not None else input
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    e = evaluator if evaluator is not None else postfix.Evaluator(output=stdout)

    print(BANNER, file=stdout)
    try:
        line = read(PROMPT)
        while line.strip().lower() != EXIT_WORD:
            try:
                e.evaluate(line)
            except postfix.EvalError as ex:
                logger.debug('%r failed: %s', line, ex)
                print(ERROR_FORMAT % ex, file=stderr)
                e.clear()
            else:
                print(e.format_stack(), file=stdout)
            line = read(PROMPT)
    except EOFError:
        pass  # perfectly acceptable

    print(FAREWELL, file=stdout)
    return e


def main():
    logging.basicConfig(level=logging.WARNING)
    postfix_repl()
    return 0


if __name__ == '__main__':
    sys.exit(main())
