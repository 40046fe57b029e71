# coding= utf-8
"""
Implements a Postfix++ evaluator, i.e., an object capable of maintaining an
operand stack and a table of single-letter variables, and of running lines of
postfix code against them in a read-eval-print loop until told otherwise.

Usage should be as simple as:
    >>> import postfix
    >>> e = postfix.Evaluator()
    >>> e.evaluate("A 5 = A 2 *")
    >>> e.format_stack()
    '[10]'

Errors are raised as :exc:`postfix.EvalError` subclasses. The evaluator does
not clean up after them; the REPL (see :file:`postfix_repl.py`) reports the
error and clears the stack, leaving the variables alone.
"""
from postfix.parser import Parser, split
from postfix.evaluator import *
