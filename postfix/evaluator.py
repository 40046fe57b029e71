# coding= utf-8
import decimal
import inspect
import logging
import math
import operator
import re
import sys
import types

from postfix.parser import split

logger = logging.getLogger(__name__)


NUMBER = 'NUMBER'
VARIABLE = 'VARIABLE'
OPERATOR = 'OPERATOR'
ASSIGN = 'ASSIGN'
COMMAND = 'COMMAND'
INVALID = 'INVALID'

OPERATORS = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': operator.truediv,
}
COMMANDS = ('PRINT', 'CLEAR', 'SHOWVARS', 'DUP', 'SWAP', 'DROP')

NO_VARIABLES = 'No vars defined.'

_VARIABLE_RE = re.compile(r'[A-Z]\Z')


class EvalError(Exception): pass
class InsufficientOperands(EvalError): pass
class InvalidAssignmentTarget(EvalError): pass
class DivisionByZero(EvalError): pass
class EmptyStack(EvalError): pass


class _TokenError(EvalError):
    """ An error about one particular token, which is kept as .token """
    message = '%s'

    def __init__(self, token):
        super(_TokenError, self).__init__(self.message % (token,))
        self.token = token


class InvalidToken(_TokenError):
    message = 'Invalid token: %s'


class UnknownToken(_TokenError):
    message = 'Unknown token: %s'


class UndefinedVariable(_TokenError):
    message = 'Variable %s is not defined.'


def is_number(word):
    if not isinstance(word, str) or not word.isascii() or '_' in word:
        return False
    try:
        return math.isfinite(float(word))
    except ValueError:
        return False


def is_variable(word):
    return isinstance(word, str) and _VARIABLE_RE.match(word) is not None


def classify(word):
    """
    Sorts a word into exactly one token kind, returning the (kind, word)
    pair. Anything the language does not know is INVALID rather than an
    error; it is up to the :class:`Evaluator` to refuse it.
    """
    if is_number(word):
        return NUMBER, word
    if is_variable(word):
        return VARIABLE, word
    if word in OPERATORS:
        return OPERATOR, word
    if word == '=':
        return ASSIGN, word
    if word in COMMANDS:
        return COMMAND, word
    return INVALID, word


def tokenize(text):
    return [classify(word) for word in split(text)]


def format_value(value):
    """
    Renders a stack entry or variable value for display. Words are shown
    exactly as they were typed. Computed numbers use plain decimal notation
    for magnitudes from 1e-6 up to 1e21 and exponent notation outside it,
    always with the shortest digits that round-trip.
    """
    if isinstance(value, str):
        return value
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == 0:
        return '0'
    text = repr(value)
    if 1e-6 <= abs(value) < 1e21:
        text = format(decimal.Decimal(text), 'f')
        if text.endswith('.0'):
            text = text[:-2]
    elif 'e' in text:
        mantissa, exponent = text.split('e')
        text = '%se%+d' % (mantissa, int(exponent))
    return text


def _command(name):
    """
    Creates a decorator that adds a .command member to its given func, which
    the :class:`Evaluator`'s __init__ looks for when building its command
    table.
    """
    def decorator(func):
        func.command = name
        return func
    return decorator


class Evaluator(object):
    """
    A Postfix++ evaluator. It has an operand stack and a symbol table, and
    runs one line of input against them at a time.

    The stack holds words exactly as they were pushed ("3", "A") plus the
    float results of arithmetic. Words are only resolved to numbers when an
    operator or assignment consumes them, so the same variable word may
    resolve differently before and after it is reassigned.

    Output of PRINT and SHOWVARS goes to `output`, standard output unless
    told otherwise.
    """
    def __init__(self, output=None):
        self.stack = []
        self.variables = {}
        self.output = output if output is not None else sys.stdout
        self.commands = {}

        for name, method in inspect.getmembers(self, inspect.ismethod):
            if hasattr(method, 'command'):
                self.commands[method.command] = method

        for symbol, func in OPERATORS.items():
            self.add_operator(symbol, func)

    def _emit(self, text):
        print(text, file=self.output)

    def _push(self, value):
        self.stack.append(value)

    def _pop(self):
        return self.stack.pop()

    def _require(self, count, error):
        if len(self.stack) < count:
            raise error

    def resolve(self, value):
        """
        The numeric value of a stack entry: computed numbers are themselves,
        number words are parsed and variable words are looked up.
        """
        if isinstance(value, float):
            return value
        if is_number(value):
            return float(value)
        if is_variable(value):
            if value not in self.variables:
                raise UndefinedVariable(value)
            return self.variables[value]
        raise InvalidToken(value)

    def add_operator(self, symbol, func):
        """
        Turns a two-argument function `func` into a stack operator.

        The operator pops b then a (so from the stack [a, b] the call is
        func(a, b)), resolves them and pushes the float result back.
        Division refuses a zero divisor, after both operands are gone.
        """
        def binary_op(self):
            self._require(2, InsufficientOperands("'%s' needs two operands." % symbol))
            b = self.resolve(self._pop())
            a = self.resolve(self._pop())
            if symbol == '/' and b == 0:
                raise DivisionByZero('Division by zero.')
            self._push(float(func(a, b)))
        self.commands[symbol] = types.MethodType(binary_op, self)

    def _assign(self):
        self._require(2, InsufficientOperands('Assignment needs a variable and value.'))
        value = self._pop()
        target = self._pop()
        if not is_variable(target):
            raise InvalidAssignmentTarget('LHS must be A-Z.')
        self.variables[target] = self.resolve(value)
        logger.debug('%s = %s', target, format_value(self.variables[target]))
        self.clear()

    @_command('PRINT')
    def _print_top(self):
        self._require(1, EmptyStack('Stack is empty.'))
        self._emit(format_value(self.stack[-1]))

    @_command('CLEAR')
    def clear(self):
        del self.stack[:]

    @_command('SHOWVARS')
    def _show_variables(self):
        if not self.variables:
            self._emit(NO_VARIABLES)
            return
        for name, value in self.variables.items():
            self._emit('%s = %s' % (name, format_value(value)))

    @_command('DUP')
    def _dupe_top_of_stack(self):
        self._require(1, EmptyStack('Stack is empty.'))
        self._push(self.stack[-1])

    @_command('SWAP')
    def _swap_top_of_stack(self):
        self._require(2, InsufficientOperands('Need two items to swap.'))
        last = self._pop()
        previous = self._pop()
        self.stack.extend((last, previous))

    @_command('DROP')
    def _drop_top_of_stack(self):
        self._require(1, EmptyStack('Stack is empty.'))
        self._pop()

    def format_stack(self):
        return '[%s]' % ', '.join(format_value(value) for value in self.stack)

    def evaluate(self, text=''):
        """
        Runs every word of `text` in order. The first error stops the line
        and propagates; whatever earlier words did to the stack and the
        symbol table stays done.
        """
        for kind, word in tokenize(text):
            self.interpret_one(kind, word)

    def interpret_one(self, kind, word):
        logger.debug('%s %s', kind, word)
        if kind == NUMBER or kind == VARIABLE:
            self._push(word)
        elif kind == ASSIGN:
            self._assign()
        elif kind == OPERATOR or kind == COMMAND:
            self.commands[word]()
        elif kind == INVALID:
            raise UnknownToken(word)
        else:
            raise EvalError('unknown token type: %s' % kind)
