# coding= utf-8
import re


WHITESPACE = r'\s*'
WORD = r'\S+'


class Parser(object):
    """
    Very simple Postfix++ parser -- it does nothing more than split a line of
    input on runs of whitespace and hand back the words one at a time.

    The parser is stateful, in as much as each instance thereof is given an
    initial string to operate on, and calls to next_word will advance the
    parser's position within that string (thus, the next call will start from
    where the previous left off).

    The parser does not classify anything: deciding whether "12", "A" or
    "SHOWVARS" is a number, a variable or a command is the evaluator's job.

    :meth:`next_word` raises :exc:`StopIteration` once the string has been
    completely consumed, which includes a string holding nothing but
    whitespace.  A blank line therefore yields no words at all.
    """
    def __init__(self, text):
        self.text = text
        self.pos = 0

    @property
    def is_finished(self):
        return self.pos >= len(self.text)

    def _consume(self, pattern):
        """
        Consume (advancing self.pos) some characters based on a regex, applied
        to the text starting from self.pos. Matches are only ever expected at
        the start of the remaining text.
        """
        if self.is_finished:
            raise StopIteration()
        found = re.compile(pattern).match(self.text, self.pos)
        if found is None:
            return None
        self.pos = found.end()
        return found.group()

    def parse_whitespace(self):
        return self._consume(WHITESPACE)

    def parse_word(self):
        return self._consume(WORD)

    def next_word(self):
        self.parse_whitespace()
        return self.parse_word()

    def generate(self):
        while True:
            try:
                yield self.next_word()
            except StopIteration:
                return


def split(text):
    """ The words of `text`, in order. """
    return list(Parser(text).generate())
