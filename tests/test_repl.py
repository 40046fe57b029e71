import io

import postfix
import postfix_repl


def run(*lines):
    """ Drives the REPL with `lines`, then end of file. """
    pending = list(lines)
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        if not pending:
            raise EOFError()
        return pending.pop(0)

    out = io.StringIO()
    err = io.StringIO()
    e = postfix_repl.postfix_repl(read=read, stdout=out, stderr=err)
    return e, out.getvalue().splitlines(), err.getvalue().splitlines(), prompts


class TestRepl():
    def test_banner_and_farewell(self):
        _, out, err, _ = run()

        assert out == [postfix_repl.BANNER, postfix_repl.FAREWELL]
        assert err == []

    def test_stack_echo(self):
        _, out, _, prompts = run('3 4', '+')

        assert out[1:-1] == ['[3, 4]', '[7]']
        assert prompts == ['> '] * 3

    def test_blank_line_echoes_stack(self):
        _, out, err, _ = run('1', '')

        assert out[1:-1] == ['[1]', '[1]']
        assert err == []

    def test_print_output_before_stack(self):
        _, out, _, _ = run('2 3 * PRINT')

        assert out[1:-1] == ['6', '[6]']

    def test_error_clears_stack(self):
        e, out, err, _ = run('A 5 =', '1 2', 'FOO', 'SHOWVARS')

        assert err == ['Error: Unknown token: FOO']
        assert out[1:-1] == ['[]', '[1, 2]', 'A = 5', '[]']
        assert e.stack == []
        assert e.variables == {'A': 5.0}

    def test_error_after_partial_line(self):
        e, out, err, _ = run('1 2 + 5 0 /')

        assert err == ['Error: Division by zero.']
        assert out[1:-1] == []
        assert e.stack == []

    def test_exit(self):
        e, out, _, prompts = run('1', '  ExIt  ', '2')

        assert out[1:] == ['[1]', postfix_repl.FAREWELL]
        assert e.stack == ['1']
        assert len(prompts) == 2

    def test_given_evaluator(self):
        e = postfix.Evaluator(output=io.StringIO())
        e.evaluate('B 9 =')
        lines = ['B PRINT', 'exit']

        out = io.StringIO()
        ret = postfix_repl.postfix_repl(evaluator=e,
                                        read=lambda prompt: lines.pop(0),
                                        stdout=out, stderr=io.StringIO())

        assert ret is e
        assert e.output.getvalue() == 'B\n'
        assert out.getvalue().splitlines()[1] == '[B]'

    def test_main(self, monkeypatch, capsys):
        lines = iter(['1 1 +', 'exit'])
        monkeypatch.setattr('builtins.input', lambda prompt='': next(lines))

        assert postfix_repl.main() == 0

        captured = capsys.readouterr()
        assert captured.out.splitlines() == [postfix_repl.BANNER, '[2]',
                                             postfix_repl.FAREWELL]
