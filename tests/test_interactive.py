"""
Tests for the interactive console session.
"""

import io

from vectorcalc.controller.calculator import FORMAT_ERROR_MESSAGE
from vectorcalc.controller.interactive import InteractiveSession


def run_session(lines, max_components=25):
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    session = InteractiveSession(stdin=stdin, stdout=stdout, max_components=max_components)
    exit_code = session.run()
    return session, exit_code, stdout.getvalue()


class TestInteractiveSession:
    """Tests for InteractiveSession."""

    def test_basic_session(self):
        _, exit_code, output = run_session(["(3; 4)", "(0; 1)", "c", "e", "k"])
        assert exit_code == 0
        assert "|A| = 5.0" in output
        assert "A + B = (3.0; 5.0)" in output

    def test_invalid_vector_is_requested_again(self):
        session, _, output = run_session(["(1; x)", "(1; 2)", "(3)", "k"])
        assert "ERROR! Make sure the vector is in the right format and has at most 25 components." in output
        assert session.text_a == "(1; 2)"
        assert session.text_b == "(3)"

    def test_redefine_vector(self):
        session, _, output = run_session(["(1; 0; 0)", "(0; 1; 0)", "a", "(0; 0; 2)", "d", "k"])
        assert session.text_a == "(0; 0; 2)"
        assert "|B| = 1.0" in output

    def test_cross_dimension_message(self):
        _, _, output = run_session(["(1; 0)", "(0; 1)", "h", "k"])
        assert "3D" in output

    def test_invalid_option(self):
        _, _, output = run_session(["(1)", "(2)", "z", "k"])
        assert "Invalid option! Try again..." in output

    def test_option_surrounding_whitespace_ignored(self):
        _, _, output = run_session(["(1; 0)", "(0; 1)", "   g  ", "k"])
        assert "A . B = 0.0" in output

    def test_options_are_case_sensitive(self):
        _, _, output = run_session(["(1; 0)", "(0; 1)", "G", "K", "k"])
        assert output.count("Invalid option! Try again...") == 2
        assert "A . B" not in output

    def test_end_of_input_ends_session(self):
        _, exit_code, output = run_session(["(1)"])
        assert exit_code == 0
        assert "Enter the value of B" in output

    def test_handle_option_quit(self):
        session = InteractiveSession(stdin=io.StringIO(), stdout=io.StringIO())
        assert session.handle_option("k") is False

    def test_handle_option_reports_errors_from_calculator(self):
        stdout = io.StringIO()
        session = InteractiveSession(stdin=io.StringIO(), stdout=stdout)
        session.text_a, session.text_b = "bad", "(1)"
        assert session.handle_option("c") is True
        assert FORMAT_ERROR_MESSAGE in stdout.getvalue()
