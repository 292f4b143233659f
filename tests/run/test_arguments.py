"""Tests for runspine.run.arguments: the shell/exec argument list union."""

from __future__ import annotations

import pytest

from runspine.core.errors import ErrorCategory, MalformedArgumentListError
from runspine.run.arguments import Arguments, ArgumentsForm


class TestForm:
    def test_shell_form(self):
        assert Arguments.of_shell("echo hi").form is ArgumentsForm.SHELL

    def test_exec_form(self):
        assert Arguments.of_exec(["echo", "hi"]).form is ArgumentsForm.EXEC

    def test_neither_form(self):
        assert Arguments().form is None

    def test_both_forms(self):
        assert Arguments(shell="a", exec=("b",)).form is None

    def test_of_exec_copies_into_tuple(self):
        tokens = ["sh", "-c"]
        args = Arguments.of_exec(tokens)
        tokens.append("oops")
        assert args.exec == ("sh", "-c")


class TestTokenize:
    def test_splits_on_whitespace(self):
        assert Arguments.of_shell("java  -jar app.jar").tokenize() == ["java", "-jar", "app.jar"]

    def test_honors_quotes(self):
        args = Arguments.of_shell("""sh -c 'echo "hello world"'""")
        assert args.tokenize() == ["sh", "-c", 'echo "hello world"']

    def test_honors_backslash_escape(self):
        assert Arguments.of_shell(r"ls my\ dir").tokenize() == ["ls", "my dir"]

    def test_exec_form_passes_tokens_through(self):
        args = Arguments.of_exec(["echo", "a b", "'c'"])
        assert args.tokenize() == ["echo", "a b", "'c'"]

    def test_unbalanced_quote_raises(self):
        with pytest.raises(MalformedArgumentListError, match="tokenize"):
            Arguments.of_shell("echo 'unterminated").tokenize()

    def test_empty_string_gives_no_tokens(self):
        assert Arguments.of_shell("").tokenize() == []


class TestValidate:
    def test_valid_shell(self):
        Arguments.of_shell("/bin/sh").validate()

    def test_valid_exec(self):
        Arguments.of_exec(["/bin/sh", "-c", "true"]).validate()

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_blank_shell_rejected(self, text):
        with pytest.raises(MalformedArgumentListError, match="no tokens"):
            Arguments.of_shell(text).validate("entrypoint")

    @pytest.mark.parametrize("text", ["''", "\"\" -c run", "'' ''"])
    def test_empty_first_shell_token_rejected(self, text):
        with pytest.raises(MalformedArgumentListError, match="empty token") as exc_info:
            Arguments.of_shell(text).validate("cmd")
        assert exc_info.value.context.field == "cmd"

    def test_quoted_empty_argument_after_program_is_valid(self):
        Arguments.of_shell("echo ''").validate("cmd")

    def test_unbalanced_quotes_rejected_with_field(self):
        with pytest.raises(MalformedArgumentListError) as exc_info:
            Arguments.of_shell('echo "oops').validate("cmd")
        assert exc_info.value.context.field == "cmd"

    def test_neither_form_rejected(self):
        with pytest.raises(MalformedArgumentListError, match="either a shell or an exec"):
            Arguments().validate()

    def test_conflicting_forms_rejected(self):
        with pytest.raises(MalformedArgumentListError, match="mutually exclusive"):
            Arguments(shell="echo", exec=("echo",)).validate("cmd")

    def test_empty_exec_rejected(self):
        with pytest.raises(MalformedArgumentListError, match="exec form is empty"):
            Arguments.of_exec([]).validate()

    @pytest.mark.parametrize("tokens", [["echo", None], ["", "x"], ["a", "", "b"]])
    def test_exec_with_empty_token_rejected(self, tokens):
        with pytest.raises(MalformedArgumentListError, match="is empty"):
            Arguments.of_exec(tokens).validate("entrypoint")

    def test_error_is_config_category(self):
        with pytest.raises(MalformedArgumentListError) as exc_info:
            Arguments.of_shell("").validate("entrypoint")
        err = exc_info.value
        assert err.category is ErrorCategory.CONFIG
        assert err.retryable is False
        assert err.context.field == "entrypoint"


class TestRendering:
    def test_to_json_shell(self):
        assert Arguments.of_shell("echo hi").to_json() == "echo hi"

    def test_to_json_exec(self):
        assert Arguments.of_exec(["echo", "hi"]).to_json() == ["echo", "hi"]

    def test_str_exec_is_shell_quoted(self):
        assert str(Arguments.of_exec(["echo", "a b"])) == "echo 'a b'"

    def test_frozen(self):
        args = Arguments.of_shell("echo")
        with pytest.raises(AttributeError):
            args.shell = "other"  # type: ignore[misc]
