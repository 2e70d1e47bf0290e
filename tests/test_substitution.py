"""Tests for placeholder expansion and command tokenizing."""

from newnew.scaffold.substitution import expand_variables, tokenize_command


class TestExpandVariables:
    """Tests for expand_variables."""

    def test_replaces_placeholders(self) -> None:
        env = {"project_name": "demo", "project_type": "lib"}
        result = expand_variables("{project_name} is a {project_type}", env)
        assert result == "demo is a lib"

    def test_replaces_every_occurrence(self) -> None:
        assert expand_variables("{a}-{a}-{a}", {"a": "x"}) == "x-x-x"

    def test_empty_environment_is_noop(self) -> None:
        text = "fn main() { println!(\"{name}\"); }"
        assert expand_variables(text, {}) == text

    def test_text_without_placeholders_unchanged(self) -> None:
        text = "void setup() {\n    Serial.begin(9600);\n}\n"
        assert expand_variables(text, {"setup": "x", "name": "y"}) == text

    def test_unknown_placeholder_left_verbatim(self) -> None:
        assert expand_variables("{known} {unknown}", {"known": "k"}) == "k {unknown}"

    def test_substituted_values_not_rescanned(self) -> None:
        env = {"a": "{b}", "b": "B"}
        assert expand_variables("{a} {b}", env) == "{b} B"

    def test_value_containing_own_placeholder(self) -> None:
        assert expand_variables("{a}", {"a": "{a}{a}"}) == "{a}{a}"

    def test_similar_names_do_not_clash(self) -> None:
        env = {"project": "P", "project_name": "N", "project_dir": "/tmp/N"}
        result = expand_variables("{project} {project_name} {project_dir}", env)
        assert result == "P N /tmp/N"

    def test_keys_with_regex_characters(self) -> None:
        assert expand_variables("{a.b} {a+}", {"a.b": "1", "a+": "2"}) == "1 2"

    def test_no_escape_mechanism(self) -> None:
        assert expand_variables("{{name}}", {"name": "x"}) == "{x}"


class TestTokenizeCommand:
    """Tests for tokenize_command."""

    def test_simple_split(self) -> None:
        assert tokenize_command("cargo init --lib") == ["cargo", "init", "--lib"]

    def test_single_and_double_quotes(self) -> None:
        assert tokenize_command("a 'b c' \"d e\"") == ["a", "b c", "d e"]

    def test_whitespace_only_yields_nothing(self) -> None:
        assert tokenize_command("  ") == []
        assert tokenize_command("") == []

    def test_collapses_repeated_whitespace(self) -> None:
        assert tokenize_command("  git   add\t. ") == ["git", "add", "."]

    def test_opposite_quote_is_literal(self) -> None:
        assert tokenize_command("echo \"it's\" 'say \"hi\"'") == [
            "echo",
            "it's",
            'say "hi"',
        ]

    def test_quotes_join_adjacent_text(self) -> None:
        assert tokenize_command("--name='my app'") == ["--name=my app"]

    def test_backslash_is_literal(self) -> None:
        assert tokenize_command(r"echo a\ b") == ["echo", "a\\", "b"]

    def test_empty_quotes_dropped(self) -> None:
        assert tokenize_command("echo '' x") == ["echo", "x"]

    def test_unterminated_quote_runs_to_end(self) -> None:
        assert tokenize_command("echo 'a b") == ["echo", "a b"]

    def test_pipe_is_not_special(self) -> None:
        assert tokenize_command("echo a | wc") == ["echo", "a", "|", "wc"]
