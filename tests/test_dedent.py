import pytest
from json_to_javascript.dedent import dedent, template_bodies
from json_to_javascript.multiline import is_eligible, template_literal


class TestDedent:
	def test_strips_edges_and_shared_indent(self):
		assert dedent("\n    Hello\n    World\n  ") == "Hello\nWorld"

	def test_keeps_relative_indent(self):
		assert dedent("\n  a\n    b\n  c\n") == "a\n  b\nc"

	def test_blank_lines_lose_at_most_shared_indent(self):
		assert dedent("\n    a\n\n      \n    b\n") == "a\n\n  \nb"

	def test_only_one_edge_line_is_trimmed(self):
		assert dedent("\n\n  a\n\n") == "\na\n"

	def test_all_blank(self):
		assert dedent("\n\n") == ""

	def test_no_edges(self):
		assert dedent("a\n b") == "a\n b"

	@pytest.mark.parametrize(
		"value",
		["Hello\nWorld", "a\n  b\nc", "x\n\n\ty", "first line\n   \n last", "k: v\n- item\n  - nested"],
	)
	@pytest.mark.parametrize("indent", ["", "  ", "\t\t", "        "])
	def test_eligible_strings_survive_splicing(self, value: str, indent: str):
		assert is_eligible(value)
		literal = template_literal(value, indent)
		(body,) = template_bodies(literal)
		assert dedent(body) == value


def test_template_bodies_are_cooked():
	code = 'x = [ dedent`\n  a \\` b\n  \\${c}\n`, "plain",  dedent`\n  d\n  e\n`]'
	assert template_bodies(code) == ["\n  a ` b\n  ${c}\n", "\n  d\n  e\n"]
