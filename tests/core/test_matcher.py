"""
Tests for the Import Statement Matcher.

Verifies that:
1. Single- and multi-line barrel imports are matched, globally and in order.
2. Every capture is exposed as a named field of `ImportMatch`.
3. Bare, wildcard, whole-statement type and foreign imports never match.
"""

from lucide_preprocess.core.matcher import ImportMatcher


def find_all(code):
  return list(ImportMatcher().finditer(code))


def test_single_import_statement():
  code = 'import { Icon1 } from "lucide-react";'
  matches = find_all(code)

  assert len(matches) == 1
  m = matches[0]
  assert m.leading_whitespace == ""
  assert m.raw_symbol_list == " Icon1 "
  assert m.quote_char == '"'
  assert m.library_prefix == "lucide-"
  assert m.framework_name == "react"
  assert m.library_root == "lucide-react"
  assert m.line_trailer == ";"
  assert m.source_span == (0, len(code))


def test_multiple_statements_with_multiple_components():
  code = """
\t\t\timport { Icon1 } from "lucide-react";
\t\t\timport { Icon2, Icon3 } from "lucide-react";
\t\t"""
  matches = find_all(code)

  assert [m.raw_symbol_list for m in matches] == [" Icon1 ", " Icon2, Icon3 "]
  # The first statement also captures the blank line before it
  assert matches[0].leading_whitespace == "\n\t\t\t"
  assert matches[1].leading_whitespace == "\t\t\t"


def test_only_icon_library_matches():
  code = """
\t\t\timport { Thing } from "another-package";
\t\t\timport { Icon2 } from "lucide-svelte";
\t\t"""
  matches = find_all(code)

  assert len(matches) == 1
  assert matches[0].raw_symbol_list == " Icon2 "
  assert matches[0].framework_name == "svelte"


def test_no_matching_statements():
  code = """
\t\t\timport { Thing } from "another-package";
\t\t\timport { Thing2 } from "another-package";
\t\t"""
  assert find_all(code) == []


def test_multiline_statement_with_weighted_spacing():
  code = """
\t\t\t\timport {
\t\t\t\t,
\t\t\t\t\tIcon1 ,
\t\t\t\t\tIcon2
\t\t\t\t\t,Icon3 ,
\t\t\t\t\tIcon4,
\t\t\t\t} from "lucide-react";
\t\t\t"""
  matches = find_all(code)

  assert len(matches) == 1
  assert matches[0].raw_symbol_list.strip() == (
    ",\n\t\t\t\t\tIcon1 ,\n\t\t\t\t\tIcon2\n\t\t\t\t\t,Icon3 ,\n\t\t\t\t\tIcon4,"
  )


def test_multiple_multiline_statements():
  code = """
\t\t\t\timport {
\t\t\t\t\tIcon1
\t\t\t\t} from "lucide-react";
\t\t\t\timport {
\t\t\t\t\tIcon2
\t\t\t\t} from "lucide-react";
\t\t\t"""
  matches = find_all(code)

  assert [m.raw_symbol_list.strip() for m in matches] == ["Icon1", "Icon2"]


def test_namespaced_package_and_single_quotes():
  code = "import { Icon1 } from '@lucide/svelte' // icons"
  matches = find_all(code)

  assert len(matches) == 1
  assert matches[0].library_prefix == "@lucide/"
  assert matches[0].framework_name == "svelte"
  assert matches[0].quote_char == "'"
  assert matches[0].line_trailer == " // icons"


def test_lab_packages_are_not_matched():
  code = 'import { burger } from "@lucide/lab";\nimport { burger } from "lucide-lab";\n'
  assert find_all(code) == []


def test_non_barrel_forms_are_not_matched():
  code = """
import Icon4 from "lucide-svelte/icons/icon-4";
import * as All from "lucide-react";
import type { LucideProps } from "lucide-react";
import { Icon1 } from "lucide-react/icons";
import { Icon1 } from "not-lucide-react";
"""
  assert find_all(code) == []


def test_per_symbol_type_modifiers_are_matched():
  code = 'import { type LucideProps, Icon1 } from "lucide-react";'
  matches = find_all(code)

  assert len(matches) == 1
  assert matches[0].raw_symbol_list == " type LucideProps, Icon1 "


def test_statement_must_begin_a_line():
  code = 'const x = 1; import { Icon1 } from "lucide-react";'
  assert find_all(code) == []


def test_is_multiline_reflects_leading_newline():
  code = '\n\nimport { A } from "lucide-react";\n  import { B } from "lucide-react";'
  first, second = find_all(code)

  assert first.is_multiline
  assert not second.is_multiline
