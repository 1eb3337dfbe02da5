"""
End-to-end tests for the PreprocessEngine.

Verifies splicing of replacements into the original text, exclusion of
ignored paths, no-op behaviour and idempotence.
"""

import pytest

from lucide_preprocess.config import PreprocessConfig
from lucide_preprocess.core.engine import PreprocessEngine, TransformResult


@pytest.fixture
def engine():
  return PreprocessEngine()


def test_single_import_with_single_icon(engine):
  result = engine.transform('import { Icon1 } from "lucide-svelte";', "file.svelte")

  assert isinstance(result, TransformResult)
  assert result.code == 'import Icon1 from "lucide-svelte/icons/icon-1";'
  assert result.rewritten == 1
  assert result.changed


def test_single_import_with_types_aliases_and_icons(engine):
  code = """
\t\timport { type One, Icon1, type Icon2, Icon3 as Icon4, Icon5, A as B } from "lucide-svelte";
\t\t"""
  result = engine.transform(code, "file.svelte")

  assert result.code == """
\t\timport type { One, Icon2 } from "lucide-svelte";
\t\timport Icon1 from "lucide-svelte/icons/icon-1";
\t\timport Icon3 as Icon4 from "lucide-svelte/icons/icon-3";
\t\timport Icon5 from "lucide-svelte/icons/icon-5";
\t\timport A as B from "lucide-svelte/icons/a";
\t\t"""


def test_multiple_imports_with_no_valid_ones(engine):
  code = """
\t\timport { Thing } from "another-package";
\t\timport Named from "another-package";
\t\timport { Thing2 } from "another-package";
\t\timport * as All from "another-package";
\t\t"""
  result = engine.transform(code, "file.svelte")

  assert result is not None
  assert result.code == code
  assert not result.changed


def test_multiple_imports_with_one_valid(engine):
  code = """
\t\timport { Thing } from "another-package";
\t\timport { Icon2 } from "lucide-svelte";
\t\timport { Thing2 } from "another-package";
\t\timport * as All from "another-package";
\t\t"""
  result = engine.transform(code, "file.svelte")

  assert result.code == """
\t\timport { Thing } from "another-package";
\t\timport Icon2 from "lucide-svelte/icons/icon-2";
\t\timport { Thing2 } from "another-package";
\t\timport * as All from "another-package";
\t\t"""


def test_multiple_imports_worst_case(engine):
  code = """
\t\timport { Thing } from "another-package";
\t\timport Named from "another-package";
\t\timport { Icon2 } from "lucide-react";
\t\timport { Thing2 } from "another-package";
\t\timport type { Thing3 } from "lucide-react";
\t\timport Icon4 from "lucide-svelte/icons/icon-4";
\t\timport { type One, Icon1, Icon3 as Icon4, Icon5 } from "lucide-svelte";
\t\timport * as All from "another-package";
\t\t"""
  result = engine.transform(code, "file.svelte")

  assert result.rewritten == 2
  assert result.code == """
\t\timport { Thing } from "another-package";
\t\timport Named from "another-package";
\t\timport Icon2 from "lucide-react/dist/esm/icons/icon-2";
\t\timport { Thing2 } from "another-package";
\t\timport type { Thing3 } from "lucide-react";
\t\timport Icon4 from "lucide-svelte/icons/icon-4";
\t\timport type { One } from "lucide-svelte";
\t\timport Icon1 from "lucide-svelte/icons/icon-1";
\t\timport Icon3 as Icon4 from "lucide-svelte/icons/icon-3";
\t\timport Icon5 from "lucide-svelte/icons/icon-5";
\t\timport * as All from "another-package";
\t\t"""


def test_multiline_statement_is_rewritten_in_place(engine):
  code = """<script>
\timport {
\t\tIcon1,
\t\tIcon2,
\t} from "lucide-svelte";
\tlet x = 1;
</script>
"""
  result = engine.transform(code, "src/App.svelte")

  assert result.code == """<script>
\timport Icon1 from "lucide-svelte/icons/icon-1";
\timport Icon2 from "lucide-svelte/icons/icon-2";
\tlet x = 1;
</script>
"""


@pytest.mark.parametrize(
  "path",
  [
    "/project/node_modules/lucide-svelte/dist/index.js",
    "/project/.svelte-kit/generated/root.svelte",
    "C:\\project\\node_modules\\pkg\\index.js",
  ],
)
def test_ignored_paths_return_none(engine, path):
  assert engine.transform('import { Icon1 } from "lucide-svelte";', path) is None


def test_custom_ignored_paths():
  engine = PreprocessEngine(PreprocessConfig(ignored_paths=("/vendor/",)))
  assert engine.transform('import { Icon1 } from "lucide-svelte";', "/app/vendor/x.js") is None
  assert engine.transform('import { Icon1 } from "lucide-svelte";', "/app/node_modules/x.js") is not None


def test_transform_is_idempotent(engine):
  code = """
import { type One, Icon1, Icon3 as Icon4 } from "lucide-react";
import { Icon2 } from '@lucide/svelte'
"""
  once = engine.transform(code, "a.ts").code
  twice = engine.transform(once, "a.ts")

  assert once != code
  assert twice.code == once
  assert twice.rewritten == 0


def test_empty_import_is_dropped(engine):
  result = engine.transform('import {} from "lucide-react";\nconst a = 1;\n', "a.ts")
  assert result.code == "\nconst a = 1;\n"


def test_empty_source(engine):
  result = engine.transform("", "a.ts")
  assert result.code == ""
  assert result.rewritten == 0
