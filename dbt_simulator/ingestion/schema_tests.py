"""Schema test discovery from dbt property YAML files.

Like the model parser this is an indentation scanner, not a YAML parser:
it tolerates files PyYAML would reject and only understands the common
``models: -> columns: -> tests:`` nesting.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from dbt_simulator.config import DEFAULT_TEST_KEYWORDS
from dbt_simulator.domain import SchemaTest
from dbt_simulator.vfs import VirtualFileSystem

YAML_SUFFIXES = (".yml", ".yaml")

# "- name: x" at or above this indent names a model, at or below the column
# indent it names a column of the current model.
MODEL_MAX_INDENT = 4
COLUMN_MIN_INDENT = 6

NAME_PATTERN = re.compile(r"^\s*-\s*name:\s*(\w+)")


def _test_pattern(keywords: Iterable[str]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(k) for k in keywords)
    return re.compile(rf"^\s*-\s*({alternatives})\b")


def scan_schema_file(
    content: str, keywords: Iterable[str] = DEFAULT_TEST_KEYWORDS
) -> list[SchemaTest]:
    """Extract tests from one YAML file's text."""
    keywords = list(keywords)
    if not keywords:
        return []
    test_pattern = _test_pattern(keywords)
    tests: list[SchemaTest] = []
    current_model: str | None = None
    current_column: str | None = None

    for line in content.splitlines():
        indent = len(line) - len(line.lstrip())

        name_match = NAME_PATTERN.match(line)
        if name_match:
            name = name_match.group(1)
            if indent <= MODEL_MAX_INDENT:
                current_model = name
                current_column = None
                continue
            if indent >= COLUMN_MIN_INDENT and current_model:
                current_column = name
                continue

        test_match = test_pattern.match(line)
        if test_match and current_model and current_column:
            tests.append(
                SchemaTest(
                    model_name=current_model,
                    column_name=current_column,
                    test_name=test_match.group(1),
                )
            )

    return tests


def parse_schema_tests(
    vfs: VirtualFileSystem, keywords: Iterable[str] = DEFAULT_TEST_KEYWORDS
) -> list[SchemaTest]:
    """Collect tests from every YAML file in the file system, in path order."""
    keywords = list(keywords)
    tests: list[SchemaTest] = []
    for path in vfs.paths(suffixes=YAML_SUFFIXES):
        tests.extend(scan_schema_file(vfs[path], keywords))
    return tests
