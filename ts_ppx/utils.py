"""
Utility functions for ts_ppx.
"""

import posixpath
import re

# Extension dropped from module specifiers
_TS_EXTENSION = re.compile(r"\.tsx?$")


def indent_continuation(text: str, width: int) -> str:
    """Indent every line but the first by ``width`` spaces.

    Used to nest a multi-line fragment after a prefix on its first line.
    Blank lines are left untouched.

    Examples:
        "z.object({\\n  a: z.string(),\\n})", 2 -> "z.object({\\n    a: z.string(),\\n  })"
    """
    prefix = " " * width
    lines = text.split("\n")
    return "\n".join([lines[0], *(prefix + line if line else line for line in lines[1:])])


def relative_import_path(source_path: str, target_path: str) -> str:
    """Module specifier importing ``source_path`` from the file ``target_path``.

    Examples:
        ("src/fruit.ppx.ts", "src/fruit.ts") -> "./fruit.ppx"
        ("src/fruit.ppx.ts", "src/testing/fruit.ts") -> "../fruit.ppx"

    Args:
        source_path: Path of the imported module
        target_path: Path of the importing file

    Returns:
        Relative specifier, always starting with "./" or "../", without extension
    """
    target_dir = posixpath.dirname(target_path) or "."
    path = posixpath.relpath(source_path, target_dir)
    if not path.startswith("../") and not path.startswith("./"):
        path = f"./{path}"
    return _TS_EXTENSION.sub("", path)


def named_import(exported_name: str, local_name: str, module_path: str) -> str:
    """Build a single named import statement.

    Examples:
        ("Fruit", "Fruit", "./fruit") -> "import { Fruit } from './fruit';"
        ("Fruit", "Food", "./fruit") -> "import { Fruit as Food } from './fruit';"
    """
    specifier = exported_name if exported_name == local_name else f"{exported_name} as {local_name}"
    return f"import {{ {specifier} }} from '{module_path}';"
