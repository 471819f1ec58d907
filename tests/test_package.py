import warnings
from pathlib import Path

import creditcheck


def test_package_sources_compile_without_warnings():
    package_dir = Path(creditcheck.__file__).parent
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        for path in sorted(package_dir.rglob("*.py")):
            compile(path.read_text(encoding="utf-8"), str(path), "exec")


def test_package_docstring_keeps_diagram():
    assert "\\" in creditcheck.__doc__
