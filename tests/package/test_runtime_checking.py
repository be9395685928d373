import os
import subprocess
import sys
import textwrap
from pathlib import Path

import fallible

_SRC_DIR = Path(fallible.__file__).resolve().parents[1]

_REJECTS_NON_RESULTS = """
from types import SimpleNamespace

import fallible as f

transforms = [
    f.is_ok,
    f.and_then(f.ok),
    f.map(str),
    f.or_else(f.err),
    f.map_error(str),
    f.lazy_unwrap(lambda: 0),
    f.unwrap(0),
    f.cata(f.Catamorphism(ok=repr, err=len)),
    lambda value: f.unwrap(0, value),
]
for transform in transforms:
    try:
        transform(42)
    except f.NotAResultError as exc:
        assert exc.received == 42
    else:
        raise SystemExit("non-Result accepted")

try:
    f.cata(SimpleNamespace(ok=str, err=str))
except f.MatcherError:
    pass
else:
    raise SystemExit("non-mapping matcher accepted")

assert f.map(lambda x: x + 1, f.ok(5)) == f.ok(6)
print("rejected")
"""


def _run_python(code: str, **env: str) -> subprocess.CompletedProcess[str]:
    environ = {
        key: value
        for key, value in os.environ.items()
        if key not in ("FALLIBLE_BEARTYPE_THIS_PACKAGE", "FALLIBLE_BEARTYPE_ALL")
    }
    environ["PYTHONPATH"] = os.pathsep.join(
        filter(None, [str(_SRC_DIR), environ.get("PYTHONPATH", "")])
    )
    environ.update(env)
    return subprocess.run(
        [sys.executable, "-c", textwrap.dedent(code)],
        env=environ,
        capture_output=True,
        text=True,
        check=False,
    )


def test_non_results_rejected_with_package_checking_on() -> None:
    proc = _run_python(_REJECTS_NON_RESULTS, FALLIBLE_BEARTYPE_THIS_PACKAGE="1")
    assert proc.returncode == 0, proc.stderr
    assert "rejected" in proc.stdout


def test_package_toggle_enables_checking() -> None:
    code = """
    from beartype.roar import BeartypeCallHintParamViolation

    import fallible

    try:
        fallible.MatcherError(["ok"], 5)
    except BeartypeCallHintParamViolation:
        print("checked")
    """
    proc = _run_python(code, FALLIBLE_BEARTYPE_THIS_PACKAGE="1")
    assert proc.returncode == 0, proc.stderr
    assert "checked" in proc.stdout


def test_package_checking_is_off_by_default() -> None:
    code = """
    import fallible

    fallible.MatcherError(["ok"], 5)
    print("unchecked")
    """
    proc = _run_python(code)
    assert proc.returncode == 0, proc.stderr
    assert "unchecked" in proc.stdout


def test_all_toggle_reports_violations_as_warnings() -> None:
    code = """
    import warnings

    import fallible

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        fallible.MatcherError(["ok"], 5)

    if any(issubclass(w.category, UserWarning) and "reason" in str(w.message) for w in caught):
        print("warned")
    """
    proc = _run_python(code, FALLIBLE_BEARTYPE_ALL="1")
    assert proc.returncode == 0, proc.stderr
    assert "warned" in proc.stdout


def test_import_survives_missing_beartype() -> None:
    code = """
    import sys

    sys.modules["beartype"] = None

    import fallible

    print(fallible.unwrap(0, fallible.err("bad")))
    """
    proc = _run_python(code, FALLIBLE_BEARTYPE_THIS_PACKAGE="1", FALLIBLE_BEARTYPE_ALL="1")
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.strip() == "0"
