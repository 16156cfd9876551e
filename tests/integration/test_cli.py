from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"


def _run_cli(*args: str, cwd: Path, check: bool = True) -> subprocess.CompletedProcess[bytes]:
    command = [sys.executable, "-m", "sss_core.cli", *args]
    env = os.environ.copy()
    module_root = Path(__file__).resolve().parents[2] / "src"
    env["PYTHONPATH"] = (
        f"{module_root}{os.pathsep}{env['PYTHONPATH']}"
        if env.get("PYTHONPATH")
        else str(module_root)
    )
    env["XDG_CONFIG_HOME"] = str(cwd / "xdg")
    return subprocess.run(
        command,
        check=check,
        cwd=cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        env=env,
    )


def test_cli_reports_version(tmp_path: Path) -> None:
    result = _run_cli("version", cwd=tmp_path)
    assert result.stdout.decode("utf-8").strip() == "0.1.0"


def test_cli_reconstructs_each_file(tmp_path: Path) -> None:
    result = _run_cli(
        "reconstruct", str(FIXTURES / "testcase1.json"), str(FIXTURES / "testcase2.json"), cwd=tmp_path
    )
    lines = result.stdout.decode("utf-8").splitlines()
    assert lines == [
        "Reconstructed secret for testcase1.json is 3",
        f"Reconstructed secret for testcase2.json is {0xDEADBEEF}",
    ]


def test_cli_skips_failing_file_and_exits_nonzero(tmp_path: Path) -> None:
    result = _run_cli(
        "reconstruct",
        str(FIXTURES / "too_few.json"),
        str(FIXTURES / "testcase1.json"),
        cwd=tmp_path,
        check=False,
    )
    assert result.returncode == 1
    assert result.stdout.decode("utf-8").splitlines() == ["Reconstructed secret for testcase1.json is 3"]
    stderr = result.stderr.decode("utf-8")
    assert "Failed to reconstruct too_few.json: InsufficientShares" in stderr
    assert "reconstruct.failed" in stderr


def test_cli_json_output(tmp_path: Path) -> None:
    result = _run_cli(
        "reconstruct",
        "--json",
        str(FIXTURES / "line.yaml"),
        str(FIXTURES / "duplicate.json"),
        cwd=tmp_path,
        check=False,
    )
    payload = json.loads(result.stdout.decode("utf-8"))
    assert payload[0]["secret"] == "1"
    assert payload[1]["secret"] is None
    assert payload[1]["error"] == "DuplicateShare"


def test_cli_prime_override_and_duplicates_flag(tmp_path: Path) -> None:
    result = _run_cli(
        "reconstruct",
        "--prime",
        "2^127-1",
        "--allow-duplicates",
        str(FIXTURES / "duplicate.json"),
        cwd=tmp_path,
        check=False,
    )
    assert result.returncode == 1
    assert "DegenerateField" in result.stderr.decode("utf-8")


def test_cli_rejects_composite_prime(tmp_path: Path) -> None:
    result = _run_cli("reconstruct", "--prime", "15", str(FIXTURES / "line.yaml"), cwd=tmp_path, check=False)
    assert result.returncode == 2


@pytest.mark.parametrize(
    "args,expected",
    [
        (("decode", "213", "--base", "4"), "39"),
        (("decode", "DEADBEEF", "--base", "16"), str(0xDEADBEEF)),
        (("encode", "255", "--base", "16"), "ff"),
    ],
)
def test_cli_radix_commands(tmp_path: Path, args: tuple[str, ...], expected: str) -> None:
    result = _run_cli(*args, cwd=tmp_path)
    assert result.stdout.decode("utf-8").strip() == expected


def test_cli_decode_rejects_digit_outside_base(tmp_path: Path) -> None:
    result = _run_cli("decode", "G", "--base", "10", cwd=tmp_path, check=False)
    assert result.returncode == 1
    assert "MalformedValue" in result.stderr.decode("utf-8")


def test_cli_config_init_then_use(tmp_path: Path) -> None:
    target = tmp_path / "sss.yaml"
    _run_cli("config-init", str(target), cwd=tmp_path)
    target.write_text(target.read_text(encoding="utf-8").replace("reject_duplicates: true", "reject_duplicates: false"))
    shown = _run_cli("--config", str(target), "config-show", cwd=tmp_path)
    assert "reject_duplicates: false" in shown.stdout.decode("utf-8")
    result = _run_cli("--config", str(target), "reconstruct", str(FIXTURES / "duplicate.json"), cwd=tmp_path, check=False)
    assert "DegenerateField" in result.stderr.decode("utf-8")
