from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from cliptrim import cli
from cliptrim.config import Aggressiveness, TrimResult


@pytest.mark.integration
def test_main_passes_force_as_high_override(
    tmp_path: Path,
    mocker: MockerFixture,
) -> None:
    snippet = tmp_path / "snippet.txt"
    snippet.write_text('echo "hello"\nprint status', encoding="utf-8")

    transform = mocker.patch.object(
        cli,
        "transform",
        return_value=TrimResult(original="x", trimmed="y", was_transformed=True),
    )

    exit_code = cli.main(["--trim", str(snippet), "--aggressiveness", "low", "--force"])

    assert exit_code == cli.EXIT_TRANSFORMED
    _, kwargs = transform.call_args
    assert kwargs["aggressiveness_override"] is Aggressiveness.HIGH
    assert transform.call_args.args[1].aggressiveness is Aggressiveness.LOW


@pytest.mark.integration
def test_main_markdown_flag_skips_command_pipeline(
    tmp_path: Path,
    mocker: MockerFixture,
    capsys: pytest.CaptureFixture[str],
) -> None:
    answer = tmp_path / "answer.md"
    answer.write_text("## Steps\n- Install the\n  package\n- Run it", encoding="utf-8")
    transform = mocker.patch.object(cli, "transform")

    exit_code = cli.main(["--trim", str(answer), "--markdown"])

    assert exit_code == cli.EXIT_TRANSFORMED
    transform.assert_not_called()
    assert capsys.readouterr().out == "## Steps\n- Install the package\n- Run it\n"


@pytest.mark.integration
def test_main_writes_summary_to_stderr(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    snippet = tmp_path / "snippet.txt"
    snippet.write_text("python script.py \\\n  --flag yes", encoding="utf-8")

    exit_code = cli.main(["--trim", str(snippet), "--summary"])

    captured = capsys.readouterr()
    assert exit_code == cli.EXIT_TRANSFORMED
    assert captured.out == "python script.py --flag yes\n"
    assert "python script.py --flag yes · 27 chars" in captured.err


@pytest.mark.integration
def test_main_verbose_logs_to_file(tmp_path: Path) -> None:
    snippet = tmp_path / "snippet.txt"
    snippet.write_text("$ git status", encoding="utf-8")
    log_file = tmp_path / "cliptrim.log"

    cli.main(["--trim", str(snippet), "--verbose", "--log-file", str(log_file)])

    assert '"passes": ["prompts"]' in log_file.read_text(encoding="utf-8")
