"""Tests for the command-line entry point."""

import json

import pytest

from stressmate.main import build_parser, load_runtime_config, main


def run_cli(capsys, *argv):
    """Run main() and return (exit code, parsed stdout or raw text, stderr)."""
    code = main(list(argv))
    captured = capsys.readouterr()
    try:
        output = json.loads(captured.out)
    except ValueError:
        output = captured.out
    return code, output, captured.err


@pytest.mark.usefixtures("restore_root_logger")
class TestCommands:
    """Each subcommand prints one JSON document."""

    def test_stress(self, capsys):
        code, output, _ = run_cli(capsys, "stress", "--text", "팀장님과 갈등", "--negative", "갈등")

        assert code == 0
        assert output["score"] == 85
        assert output["category"] == "very_high"
        assert output["label"] == "매우 높음"
        assert len(output["tips"]) == 4
        assert output["guidance"]

    def test_stress_defaults_to_baseline(self, capsys):
        code, output, _ = run_cli(capsys, "stress")

        assert code == 0
        assert output["score"] == 50

    def test_finance(self, capsys):
        code, output, _ = run_cli(capsys, "finance")

        assert code == 0
        assert output["summary"]["income"] == 3_100_000
        assert output["summary"]["savings_rate"] == 66
        assert [item["category"] for item in output["summary"]["top_categories"]] == [
            "housing",
            "food",
            "shopping",
            "transport",
        ]
        assert len(output["tips"]) == 5

    def test_finance_named_fixture(self, capsys):
        code, output, _ = run_cli(capsys, "finance", "--fixture", "august")

        assert code == 0
        assert output["summary"]["expense"] == 1_067_900

    def test_chat_text_flag_parsed(self):
        args = build_parser().parse_args(["chat", "안녕", "--text", "마감", "--negative", "야근"])

        assert args.message == "안녕"
        assert args.text == "마감"
        assert args.negative == ["야근"]

    def test_jobs_profile_priorities(self, capsys):
        code, output, _ = run_cli(capsys, "jobs")

        assert code == 0
        assert [match["job"]["id"] for match in output] == ["j1", "j3", "j2", "j5", "j4", "j6"]
        assert output[0]["reasons"][0] == "집에서 매우 가까워요 (0.2km)"

    def test_jobs_priority_override(self, capsys):
        code, output, _ = run_cli(capsys, "jobs", "--priority", "morning")

        assert code == 0
        scores = {match["job"]["id"]: match["score"] for match in output}
        assert scores["j5"] == 77
        assert scores["j2"] == 70

    def test_chat_without_result(self, capsys):
        code, output, _ = run_cli(capsys, "chat", "내 지수 알려줘")

        assert code == 0
        assert output["reply"].startswith("아직 지수를 계산하지 않으셨어요.")

    def test_chat_with_result(self, capsys):
        code, output, _ = run_cli(
            capsys, "chat", "내 지수 알려줘", "--text", "갈등", "--negative", "갈등"
        )

        assert code == 0
        assert output["reply"] == "최근 지수는 85/100, 상태는 “매우 높음”였습니다."

    def test_logs_go_to_stderr(self, capsys):
        code, output, err = run_cli(capsys, "--log-level", "INFO", "stress")

        assert code == 0
        assert isinstance(output, dict)
        assert "event=cli.command.started" in err
        assert "command=stress" in err

    def test_json_log_format_from_env(self, capsys, monkeypatch):
        monkeypatch.setenv("STRESSMATE_LOG_FORMAT", "json")

        code, _, err = run_cli(capsys, "finance")

        assert code == 0
        first_line = json.loads(err.strip().splitlines()[0])
        assert first_line["service"] == "stressmate"
        assert first_line["command"] == "finance"


@pytest.mark.usefixtures("restore_root_logger")
class TestErrors:
    """Configuration problems exit with status 1."""

    def test_missing_config_file(self, capsys, tmp_path):
        code, _, err = run_cli(capsys, "--config", str(tmp_path / "missing.yaml"), "stress")

        assert code == 1
        assert "Configuration Error" in err
        assert "not found" in err

    def test_invalid_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("STRESSMATE_LOG_LEVEL", "LOUD")

        code, _, err = run_cli(capsys, "stress")

        assert code == 1
        assert "STRESSMATE_LOG_LEVEL" in err

    def test_unknown_ledger_rejected_by_parser(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["finance", "--fixture", "nope"])

        assert exc_info.value.code == 2

    def test_subcommand_required(self, capsys):
        with pytest.raises(SystemExit):
            main([])


class TestCheck:
    """The check subcommand validates without running anything."""

    def test_packaged_rules(self, capsys):
        code, output, _ = run_cli(capsys, "check")

        assert code == 0
        assert "valid" in output

    def test_explicit_invalid_file(self, capsys, tmp_path):
        broken = tmp_path / "broken.yaml"
        broken.write_text("stress: {}\n")

        code, output, _ = run_cli(capsys, "--config", str(broken), "check")

        assert code == 1
        assert "validation failed" in output


class TestRuntimeConfig:
    """Log level and format resolution."""

    def test_rule_file_defaults(self):
        _, env_config = load_runtime_config(None, None)

        assert env_config.log_level == "INFO"
        assert env_config.log_format == "key-value"

    def test_environment_over_rule_file(self, monkeypatch):
        monkeypatch.setenv("STRESSMATE_LOG_LEVEL", "warning")

        _, env_config = load_runtime_config(None, None)

        assert env_config.log_level == "WARNING"

    def test_cli_over_environment(self, monkeypatch):
        monkeypatch.setenv("STRESSMATE_LOG_LEVEL", "WARNING")

        _, env_config = load_runtime_config(None, "DEBUG")

        assert env_config.log_level == "DEBUG"


def test_parser_repeatable_factors():
    args = build_parser().parse_args(["stress", "--negative", "야근", "--negative", "갈등"])

    assert args.negative == ["야근", "갈등"]
    assert args.positive == []
    assert args.text is None
