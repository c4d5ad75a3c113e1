import io
import json
from pathlib import Path

import pytest

from docs_index.cli import main


def _run(*argv: str) -> tuple[int, str]:
    out = io.StringIO()
    code = main(list(argv), out=out)
    return code, out.getvalue()


def _decode_all(output: str) -> list:
    decoder = json.JSONDecoder()
    payloads = []
    pos = 0
    while output[pos:].strip():
        while output[pos].isspace():
            pos += 1
        payload, pos = decoder.raw_decode(output, pos)
        payloads.append(payload)
    return payloads


class TestIndexCommand:
    def test_prints_summary(self, docs_dir: Path) -> None:
        code, output = _run("index", str(docs_dir))

        assert code == 0
        assert "Documents: 3" in output
        assert "Sections: 9" in output

    def test_reports_skipped_documents(self, docs_dir_with_broken_file: Path) -> None:
        code, output = _run("index", str(docs_dir_with_broken_file))

        assert code == 0
        assert "Skipped: 1" in output
        assert "broken.md" in output

    def test_json_summary(self, docs_dir_with_broken_file: Path) -> None:
        code, output = _run("index", str(docs_dir_with_broken_file), "--json")

        data = json.loads(output)
        assert code == 0
        assert data["documents"] == 3
        assert data["skipped"] == ["broken.md"]

    def test_missing_directory_exits_1(self, tmp_path: Path) -> None:
        code, _ = _run("index", str(tmp_path / "missing"))

        assert code == 1

    def test_interactive_answers_queries_and_reloads(
        self, docs_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (docs_dir / "extra.md").write_text("# Kafka\nstreams\n")
        monkeypatch.setattr("sys.stdin", io.StringIO("boto3\nstreams\n:reload\n"))

        code, output = _run("index", str(docs_dir), "--interactive")

        assert code == 0
        assert "cloud/aws.md :: What is Amazon S3?" in output
        assert "extra.md :: Kafka" in output
        assert output.count("Documents: 4") == 2

    def test_interactive_json_stays_machine_readable(
        self, docs_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("boto3\n:reload\n"))

        code, output = _run("index", str(docs_dir), "--interactive", "--json")

        payloads = _decode_all(output)
        assert code == 0
        assert [type(p) for p in payloads] == [dict, list, dict]
        assert payloads[1][0]["heading"] == "What is Amazon S3?"
        assert payloads[2]["documents"] == 3


class TestQueryCommand:
    def test_plain_text_results(self, docs_dir: Path) -> None:
        code, output = _run("query", "boto3", "--dir", str(docs_dir))

        assert code == 0
        assert output.startswith("1. [2] cloud/aws.md :: What is Amazon S3?")

    def test_json_results(self, docs_dir: Path) -> None:
        code, output = _run("query", "aws_instance", "--dir", str(docs_dir), "--json")

        results = json.loads(output)
        assert code == 0
        assert len(results) == 1
        assert results[0]["section_id"] == "cloud/aws.md#2"
        assert results[0]["score"] == 2

    def test_no_results(self, docs_dir: Path) -> None:
        code, output = _run("query", "nonexistent", "--dir", str(docs_dir))

        assert code == 0
        assert output.strip() == "No results."

    def test_empty_query_is_not_an_error(self, docs_dir: Path) -> None:
        code, output = _run("query", "", "--dir", str(docs_dir), "--json")

        assert code == 0
        assert json.loads(output) == []

    def test_limit(self, docs_dir: Path) -> None:
        _, output = _run(
            "query", "what is", "--dir", str(docs_dir), "--json", "--limit", "2"
        )

        assert len(json.loads(output)) == 2

    def test_invalid_limit_is_usage_error(self, docs_dir: Path) -> None:
        with pytest.raises(SystemExit) as exc:
            _run("query", "s3", "--dir", str(docs_dir), "--limit", "0")

        assert exc.value.code == 2

    def test_config_excerpt_length(self, docs_dir: Path, tmp_path: Path) -> None:
        config = tmp_path / "config.yaml"
        config.write_text("excerpt_length: 10\n")

        _, output = _run(
            "--config", str(config), "query", "gil", "--dir", str(docs_dir), "--json"
        )

        assert len(json.loads(output)[0]["excerpt"]) <= 10

    @pytest.mark.parametrize(
        "body", ["encoding: bogus-codec\n", "pattern: ''\n", "pattern: '../*.md'\n"]
    )
    def test_invalid_config_values_exit_1(
        self, docs_dir: Path, tmp_path: Path, body: str
    ) -> None:
        config = tmp_path / "config.yaml"
        config.write_text(body)

        code, output = _run(
            "--config", str(config), "query", "s3", "--dir", str(docs_dir)
        )

        assert code == 1
        assert output == ""

    def test_bad_config_exits_1(self, docs_dir: Path, tmp_path: Path) -> None:
        config = tmp_path / "config.yaml"
        config.write_text("unknown_key: 1\n")

        code, _ = _run("--config", str(config), "query", "s3", "--dir", str(docs_dir))

        assert code == 1


def test_no_command_prints_help() -> None:
    code, _ = _run()

    assert code == 2
