import json
from pathlib import Path

from typer.testing import CliRunner

from privatepen.cli import app
from tests.utils import make_sentences, write_sample

runner = CliRunner()


def test_cli_grammar_outputs_issues(tmp_path: Path):
    """grammar command prints the issue list as JSON."""
    store = tmp_path / "store.json"
    result = runner.invoke(app, ["grammar", "--text", "Double  space.", "--store", str(store)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["operation"] == "grammar"
    assert [issue["kind"] for issue in payload["result"]] == ["spacing"]


def test_cli_tone_records_stats(tmp_path: Path):
    """Each run updates the stats record, including the detected tone."""
    store = tmp_path / "store.json"
    result = runner.invoke(
        app, ["tone", "--text", "This is good and great!", "--store", str(store)]
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["result"]["sentiment"]["label"] == "positive"

    stats_result = runner.invoke(app, ["stats", "show", "--store", str(store)])
    stats = json.loads(stats_result.stdout)
    assert stats["sessionsCount"] == 1
    assert stats["totalWords"] == 5
    assert sum(stats["toneDistribution"].values()) == 1


def test_cli_no_stats_leaves_store_untouched(tmp_path: Path):
    store = tmp_path / "store.json"
    result = runner.invoke(
        app, ["bullets", "--text", "One. Two.", "--store", str(store), "--no-stats"]
    )
    assert result.exit_code == 0
    assert not store.exists()


def test_cli_simplify_includes_message(tmp_path: Path):
    result = runner.invoke(
        app,
        ["simplify", "--text", "We utilize tools.", "--store", str(tmp_path / "s.json")],
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["result"]["simplified"] == "We use tools."
    assert payload["message"] == "Simplified 1 complex terms!"


def test_cli_expand_reads_file_with_sidepanel_surface(tmp_path: Path):
    sample = write_sample(tmp_path / "long.txt", make_sentences(6, 10))
    result = runner.invoke(
        app,
        [
            "expand",
            "--input-path",
            str(sample),
            "--surface",
            "sidepanel",
            "--no-stats",
        ],
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["result"]["mode"] == "condense"
    assert payload["result"]["result"].count("• ") == 5


def test_cli_rejects_missing_or_blank_text(tmp_path: Path):
    assert runner.invoke(app, ["summarize", "--no-stats"]).exit_code != 0
    assert runner.invoke(app, ["summarize", "--text", "   ", "--no-stats"]).exit_code != 0
    sample = write_sample(tmp_path / "a.txt", "Hello.")
    both = runner.invoke(
        app, ["summarize", "--text", "Hi.", "--input-path", str(sample), "--no-stats"]
    )
    assert both.exit_code != 0


def test_cli_profile_saves_style_profile(tmp_path: Path):
    store = tmp_path / "store.json"
    sample = write_sample(tmp_path / "sample.txt", "The cat sat. The cat ran.")
    result = runner.invoke(
        app, ["profile", "--input-path", str(sample), "--store", str(store)]
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout)["commonPhrases"][0] == "the cat"
    saved = json.loads(store.read_text(encoding="utf-8"))
    assert saved["styleProfile"]["sampleSize"] == 2


def test_cli_snippets_and_settings(tmp_path: Path):
    store = str(tmp_path / "store.json")
    add = runner.invoke(
        app, ["snippets", "add", "--title", "Sig", "--content", "Regards", "--store", store]
    )
    assert add.exit_code == 0
    listed = json.loads(runner.invoke(app, ["snippets", "list", "--store", store]).stdout)
    assert listed[0]["title"] == "Sig"
    assert runner.invoke(app, ["snippets", "delete", "0", "--store", store]).exit_code == 0
    assert runner.invoke(app, ["snippets", "delete", "0", "--store", store]).exit_code != 0

    assert runner.invoke(app, ["settings", "set", "--theme", "dark", "--store", store]).exit_code == 0
    shown = json.loads(runner.invoke(app, ["settings", "show", "--store", store]).stdout)
    assert shown["theme"] == "dark"
    assert runner.invoke(app, ["settings", "set", "--theme", "neon", "--store", store]).exit_code != 0


def test_cli_stats_reset(tmp_path: Path):
    store = str(tmp_path / "store.json")
    runner.invoke(app, ["translate", "--text", "Hello world.", "--store", store])
    result = runner.invoke(app, ["stats", "reset", "--yes", "--store", store])
    assert result.exit_code == 0
    stats = json.loads(runner.invoke(app, ["stats", "show", "--store", store]).stdout)
    assert stats["sessionsCount"] == 0


def test_cli_print_config():
    """print-config dumps the preset values."""
    result = runner.invoke(app, ["print-config", "--surface", "sidepanel"])
    assert result.exit_code == 0
    assert "expand_word_threshold" in result.stdout
    assert "sidepanel" in result.stdout


def test_cli_store_commands_report_corrupt_record(tmp_path: Path):
    """Every store-backed command exits with an error message on an unreadable record."""
    store = tmp_path / "store.json"
    store.write_text("{bad", encoding="utf-8")
    sample = write_sample(tmp_path / "sample.txt", "The cat sat.")
    commands = [
        ["stats", "show"],
        ["stats", "reset", "--yes"],
        ["profile", "--input-path", str(sample)],
        ["snippets", "add", "--title", "Sig", "--content", "Regards"],
        ["snippets", "list"],
        ["snippets", "delete", "0"],
        ["settings", "show"],
        ["settings", "set", "--theme", "dark"],
    ]
    for command in commands:
        result = runner.invoke(app, [*command, "--store", str(store)])
        assert result.exit_code == 1, command
        assert "Could not read record" in result.output
        assert not isinstance(result.exception, ValueError)
    assert store.read_text(encoding="utf-8") == "{bad"


def test_cli_settings_show_rejects_invalid_stored_theme(tmp_path: Path):
    """A hand-edited theme that fails validation is reported, not raised."""
    store = tmp_path / "store.json"
    store.write_text(json.dumps({"theme": "neon"}), encoding="utf-8")
    result = runner.invoke(app, ["settings", "show", "--store", str(store)])
    assert result.exit_code == 1
    assert "neon" in result.output


def test_cli_profile_rejects_bad_config(tmp_path: Path):
    """profile validates --config like the analysis commands do."""
    sample = write_sample(tmp_path / "sample.txt", "The cat sat.")
    bad = write_sample(tmp_path / "bad.yaml", "- just\n- a list\n")
    result = runner.invoke(
        app,
        [
            "profile",
            "--input-path",
            str(sample),
            "--config",
            str(bad),
            "--store",
            str(tmp_path / "store.json"),
        ],
    )
    assert result.exit_code == 2
    assert not (tmp_path / "store.json").exists()
