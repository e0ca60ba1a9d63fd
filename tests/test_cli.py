import json
import logging

import pytest

from solver import (
    InteractiveSolver, SolverSession, SolverStats, load_config, load_wordlists, logger,
    main, merge_wordlists, parse_feedback, run_benchmark,
)
from wordle_game import GREEN, YELLOW, GREY


def test_parse_feedback():
    assert parse_feedback("crane ryrgr") == (
        ("c", GREY), ("r", YELLOW), ("a", GREY), ("n", GREEN), ("e", GREY),
    )
    assert parse_feedback("  CRANE\tGGGGG ") == tuple((c, GREEN) for c in "crane")


@pytest.mark.parametrize("text", ["crane", "crane ryrgx", "cr4ne ryrgr", "crane ryrgrr"])
def test_parse_feedback_errors(text):
    with pytest.raises(ValueError):
        parse_feedback(text)


def test_interactive_session(words):
    inputs = iter(["space rrggg", "bad input", "trace rgggg", ""])
    output = []
    session = SolverSession(words)

    InteractiveSolver(session, suggestions=3, input_fn=lambda _: next(inputs),
                      output_fn=output.append).run()

    text = "\n".join(output)
    assert "3 candidates remain" in text
    assert "TRACE" in text
    assert "❌" in text
    assert "✓ Solution: GRACE" not in text
    assert session.candidates == ["grace", "brace"]
    assert output[-1] == "Session complete!"


def test_interactive_reports_solution(words):
    output = []
    session = SolverSession(words).apply_outcome(parse_feedback("space rrggg"),
                                                 parse_feedback("trace rgggg"),
                                                 parse_feedback("brace rgggg"))
    InteractiveSolver(session, output_fn=output.append).show_suggestions()
    assert output == ["✓ Solution: GRACE"]


def test_stats_summary(words, wordle):
    stats = run_benchmark(words, words)
    assert stats.total_solves == len(words)
    assert stats.wins == len(words)
    assert sum(stats.distribution()) == len(words)
    assert stats.distribution()[0] == 1  # "space" is the opening guess
    assert "SOLVER STATISTICS" in stats.get_summary()


def test_empty_stats():
    assert SolverStats().get_summary() == "No statistics available."
    assert SolverStats().to_dict()['average_guesses'] == 0.0


def test_benchmark_report(words, tmp_path):
    report_path = tmp_path / "reports" / "performance.json"
    run_benchmark(words, words, starting_word="crane", report_path=str(report_path))

    report = json.loads(report_path.read_text(encoding="utf-8"))
    assert report['starting_word'] == "crane"
    assert report['totals']['total_solves'] == len(words)
    assert all(game['guesses'][0] == "crane" for game in report['games'])


def test_load_wordlists(tmp_path):
    answers = tmp_path / "answers.txt"
    guesses = tmp_path / "allowed_guesses.txt"
    answers.write_text("Trace\n\ngrace\n", encoding="utf-8")
    guesses.write_text("crane\ntrace\n", encoding="utf-8")

    loaded_answers, loaded_guesses = load_wordlists(str(answers), str(guesses))
    assert loaded_answers == ["trace", "grace"]
    assert merge_wordlists(loaded_guesses, loaded_answers) == ["crane", "trace", "grace"]

    with pytest.raises(FileNotFoundError):
        load_wordlists(str(tmp_path / "missing.txt"), str(guesses))


def test_load_config(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[solver]\ndata_dir = words\nsuggestions = 3\nstarting_word = CRANE\n", encoding="utf-8")

    cfg = load_config(str(path))
    assert cfg.suggestions == 3
    assert cfg.starting_word == "crane"
    assert cfg.answers_file.startswith("words")
    assert load_config(str(tmp_path / "missing.ini")).suggestions == 10


@pytest.fixture
def restore_handlers():
    handlers = list(logger.logger.handlers)
    yield
    for handler in logger.logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.logger.handlers = handlers


def test_main_opening(words, tmp_path, monkeypatch, capsys, restore_handlers):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "answers.txt").write_text("\n".join(words), encoding="utf-8")
    (tmp_path / "guesses.txt").write_text("crane\n", encoding="utf-8")

    main(["--opening", "--answers", "answers.txt", "--guesses", "guesses.txt", "-n", "2"])
    main(["--opening", "--answers", "answers.txt", "--guesses", "guesses.txt", "-n", "2"])

    out = capsys.readouterr().out
    assert "BEST OPENING WORDS" in out
    assert "SPACE" in out
    assert (tmp_path / "logs").is_dir()
    file_handlers = [h for h in logger.logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1


def test_main_without_action_writes_no_logs(tmp_path, monkeypatch, capsys, restore_handlers):
    monkeypatch.chdir(tmp_path)
    main([])
    assert "usage" in capsys.readouterr().out
    assert not (tmp_path / "logs").exists()


def test_main_rejects_zero_suggestions(tmp_path, monkeypatch, restore_handlers):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit):
        main(["--opening", "-n", "0"])
    assert not (tmp_path / "logs").exists()


def test_interactive_clamps_suggestions(words):
    output = []
    session = SolverSession(words)
    InteractiveSolver(session, suggestions=0, output_fn=output.append).show_suggestions()
    assert "SPACE" in "\n".join(output)
