import io

import pytest

from dominion.player import main, run_session


def run(lines, seed=1):
    out = io.StringIO()
    run_session(seed, lines, out)
    return out.getvalue()


def test_greeting_and_exit():
    text = run(["exit\n", "whos\n"])
    assert text.startswith('Please enter a command or "help" for commands\n')
    assert "turn\n" not in text


def test_whos_and_num():
    text = run(["whos\n", "num\n"])
    assert "Player 0's turn\n" in text
    assert "There are 5 cards in your hand.\n" in text


def test_show_and_stat_need_started_game():
    text = run(["show\n", "stat\n"])
    assert "hand:" not in text
    assert "phase" not in text
    text = run(["init 2 0\n", "stat\n", "show\n"])
    assert "Action phase" in text
    assert "Player 0's hand:" in text


def test_end_before_init_is_ignored():
    text = run(["end\n", "whos\n"])
    assert "Player 0's turn\n" in text
    text = run(["init 2 0\n", "end\n", "whos\n"])
    assert "Player 1's turn number 0" in text
    assert "Player 1's turn\n" in text


def test_buy_failures():
    text = run(["buy 3\n", "buy 99\n"])
    assert "Player 0 cannot buy card 3, Province" in text
    assert "Player 0 cannot buy card 99, ?" in text


def test_invalid_init_does_not_start():
    text = run(["init 5 0\n", "stat\n"])
    assert "turn number" not in text
    assert "phase" not in text


def test_resign_prints_scores():
    text = run(["init 3 0\n", "resign\n", "whos\n"])
    assert "Player 2 has a score of" in text
    assert "Player 0's turn\n" not in text


def test_bot_game_runs_to_the_end():
    text = run(["init 2 2\n"])
    assert "Executing Bot Player 1" in text
    assert "the winner(s) are:" in text


def test_bad_seed_rejected():
    with pytest.raises(ValueError):
        run_session(0, [], io.StringIO())


@pytest.mark.parametrize("argv", [[], ["0"], ["abc"], ["1", "2"]])
def test_main_usage(argv, capsys):
    assert main(argv) == 0
    assert "Usage: player" in capsys.readouterr().out


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("whos\nexit\n"))
    assert main(["4"]) == 0
    assert "Player 0's turn" in capsys.readouterr().out