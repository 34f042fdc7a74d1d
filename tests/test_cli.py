import builtins

import pytest

from flocon import cli


def _feeder(answers):
    remaining = list(answers)
    asked = []

    def prompt(text):
        asked.append(text)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return prompt, asked


@pytest.mark.parametrize("answer, expected", [("1", 1), ("2", 2), ("3", 3), (" 3 ", 3)])
def test_menu_returns_valid_choice(answer, expected):
    prompt, asked = _feeder([answer])
    written = []
    assert cli.menu(prompt, written.append) == expected
    assert len(asked) == 1
    assert "OPERATION FLOCON" in "".join(written)
    assert "MENU PRINCIPAL" in "".join(written)


def test_menu_reprompts_until_valid():
    prompt, asked = _feeder(["0", "abc", "4", "2"])
    written = []
    assert cli.menu(prompt, written.append) == 2
    assert len(asked) == 4
    text = "".join(written)
    assert text.count("Veuillez entrer une valeur correcte") == 3


def test_menu_uses_choice_prompt():
    prompt, asked = _feeder(["1"])
    choice = cli.menu(prompt, lambda _text: None)
    assert choice == 1
    assert asked == ["Votre choix : "]


def test_main_quits_on_three(monkeypatch, capsys):
    prompt, _ = _feeder(["3"])
    monkeypatch.setattr(builtins, "input", prompt)
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    assert out.endswith(cli.GOODBYE)


def test_main_invalid_then_quit(monkeypatch, capsys):
    prompt, asked = _feeder(["9", "3"])
    monkeypatch.setattr(builtins, "input", prompt)
    assert cli.main([]) == 0
    assert len(asked) == 2
    assert "Veuillez entrer une valeur correcte" in capsys.readouterr().out


def test_main_returns_one_on_end_of_input(monkeypatch):
    prompt, _ = _feeder([])
    monkeypatch.setattr(builtins, "input", prompt)
    assert cli.main([]) == 1


def test_main_rejects_bad_arguments():
    with pytest.raises(SystemExit):
        cli.main(["--seed", "not-a-number"])


def test_main_plays_a_lost_game_then_quits(monkeypatch, capsys):
    prompt, _ = _feeder(["1", "0", "3"])
    monkeypatch.setattr(builtins, "input", prompt)
    calls = []

    def fake_sleep(seconds):
        calls.append(seconds)
        if len(calls) > 100000:
            raise RuntimeError("game did not end")

    monkeypatch.setattr("time.sleep", fake_sleep)
    assert cli.main(["--seed", "7"]) == 0
    out = capsys.readouterr().out
    assert "Vous avez perdu" in out
    assert out.index("Vous avez perdu") < out.index(cli.GOODBYE)
    assert out.count("OPERATION FLOCON") == 2