"""Terminal prompt helper tests"""

from undercover import main


class TestAskCount:

    def setup_method(self):
        self.calls = []

    def _answer(self, monkeypatch, *answers):
        replies = iter(answers)

        def fake_ask(prompt, **kwargs):
            self.calls.append(kwargs)
            return next(replies)

        monkeypatch.setattr(main.IntPrompt, "ask", fake_ask)
        monkeypatch.setattr(main, "display_error", lambda error: None)

    def test_no_default_when_none_given(self, monkeypatch):
        self._answer(monkeypatch, 2)
        assert main.ask_count("Your vote", None, 1, 4) == 2
        assert self.calls == [{}]

    def test_passes_default(self, monkeypatch):
        self._answer(monkeypatch, 5)
        assert main.ask_count("Players", 5, 3, 12) == 5
        assert self.calls == [{"default": 5}]

    def test_repeats_until_in_range(self, monkeypatch):
        self._answer(monkeypatch, 0, 9, 3)
        assert main.ask_count("Your vote", None, 1, 4) == 3
        assert len(self.calls) == 3
