import pytest
from rich.prompt import Confirm, Prompt


@pytest.fixture
def replies(monkeypatch):
    """Queue of answers handed out to ``Prompt.ask`` and ``Confirm.ask`` in order.

    Queue an exception class (e.g. ``EOFError``) to have the prompt raise it.
    """
    queue = []

    def answer(cls, question, *args, **kwargs):
        if not queue:
            pytest.fail(f"unexpected prompt: {question}")
        reply = queue.pop(0)
        if isinstance(reply, type) and issubclass(reply, BaseException):
            raise reply
        return reply

    monkeypatch.setattr(Prompt, "ask", classmethod(answer))
    monkeypatch.setattr(Confirm, "ask", classmethod(answer))
    return queue
