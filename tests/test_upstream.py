"""Tests for the Gemini generation adapter."""
from types import SimpleNamespace

import pytest

from errors import GenerationError
from upstream import ChatGenerator, GeminiGenerator


class FakeModels:
    def __init__(self, text="Halo", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


def make_generator(settings, models):
    return GeminiGenerator(settings, client=SimpleNamespace(models=models))


def test_sends_fixed_model_temperature_and_instruction(settings):
    models = FakeModels()
    contents = [{"role": "user", "parts": [{"text": "Halo"}]}]

    assert make_generator(settings, models).generate(contents) == "Halo"

    call = models.calls[0]
    assert call["model"] == "gemini-test"
    assert call["contents"] == contents
    assert call["config"].temperature == pytest.approx(0.9)
    assert call["config"].system_instruction == "Jawab hanya menggunakan bahasa Indonesia."


def test_missing_text_becomes_empty(settings):
    assert make_generator(settings, FakeModels(text=None)).generate([]) == ""


def test_errors_are_wrapped(settings):
    models = FakeModels(error=RuntimeError("PERMISSION_DENIED"))

    with pytest.raises(GenerationError, match="PERMISSION_DENIED"):
        make_generator(settings, models).generate([])


def test_client_is_built_lazily(settings):
    generator = GeminiGenerator(settings)

    assert generator._client is None


def test_generator_must_implement_generate():
    with pytest.raises(TypeError):
        ChatGenerator()  # type: ignore
